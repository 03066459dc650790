# app/builder/editor.py
# Editor contract used by the builder session, plus an in-process editor
# that works on GrapesJS-shaped project data:
#   {"assets": [], "styles": [rule...], "pages": [{"frames": [{"component": wrapper}]}]}
# Components: {"type", "tagName", "attributes", "classes", "components", "content"}
# Style rules: {"selectors": [...], "style": {...}, "mediaText"?, "atRuleType"?}
from __future__ import annotations

import copy
import re
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Protocol

from markupsafe import escape

from app.builder.blocks import BLOCKS, BRAND_STYLES

# ---------------------------------
# Devices (mobile-first authoring)
# ---------------------------------
@dataclass(frozen=True)
class Device:
    name: str
    width: str
    width_media: str = ""  # empty -> base styles, no media query

    @property
    def media_text(self) -> str:
        return f"(min-width: {self.width_media})" if self.width_media else ""


DEVICES: tuple[Device, ...] = (
    Device("Mobile", "320px", ""),
    Device("Tablet", "768px", "768px"),
    Device("Desktop", "1024px", "1024px"),
)
DEFAULT_DEVICE = "Mobile"


@dataclass(frozen=True)
class StorageConfig:
    type: str  # "simple" when the host seeds the document, "remote" when it is fetched
    autosave: bool = False
    autoload: bool = False


# Always emitted first by get_css()
PROTECTED_CSS = "*{box-sizing:border-box;}body{margin:0;}"

VOID_TAGS = frozenset({"img", "br", "hr", "input", "meta", "link", "source"})
_ID_RE = re.compile(r"^c(\d+)$")
_MIN_WIDTH_RE = re.compile(r"min-width:\s*(\d+)")


def _class_name(cls: Any) -> str:
    # stored documents carry classes as {"name": ..., "active": ...} objects
    return cls["name"] if isinstance(cls, dict) else str(cls)


def _selector_text(sel: Any) -> str:
    """Plain strings are raw selectors; selector objects are classes, or ids with type 2."""
    if not isinstance(sel, dict):
        return str(sel)
    prefix = "#" if sel.get("type") == 2 else "."
    return f"{prefix}{sel['name']}"


class EditorDestroyedError(RuntimeError):
    pass


class Editor(Protocol):
    def load(self, project_data: dict[str, Any]) -> None: ...
    def get_project_data(self) -> dict[str, Any]: ...
    def get_html(self) -> str: ...
    def get_css(self) -> str: ...
    def set_device(self, name: str) -> None: ...
    def destroy(self) -> None: ...


def empty_project() -> dict[str, Any]:
    return {
        "assets": [],
        "styles": [],
        "pages": [{"frames": [{"component": {"type": "wrapper", "components": []}}]}],
    }


def starter_project() -> dict[str, Any]:
    """Empty page carrying the brand utility classes."""
    project = empty_project()
    project["styles"] = [{"selectors": [sel], "style": dict(style)} for sel, style in BRAND_STYLES]
    return project


class HeadlessEditor:
    """
    Deterministic editor: exports depend only on the project data, so
    load(get_project_data()) followed by another export yields the same
    html/css.
    """

    def __init__(self, *, devices: tuple[Device, ...] = DEVICES, storage: Optional[StorageConfig] = None):
        self.devices = {d.name: d for d in devices}
        self.storage = storage or StorageConfig(type="remote")
        self._project: Optional[dict[str, Any]] = empty_project()
        self._device = self.devices[DEFAULT_DEVICE] if DEFAULT_DEVICE in self.devices else devices[0]
        self._next_id = 1

    # ----- lifecycle -----
    @property
    def destroyed(self) -> bool:
        return self._project is None

    def _state(self) -> dict[str, Any]:
        if self._project is None:
            raise EditorDestroyedError("Editor instance has been destroyed")
        return self._project

    def destroy(self) -> None:
        self._project = None
        self._next_id = 1

    # ----- project data -----
    def load(self, project_data: dict[str, Any]) -> None:
        self._state()
        if not isinstance(project_data, dict):
            raise TypeError("Project data must be a JSON object")
        project = copy.deepcopy(project_data)
        project.setdefault("assets", [])
        project.setdefault("styles", [])
        if not project.get("pages"):
            project["pages"] = empty_project()["pages"]
        self._project = project
        self._next_id = self._max_id() + 1

    def get_project_data(self) -> dict[str, Any]:
        return copy.deepcopy(self._state())

    # ----- devices -----
    @property
    def device(self) -> Device:
        return self._device

    def set_device(self, name: str) -> None:
        self._state()
        if name not in self.devices:
            raise ValueError(f"Unknown device: {name}")
        self._device = self.devices[name]

    # ----- components -----
    def _wrapper(self) -> dict[str, Any]:
        page = self._state()["pages"][0]
        frame = page.setdefault("frames", [{}])[0]
        return frame.setdefault("component", {"type": "wrapper", "components": []})

    def _walk(self, node: dict[str, Any]) -> Iterator[dict[str, Any]]:
        yield node
        for child in node.get("components") or []:
            yield from self._walk(child)

    def _max_id(self) -> int:
        top = 0
        for page in self._state().get("pages") or []:
            for frame in page.get("frames") or []:
                root = frame.get("component")
                if not root:
                    continue
                for node in self._walk(root):
                    m = _ID_RE.match(str((node.get("attributes") or {}).get("id", "")))
                    if m:
                        top = max(top, int(m.group(1)))
        return top

    def _new_id(self) -> str:
        cid = f"c{self._next_id}"
        self._next_id += 1
        return cid

    def find(self, component_id: str) -> Optional[dict[str, Any]]:
        for node in self._walk(self._wrapper()):
            if (node.get("attributes") or {}).get("id") == component_id:
                return node
        return None

    def _require(self, component_id: str) -> dict[str, Any]:
        node = self.find(component_id)
        if node is None:
            raise KeyError(component_id)
        return node

    def _adopt(self, node: dict[str, Any], *, root: bool) -> None:
        """Inline `style` dicts become #id rules for the current device."""
        style = node.pop("style", None)
        if root or style:
            attrs = node.setdefault("attributes", {})
            attrs.setdefault("id", self._new_id())
        if style:
            self._put_rule([f"#{node['attributes']['id']}"], style)
        for child in node.get("components") or []:
            self._adopt(child, root=False)

    def add_block(self, block_id: str, **options: Any) -> str:
        """Appends a block from the library and returns its root component id."""
        self._state()
        if block_id not in BLOCKS:
            raise KeyError(f"Unknown block: {block_id}")
        node = BLOCKS[block_id].build(**options)
        self._adopt(node, root=True)
        self._wrapper().setdefault("components", []).append(node)
        return node["attributes"]["id"]

    def update_text(self, component_id: str, text: str) -> None:
        node = self._require(component_id)
        node["components"] = [{"type": "textnode", "content": text}]

    def remove_component(self, component_id: str) -> None:
        def _drop(parent: dict[str, Any]) -> bool:
            children = parent.get("components") or []
            for i, child in enumerate(children):
                if (child.get("attributes") or {}).get("id") == component_id:
                    del children[i]
                    return True
                if _drop(child):
                    return True
            return False

        if not _drop(self._wrapper()):
            raise KeyError(component_id)
        self._state()["styles"] = [
            r for r in self._state()["styles"] if f"#{component_id}" not in r.get("selectors", [])
        ]

    # ----- styles -----
    def _put_rule(self, selectors: list[str], style: dict[str, str]) -> None:
        media = self._device.media_text
        for rule in self._state()["styles"]:
            if rule.get("selectors") == selectors and rule.get("mediaText", "") == media:
                rule["style"].update(style)
                return
        rule: dict[str, Any] = {"selectors": list(selectors), "style": dict(style)}
        if media:
            rule["mediaText"] = media
            rule["atRuleType"] = "media"
        self._state()["styles"].append(rule)

    def set_style(self, component_id: str, style: dict[str, str]) -> None:
        """Styles the component for the current device only."""
        self._require(component_id)
        self._put_rule([f"#{component_id}"], style)

    # ----- export -----
    def _render(self, node: dict[str, Any]) -> str:
        if node.get("type") == "textnode":
            return str(escape(node.get("content", "")))
        inner = "".join(self._render(c) for c in node.get("components") or [])
        if not node.get("components") and node.get("content"):
            inner = str(escape(node["content"]))
        tag = node.get("tagName") or "div"
        attrs = dict(node.get("attributes") or {})
        if node.get("classes"):
            attrs["class"] = " ".join(_class_name(c) for c in node["classes"])
        rendered = "".join(
            f' {k}="{escape(v)}"' for k, v in sorted(attrs.items()) if v is not None
        )
        if tag in VOID_TAGS:
            return f"<{tag}{rendered}/>"
        return f"<{tag}{rendered}>{inner}</{tag}>"

    def get_html(self) -> str:
        wrapper = self._wrapper()
        return "".join(self._render(c) for c in wrapper.get("components") or [])

    @staticmethod
    def _rule_css(rule: dict[str, Any]) -> str:
        body = "".join(f"{k}:{v};" for k, v in sorted((rule.get("style") or {}).items()))
        if not body:
            return ""
        selectors = ",".join(_selector_text(s) for s in rule.get("selectors") or [])
        return f"{selectors}{{{body}}}"

    def get_css(self) -> str:
        base: list[str] = []
        media: dict[str, list[str]] = {}
        for rule in self._state()["styles"]:
            css = self._rule_css(rule)
            if not css:
                continue
            text = rule.get("mediaText") or ""
            if text:
                media.setdefault(text, []).append(css)
            else:
                base.append(css)

        def _width(text: str) -> int:
            m = _MIN_WIDTH_RE.search(text)
            return int(m.group(1)) if m else 0

        out = PROTECTED_CSS + "".join(base)
        for text in sorted(media, key=lambda t: (_width(t), t)):
            out += f"@media {text}{{{''.join(media[text])}}}"
        return out
