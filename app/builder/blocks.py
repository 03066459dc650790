# app/builder/blocks.py
# Block library offered by the page builder.
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

Component = dict[str, Any]


def text(content: str, *, tag: str = "div", style: Optional[dict[str, str]] = None) -> Component:
    node: Component = {
        "type": "text",
        "tagName": tag,
        "components": [{"type": "textnode", "content": content}],
    }
    if style:
        node["style"] = dict(style)
    return node


def el(
    tag: str,
    *children: Component,
    type: str = "default",
    classes: Optional[list[str]] = None,
    style: Optional[dict[str, str]] = None,
    attributes: Optional[dict[str, str]] = None,
) -> Component:
    node: Component = {"type": type, "tagName": tag, "components": list(children)}
    if classes:
        node["classes"] = list(classes)
    if style:
        node["style"] = dict(style)
    if attributes:
        node["attributes"] = dict(attributes)
    return node


@dataclass(frozen=True)
class Block:
    id: str
    label: str
    category: str
    build: Callable[..., Component]


# ----- builders -----
def _text_block(content: str = "Insert your text here") -> Component:
    return text(content)


def _image_block(src: str = "", alt: str = "") -> Component:
    node = el("img", type="image", attributes={"src": src, "alt": alt})
    node["style"] = {"max-width": "100%"}
    return node


def _table_block() -> Component:
    cell = {"padding": "10px", "border": "1px solid #ddd"}
    rows = [
        el("tr", text("Cell 1", tag="td", style=cell), text("Cell 2", tag="td", style=cell)),
        el("tr", text("Cell 3", tag="td", style=cell), text("Cell 4", tag="td", style=cell)),
    ]
    return el("table", *rows, type="table", style={"width": "100%", "border-collapse": "collapse"})


def _columns(count: int, *, gap: str, min_width: str, padding: str, label: str) -> Component:
    cols = [
        el(
            "div",
            text(f"{label} {i}"),
            type="cell",
            style={"flex": "1", "min-width": min_width, "padding": padding, "border": "1px dashed #ccc"},
        )
        for i in range(1, count + 1)
    ]
    return el(
        "div",
        *cols,
        type="row",
        classes=["responsive-columns"],
        style={"display": "flex", "flex-wrap": "wrap", "gap": gap},
    )


def _two_columns() -> Component:
    return _columns(2, gap="20px", min_width="280px", padding="20px", label="Column")


def _three_columns() -> Component:
    return _columns(3, gap="15px", min_width="220px", padding="15px", label="Column")


def _hero_section(title: str = "Hero Title", subtitle: str = "Your compelling subtitle goes here") -> Component:
    return el(
        "section",
        text(title, tag="h1", style={"font-size": "3rem", "font-weight": "bold", "margin-bottom": "20px"}),
        text(subtitle, tag="p", style={"font-size": "1.2rem", "margin-bottom": "30px", "opacity": "0.9"}),
        text(
            "Call to Action",
            tag="button",
            style={
                "background": "white",
                "color": "#dc2626",
                "padding": "15px 30px",
                "border": "none",
                "border-radius": "5px",
                "font-weight": "bold",
                "cursor": "pointer",
            },
        ),
        style={
            "background": "linear-gradient(135deg, #dc2626 0%, #991b1b 100%)",
            "color": "white",
            "padding": "80px 20px",
            "text-align": "center",
        },
    )


_ORDINALS = ("One", "Two", "Three")
_DESCRIPTIONS = ("first", "second", "third")


def _feature_grid() -> Component:
    badge = {
        "width": "60px",
        "height": "60px",
        "background": "#dc2626",
        "border-radius": "50%",
        "margin": "0 auto 20px",
        "display": "flex",
        "align-items": "center",
        "justify-content": "center",
        "color": "white",
        "font-size": "24px",
    }
    cards = [
        el(
            "div",
            text(str(i + 1), style=badge),
            text(f"Feature {_ORDINALS[i]}", tag="h3", style={"font-size": "1.5rem", "margin-bottom": "15px"}),
            text(f"Description of your {_DESCRIPTIONS[i]} feature goes here.", tag="p", style={"color": "#666"}),
            style={
                "text-align": "center",
                "padding": "30px",
                "border-radius": "10px",
                "box-shadow": "0 4px 6px rgba(0,0,0,0.1)",
            },
        )
        for i in range(3)
    ]
    return el(
        "div",
        *cards,
        style={
            "display": "grid",
            "grid-template-columns": "repeat(auto-fit, minmax(300px, 1fr))",
            "gap": "30px",
            "padding": "40px 20px",
        },
    )


BLOCKS: dict[str, Block] = {
    b.id: b
    for b in (
        Block("text", "Text", "Basic", _text_block),
        Block("image", "Image", "Basic", _image_block),
        Block("table", "Table", "Basic", _table_block),
        Block("two-columns", "2 Columns", "Layout", _two_columns),
        Block("three-columns", "3 Columns", "Layout", _three_columns),
        Block("hero-section", "Hero Section", "Sections", _hero_section),
        Block("feature-grid", "Features Grid", "Sections", _feature_grid),
    )
}

# Seeded into fresh documents
BRAND_STYLES: tuple[tuple[str, dict[str, str]], ...] = (
    ("body", {"font-family": "'Inter', sans-serif", "line-height": "1.6"}),
    (".fire-red", {"color": "#dc2626"}),
    (".fire-red-bg", {"background-color": "#dc2626"}),
    (".emergency-blue", {"color": "#1e40af"}),
    (".emergency-blue-bg", {"background-color": "#1e40af"}),
    (".warning-amber", {"color": "#d97706"}),
    (".warning-amber-bg", {"background-color": "#d97706"}),
)
