# app/services/sub_product_form.py
# Admin form state for a SubProduct: the manual/external switch.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from app.services.catalog_service import EXTERNAL_FIELDS

MANUAL_FORM_FIELDS = ("content", "specifications", "features")
COMMON_FIELDS = ("name", "model_number", "photo", "description")
CONTENT_TYPES = ("manual", "external")


@dataclass
class SubProductForm:
    name: str = ""
    model_number: Optional[str] = None
    photo: str = ""
    description: Optional[str] = None
    content_type: str = "manual"
    content: Optional[str] = None
    external_url: Optional[str] = None
    specifications: list[dict[str, str]] = field(default_factory=list)
    features: list[str] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: Any) -> "SubProductForm":
        return cls(
            name=record.name,
            model_number=record.model_number,
            photo=record.photo,
            description=record.description,
            content_type=record.content_type,
            content=record.content,
            external_url=record.external_url,
            specifications=list(record.specifications or []),
            features=list(record.features or []),
        )

    def switch_to(self, content_type: str) -> None:
        """
        Switching to external clears the rich content right away; the other
        manual fields are only hidden and get purged on submit.
        """
        if content_type not in CONTENT_TYPES:
            raise ValueError(f"Unknown content type: {content_type}")
        if content_type == "external" and self.content_type != "external":
            self.content = None
        self.content_type = content_type

    def visible_fields(self) -> tuple[str, ...]:
        if self.content_type == "external":
            return COMMON_FIELDS + EXTERNAL_FIELDS
        return COMMON_FIELDS + MANUAL_FORM_FIELDS

    def recommended_fields(self) -> tuple[str, ...]:
        return EXTERNAL_FIELDS if self.content_type == "external" else ()

    def warnings(self) -> list[str]:
        # soft hint only, the server accepts an external record without a URL
        if self.content_type == "external" and not (self.external_url or "").strip():
            return ["An external URL is recommended for external sub-products"]
        return []

    def to_payload(self) -> dict[str, Any]:
        """camelCase body for POST/PUT; inactive fields go out as explicit nulls."""
        payload: dict[str, Any] = {
            "name": self.name,
            "modelNumber": self.model_number,
            "photo": self.photo,
            "description": self.description,
            "contentType": self.content_type,
        }
        if self.content_type == "external":
            payload.update({
                "externalUrl": self.external_url,
                "content": None,
                "specifications": None,
                "features": None,
            })
        else:
            payload.update({
                "externalUrl": None,
                "content": self.content,
                "specifications": list(self.specifications),
                "features": list(self.features),
            })
        return payload
