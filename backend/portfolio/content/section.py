# portfolio/content/section.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict

SECTION_TYPES = (
    "hero",
    "about",
    "skills",
    "projects",
    "projects-grid",
    "experience",
    "contact",
    "contact-cta",
    "education",
    "custom",
)


@dataclass(frozen=True)
class Section:
    """
    One typed block of page content in canonical (visible/props) shape.

    Instances are immutable; edits go through `with_changes`.
    """
    id: str
    type: str
    order: int = 0
    visible: bool = True
    props: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_known_type(self) -> bool:
        return self.type in SECTION_TYPES

    def with_changes(self, **changes: Any) -> "Section":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "order": self.order,
            "visible": self.visible,
            "props": dict(self.props),
        }
