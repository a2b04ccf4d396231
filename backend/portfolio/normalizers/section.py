# portfolio/normalizers/section.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from portfolio.content.section import Section

logger = logging.getLogger(__name__)


def _first_present(raw: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return default


def normalize_section(raw: Mapping[str, Any] | Section) -> Section:
    """
    Adapt a stored section record to the canonical shape.

    Two on-disk shapes exist:
    - legacy:  {id, type, order, enabled, config}
    - current: {id, type, order, visible, props}

    Rules:
    - visible := enabled ?? visible ?? True  (enabled wins when both exist)
    - props   := config ?? props ?? {}
    """
    if isinstance(raw, Section):
        return raw
    if not isinstance(raw, Mapping):
        raise TypeError(f"section record must be a mapping, got {type(raw).__name__}")

    visible = _first_present(raw, "enabled", "visible", default=True)
    props = _first_present(raw, "config", "props", default={})
    if not isinstance(props, Mapping):
        raise TypeError(f"section props must be a mapping, got {type(props).__name__}")

    return Section(
        id=str(raw.get("id", "")),
        type=str(raw.get("type", "")),
        order=int(raw.get("order") or 0),
        visible=bool(visible),
        props=dict(props),
    )


def normalize_sections(raw_sections: Iterable[Mapping[str, Any]] | None) -> List[Section]:
    """
    Normalize a stored section list.

    A record that cannot be read, such as a null entry or a non-numeric
    order, is logged and dropped. The rest of the page still renders.
    """
    sections = []
    for position, raw in enumerate(raw_sections or []):
        try:
            sections.append(normalize_section(raw))
        except (TypeError, ValueError, AttributeError) as exc:
            logger.warning(f"Skipping malformed section record at position {position}: {exc}")
    return sections


def visible_in_order(sections: Iterable[Section]) -> List[Section]:
    """Sort ascending by order (stable), then keep visible sections only."""
    ordered = sorted(sections, key=lambda s: s.order)
    return [s for s in ordered if s.visible]


def serialize_sections(sections: Iterable[Section]) -> List[Dict[str, Any]]:
    return [s.to_dict() for s in sections]
