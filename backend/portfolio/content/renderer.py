# portfolio/content/renderer.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from flask import render_template
from markupsafe import Markup

from portfolio.content.registry import get_definition
from portfolio.content.section import Section

logger = logging.getLogger(__name__)

FALLBACK_TEMPLATE = "sections/_fallback.html"
ERROR_TEMPLATE = "sections/_error.html"


def merge_props(
    section: Section,
    injected: Mapping[str, Any],
    preview: bool,
) -> Dict[str, Any]:
    """
    Stored props, overridden by injected shared data, plus the preview flag.

    Shared data is fresher than a stored snapshot, so it wins on conflicts.
    """
    return {**section.props, **injected, "preview": preview}


def render_fallback(section: Section) -> Markup:
    return Markup(render_template(FALLBACK_TEMPLATE, section=section))


def render_section(
    section: Section,
    shared_data: Optional[Mapping[str, Any]] = None,
    *,
    preview: bool = False,
) -> Markup:
    """
    Render one section through the registry.

    Unknown types render a labelled placeholder. A renderer that raises is
    logged and replaced with an error placeholder so sibling sections on
    the same page still render.
    """
    renderer = get_definition(section.type)

    if renderer is None:
        logger.warning(f"Unknown section type '{section.type}' (section {section.id})")
        return render_fallback(section)

    props = merge_props(section, renderer.inject(shared_data), preview)

    try:
        return renderer(section, props)
    except Exception:
        logger.exception(f"Failed to render section {section.id} ({section.type})")
        return Markup(render_template(ERROR_TEMPLATE, section=section))


def render_sections(
    sections: Iterable[Section],
    shared_data: Optional[Mapping[str, Any]] = None,
    *,
    preview: bool = False,
) -> List[Markup]:
    return [
        render_section(section, shared_data, preview=preview)
        for section in sections
    ]


def shared_data_from_config(config: Mapping[str, Any], page_name: str) -> Dict[str, Any]:
    """
    Shared data injected into every section of a page.

    The home page shows featured projects only; other pages show all
    visible projects.
    """
    data = config.get("data", {})
    projects = data.get("projects", [])
    if page_name == "home":
        projects = [p for p in projects if p.get("featured")]

    profile = config.get("profile") or {}
    contact = None
    if profile:
        contact = {
            "email": profile.get("email"),
            "phone": profile.get("phone"),
            "location": profile.get("location"),
            "social": profile.get("social", {}),
        }

    return {
        "projects": projects,
        "categories": data.get("skills", []),
        "experiences": data.get("experience", []),
        "education": data.get("education", []),
        "about": data.get("about"),
        "contact": contact,
    }
