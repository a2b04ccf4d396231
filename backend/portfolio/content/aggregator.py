"""
Configuration aggregator.

Reads every content collection the public site needs and assembles one
canonical configuration snapshot:

{
    "meta": {...}, "theme": {...}, "layout": {...},
    "profile": {...} | None,
    "pages": {page_name: {"sections": [...]}},
    "data": {"projects", "experience", "education", "skills", "about"},
}

Results may be memoized for one request through a ConfigCache; nothing
is cached across requests.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from flask import g, has_app_context
from sqlalchemy.exc import SQLAlchemyError

from portfolio.content.section import Section
from portfolio.domain.errors import ConfigLoadError
from portfolio.models.about_section import AboutSection
from portfolio.models.education import Education
from portfolio.models.experience import Experience
from portfolio.models.page_layout import PageLayout
from portfolio.models.profile import Profile
from portfolio.models.project import Project
from portfolio.models.site_config import SiteConfig
from portfolio.models.skill import Skill
from portfolio.normalizers.experience import normalize_education, normalize_experience
from portfolio.normalizers.profile import normalize_about, normalize_profile
from portfolio.normalizers.project import normalize_project
from portfolio.normalizers.section import normalize_sections, serialize_sections, visible_in_order
from portfolio.normalizers.skill import group_skills

logger = logging.getLogger(__name__)


class ConfigCache:
    """Memoizes config and page section reads for one logical operation."""

    def __init__(self) -> None:
        self.config: Optional[Dict[str, Any]] = None
        self.pages: Dict[str, List[Section]] = {}

    def clear(self) -> None:
        self.config = None
        self.pages.clear()


def request_cache() -> Optional[ConfigCache]:
    """
    The cache bound to the current app context, or None outside of one.
    It is dropped at the end of every request.
    """
    if not has_app_context():
        return None

    cache = g.get("config_cache")
    if cache is None:
        cache = ConfigCache()
        g.config_cache = cache
    return cache


def discard_request_cache(exc=None) -> None:
    """Teardown hook: drop the cache when the request ends."""
    g.pop("config_cache", None)


def _visible_ordered(model):
    return (
        model.query
        .filter_by(visible=True)
        .order_by(model.order.asc())
        .all()
    )


def _fetch_collections() -> Dict[str, Any]:
    return {
        "settings": SiteConfig.query.all(),
        "profile": Profile.query.first(),
        "projects": _visible_ordered(Project),
        "experience": _visible_ordered(Experience),
        "education": _visible_ordered(Education),
        "skills": _visible_ordered(Skill),
        "about": AboutSection.query.first(),
        "layouts": PageLayout.query.all(),
    }


def build_config(collections: Dict[str, Any]) -> Dict[str, Any]:
    settings: Dict[str, Any] = {}
    for item in collections["settings"]:
        settings[item.key] = item.value  # last write wins

    pages = {
        layout.page_name: {
            "sections": serialize_sections(normalize_sections(layout.sections)),
        }
        for layout in collections["layouts"]
    }

    return {
        "meta": settings.get("meta") or {},
        "theme": settings.get("theme") or {},
        "layout": settings.get("layout") or {},
        "profile": normalize_profile(collections["profile"]),
        "pages": pages,
        "data": {
            "projects": [normalize_project(p) for p in collections["projects"]],
            "experience": [normalize_experience(e) for e in collections["experience"]],
            "education": [normalize_education(e) for e in collections["education"]],
            "skills": group_skills(collections["skills"]),
            "about": normalize_about(collections["about"]),
        },
    }


def load_config(cache: Optional[ConfigCache] = None) -> Dict[str, Any]:
    """
    Assemble the full site configuration.

    Any store read failure aborts the whole load with ConfigLoadError;
    a partial config is never returned.
    """
    if cache is not None and cache.config is not None:
        return cache.config

    try:
        collections = _fetch_collections()
    except SQLAlchemyError as exc:
        logger.exception("Failed to read site content")
        raise ConfigLoadError("Failed to load configuration") from exc

    config = build_config(collections)

    if cache is not None:
        cache.config = config
    return config


def get_page_sections(page_name: str, cache: Optional[ConfigCache] = None) -> List[Section]:
    """
    Visible sections of one page, ascending by order.

    A page without a stored layout yields an empty list.
    """
    if cache is not None and page_name in cache.pages:
        return cache.pages[page_name]

    try:
        layout = PageLayout.query.filter_by(page_name=page_name).first()
    except SQLAlchemyError as exc:
        logger.exception(f"Failed to read layout for page '{page_name}'")
        raise ConfigLoadError(f"Failed to load page '{page_name}'") from exc

    sections = visible_in_order(normalize_sections(layout.sections)) if layout else []

    if cache is not None:
        cache.pages[page_name] = sections
    return sections
