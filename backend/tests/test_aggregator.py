from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from portfolio.content import aggregator
from portfolio.content.aggregator import ConfigCache, get_page_sections, load_config
from portfolio.domain.errors import ConfigLoadError
from portfolio.extensions import db
from portfolio.models.experience import Experience
from portfolio.models.page_layout import PageLayout
from portfolio.models.project import Project
from portfolio.models.site_config import SiteConfig
from portfolio.models.skill import Skill


def _add(model, **values):
    row = model()
    for field, value in values.items():
        setattr(row, field, value)
    db.session.add(row)
    return row


def _skill(name: str, category: str, order: int, visible: bool = True) -> Skill:
    return _add(Skill, name=name, category=category, proficiency=50, order=order, visible=visible)


def test_skills_group_by_category_in_first_seen_order(app) -> None:
    _skill("React", "Frontend", 0)
    _skill("Vue", "Frontend", 1)
    _skill("Flask", "Backend", 2)
    db.session.commit()

    groups = load_config()["data"]["skills"]

    assert [g["name"] for g in groups] == ["Frontend", "Backend"]
    assert [s["name"] for s in groups[0]["skills"]] == ["React", "Vue"]
    assert [s["name"] for s in groups[1]["skills"]] == ["Flask"]


def test_skill_grouping_is_case_and_whitespace_sensitive(app) -> None:
    _skill("React", "Frontend", 0)
    _skill("Vue", "frontend", 1)
    _skill("Svelte", "Frontend ", 2)
    db.session.commit()

    groups = load_config()["data"]["skills"]

    assert [g["name"] for g in groups] == ["Frontend", "frontend", "Frontend "]


def test_hidden_rows_are_excluded_and_order_respected(app) -> None:
    _add(Project, title="Second", slug="second", description="d", category="web", order=2)
    _add(Project, title="First", slug="first", description="d", category="web", order=1)
    _add(Project, title="Hidden", slug="hidden", description="d", category="web", order=0, visible=False)
    _skill("Hidden", "Backend", 0, visible=False)
    db.session.commit()

    data = load_config()["data"]

    assert [p["title"] for p in data["projects"]] == ["First", "Second"]
    assert data["skills"] == []


def test_ongoing_experience_reports_present(app) -> None:
    _add(
        Experience,
        company="Acme",
        position="Engineer",
        location="Remote",
        start_date=date(2023, 1, 1),
        end_date=None,
        current=True,
        description="Work",
        order=0,
    )
    db.session.commit()

    experience = load_config()["data"]["experience"][0]

    assert experience["end_date"] == "present"
    assert experience["start_date"] == "2023-01-01"


def test_settings_and_missing_singletons(app) -> None:
    _add(SiteConfig, key="meta", value={"title": "My Site"})
    db.session.commit()

    config = load_config()

    assert config["meta"] == {"title": "My Site"}
    assert config["theme"] == {}
    assert config["layout"] == {}
    assert config["profile"] is None
    assert config["data"]["about"] is None


def test_layouts_are_normalized_in_config(app) -> None:
    _add(PageLayout, page_name="home", sections=[
        {"id": "x", "type": "hero", "order": 0, "enabled": False, "visible": True, "config": {}},
    ])
    db.session.commit()

    sections = load_config()["pages"]["home"]["sections"]

    assert sections == [{"id": "x", "type": "hero", "order": 0, "visible": False, "props": {}}]


def test_get_page_sections_sorts_and_filters(app) -> None:
    _add(PageLayout, page_name="home", sections=[
        {"id": "a", "type": "hero", "order": 2, "visible": True},
        {"id": "b", "type": "about", "order": 1, "visible": True},
        {"id": "c", "type": "skills", "order": 3, "visible": False},
    ])
    db.session.commit()

    assert [s.id for s in get_page_sections("home")] == ["b", "a"]


def test_get_page_sections_without_layout_is_empty(app) -> None:
    assert get_page_sections("missing") == []


def test_cache_memoizes_within_one_operation(app) -> None:
    cache = ConfigCache()

    first = load_config(cache)
    _add(SiteConfig, key="meta", value={"title": "Changed"})
    db.session.commit()

    assert load_config(cache) is first
    assert load_config()["meta"] == {"title": "Changed"}


def test_store_failure_raises_config_load_error(app, monkeypatch) -> None:
    def broken():
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    monkeypatch.setattr(aggregator, "_fetch_collections", broken)

    with pytest.raises(ConfigLoadError):
        load_config()
