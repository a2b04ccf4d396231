"""Section normalization: both stored shapes, precedence and ordering."""

from portfolio.content.section import Section
from portfolio.normalizers.section import (
    normalize_section,
    normalize_sections,
    serialize_sections,
    visible_in_order,
)


def test_enabled_wins_over_visible_when_both_present() -> None:
    section = normalize_section(
        {"id": "x", "type": "hero", "enabled": False, "visible": True, "config": {}}
    )

    assert section.visible is False
    assert section.props == {}


def test_legacy_and_current_shapes_normalize_identically() -> None:
    legacy = normalize_section(
        {"id": "a", "type": "skills", "order": 1, "enabled": True, "config": {"title": "Stack"}}
    )
    current = normalize_section(
        {"id": "a", "type": "skills", "order": 1, "visible": True, "props": {"title": "Stack"}}
    )

    assert legacy == current
    assert legacy.to_dict() == {
        "id": "a",
        "type": "skills",
        "order": 1,
        "visible": True,
        "props": {"title": "Stack"},
    }


def test_missing_visibility_and_props_default() -> None:
    section = normalize_section({"id": "a", "type": "hero"})

    assert section.visible is True
    assert section.props == {}
    assert section.order == 0


def test_null_enabled_falls_through_to_visible() -> None:
    section = normalize_section({"id": "a", "type": "hero", "enabled": None, "visible": False})

    assert section.visible is False


def test_normalization_is_idempotent() -> None:
    raw = [
        {"id": "a", "type": "hero", "order": 2, "enabled": False, "config": {"headline": "Hi"}},
        {"id": "b", "type": "about", "order": 1, "visible": True, "props": {}},
    ]

    once = normalize_sections(raw)
    twice = normalize_sections(serialize_sections(once))

    assert once == twice
    assert normalize_sections(once) == once


def test_unknown_type_is_retained() -> None:
    section = normalize_section({"id": "z", "type": "carousel-v2", "props": {"speed": 3}})

    assert section.type == "carousel-v2"
    assert section.is_known_type is False
    assert section.props == {"speed": 3}


def test_visible_in_order_sorts_and_filters() -> None:
    sections = normalize_sections([
        {"id": "a", "type": "hero", "order": 2, "visible": True},
        {"id": "b", "type": "about", "order": 1, "visible": True},
        {"id": "c", "type": "skills", "order": 3, "visible": False},
    ])

    result = visible_in_order(sections)

    assert [s.id for s in result] == ["b", "a"]


def test_with_changes_leaves_original_untouched() -> None:
    section = Section(id="a", type="hero", order=0)

    changed = section.with_changes(order=5)

    assert section.order == 0
    assert changed.order == 5
    assert changed.id == "a"


def test_malformed_records_are_dropped_not_raised() -> None:
    sections = normalize_sections([
        {"id": "ok", "type": "hero", "order": 0, "config": {"headline": "Hi"}},
        {"id": "bad-props", "type": "custom", "order": 1, "config": ["oops"]},
        {"id": "bad-order", "type": "custom", "order": "x"},
        None,
        {"id": "last", "type": "about", "order": 4},
    ])

    assert [s.id for s in sections] == ["ok", "last"]
