# portfolio/normalizers/skill.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List


def normalize_skill(skill, admin=False) -> Dict[str, Any]:
    data = {
        "name": skill.name,
        "icon": skill.icon,
        "image_url": skill.image_url,
        "proficiency": skill.proficiency,
    }

    if admin:
        data["id"] = skill.id
        data["category"] = skill.category
        data["order"] = skill.order
        data["visible"] = skill.visible

    return data


def group_skills(skills: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    Group flat skill records into [{"name": category, "skills": [...]}].

    Categories keep first-seen order. Matching is exact: no case folding
    and no whitespace trimming, so "Frontend" and "frontend " are
    different groups.
    """
    groups: Dict[str, List[Dict[str, Any]]] = {}

    for skill in skills:
        groups.setdefault(skill.category, []).append(normalize_skill(skill))

    return [
        {"name": name, "skills": members}
        for name, members in groups.items()
    ]
