def _iso(value):
    return value.isoformat() if value else None


def normalize_experience(experience, admin=False):
    data = {
        "id": experience.id,
        "company": experience.company,
        "position": experience.position,
        "location": experience.location,
        "start_date": _iso(experience.start_date),
        # "present" is the typed default for an ongoing role
        "end_date": _iso(experience.end_date) or "present",
        "current": bool(experience.current),
        "description": experience.description,
        "technologies": list(experience.technologies or []),
    }

    if admin:
        data["end_date"] = _iso(experience.end_date)
        data["order"] = experience.order
        data["visible"] = experience.visible

    return data


def normalize_education(education, admin=False):
    data = {
        "id": education.id,
        "institution": education.institution,
        "degree": education.degree,
        "field": education.field,
        "location": education.location,
        "start_date": _iso(education.start_date),
        "end_date": _iso(education.end_date),
        "description": education.description,
    }

    if admin:
        data["order"] = education.order
        data["visible"] = education.visible

    return data
