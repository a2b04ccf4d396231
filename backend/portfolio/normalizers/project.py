def normalize_project(project, admin=False):
    data = {
        "id": project.id,
        "title": project.title,
        "slug": project.slug,
        "description": project.description,
        "long_description": project.long_description,
        "image": project.image,
        "tags": list(project.tags or []),
        "links": dict(project.links or {}),
        "featured": bool(project.featured),
        "category": project.category,
    }

    if admin:
        data["order"] = project.order
        data["visible"] = project.visible
        data["created_at"] = project.created_at.isoformat() if project.created_at else None
        data["updated_at"] = project.updated_at.isoformat() if project.updated_at else None

    return data
