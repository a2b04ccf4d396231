def normalize_profile(profile):
    if profile is None:
        return None

    return {
        "id": profile.id,
        "name": profile.name,
        "title": profile.title,
        "email": profile.email,
        "phone": profile.phone,
        "location": profile.location,
        "avatar": profile.avatar,
        "resume_url": profile.resume_url,
        "bio": profile.bio,
        "social": dict(profile.social or {}),
    }


def normalize_about(about):
    if about is None:
        return None

    return {
        "id": about.id,
        "section_label": about.section_label,
        "title": about.title,
        "title_highlight": about.title_highlight,
        "description": list(about.description or []),
        "skills": list(about.skills or []),
        "years_experience": about.years_experience,
        "projects_count": about.projects_count,
        "highlights": list(about.highlights or []),
        "profile_emoji": about.profile_emoji,
        "show_image": about.show_image,
        "image_position": about.image_position,
    }
