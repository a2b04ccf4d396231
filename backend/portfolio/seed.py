"""
Demo content for a fresh database.

Layouts are written in the legacy {enabled, config} shape on purpose:
both shapes must keep rendering.
"""

from datetime import date

from flask import current_app

from portfolio.extensions import db
from portfolio.models.about_section import AboutSection
from portfolio.models.contact_message import ContactMessage
from portfolio.models.education import Education
from portfolio.models.experience import Experience
from portfolio.models.page_layout import PageLayout
from portfolio.models.profile import Profile
from portfolio.models.project import Project
from portfolio.models.site_config import SiteConfig
from portfolio.models.skill import Skill
from portfolio.models.user import User
from portfolio.utils.transaction import transactional

SETTINGS = {
    "meta": {
        "title": "Alex Morgan | Full-stack Developer",
        "description": "Portfolio of a full-stack developer building web platforms.",
        "keywords": ["Python", "Flask", "TypeScript", "Web Developer"],
        "author": "Alex Morgan",
        "locale": "en_US",
    },
    "theme": {
        "mode": "dark",
        "primaryColor": "#8b5cf6",
        "accentColor": "#06b6d4",
    },
    "layout": {
        "header": {
            "visible": True,
            "sticky": True,
            "transparent": False,
            "navItems": [
                {"label": "Home", "href": "/"},
                {"label": "About", "href": "/about"},
                {"label": "Projects", "href": "/projects"},
                {"label": "Experience", "href": "/experience"},
                {"label": "Contact", "href": "/contact"},
            ],
        },
        "footer": {"visible": True, "showSocial": True},
    },
}

SKILLS = [
    ("Python", "Backend", 95),
    ("Flask", "Backend", 90),
    ("PostgreSQL", "Backend", 80),
    ("TypeScript", "Frontend", 85),
    ("React", "Frontend", 80),
    ("Docker", "DevOps", 75),
]

PROJECTS = [
    {
        "title": "Headless CMS",
        "slug": "headless-cms",
        "description": "Content API with audit logging and page layouts.",
        "tags": ["Flask", "PostgreSQL", "JWT"],
        "links": {"github": "https://github.com/example/headless-cms"},
        "featured": True,
        "category": "web",
    },
    {
        "title": "Metrics Dashboard",
        "slug": "metrics-dashboard",
        "description": "Realtime service metrics with alert rules.",
        "tags": ["React", "WebSockets"],
        "links": {"demo": "https://example.com/metrics"},
        "featured": True,
        "category": "web",
    },
    {
        "title": "CLI Toolkit",
        "slug": "cli-toolkit",
        "description": "Developer tooling for scaffolding services.",
        "tags": ["Python", "Click"],
        "links": {},
        "featured": False,
        "category": "tools",
    },
]

EXPERIENCE = [
    {
        "company": "Acme Corp",
        "position": "Senior Backend Engineer",
        "location": "Remote",
        "start_date": date(2023, 3, 1),
        "end_date": None,
        "current": True,
        "description": "Own the content platform APIs and their data model.",
        "technologies": ["Python", "Flask", "PostgreSQL"],
    },
    {
        "company": "Globex",
        "position": "Full-stack Developer",
        "location": "Berlin, Germany",
        "start_date": date(2020, 6, 1),
        "end_date": date(2023, 2, 28),
        "current": False,
        "description": "Built customer dashboards and internal tooling.",
        "technologies": ["TypeScript", "React", "Django"],
    },
]

EDUCATION = [
    {
        "institution": "Technical University",
        "degree": "BSc",
        "field": "Computer Science",
        "location": "Berlin, Germany",
        "start_date": date(2016, 10, 1),
        "end_date": date(2020, 5, 31),
        "description": None,
    },
]

LAYOUTS = {
    "home": [
        {
            "id": "hero",
            "type": "hero",
            "order": 1,
            "enabled": True,
            "config": {
                "headline": "Hi, I'm Alex Morgan",
                "subheadline": "Available for hire",
                "description": "Full-stack developer building reliable web platforms.",
                "ctaPrimary": {"label": "View My Work", "href": "/projects"},
                "ctaSecondary": {"label": "Get In Touch", "href": "/contact"},
            },
        },
        {"id": "about", "type": "about", "order": 2, "enabled": True, "config": {}},
        {"id": "skills", "type": "skills", "order": 3, "enabled": True, "config": {}},
        {"id": "experience", "type": "experience", "order": 4, "enabled": True, "config": {}},
        {"id": "projects", "type": "projects", "order": 5, "enabled": True, "config": {"showViewAll": True}},
        {"id": "contact-cta", "type": "contact-cta", "order": 6, "enabled": True, "config": {}},
    ],
    "about": [
        {"id": "about", "type": "about", "order": 1, "enabled": True, "config": {}},
        {"id": "skills", "type": "skills", "order": 2, "enabled": True, "config": {}},
        {"id": "education", "type": "education", "order": 3, "enabled": True, "config": {}},
    ],
    "projects": [
        {"id": "projects", "type": "projects-grid", "order": 1, "enabled": True, "config": {"title": "All Projects"}},
    ],
    "experience": [
        {"id": "experience", "type": "experience", "order": 1, "enabled": True, "config": {}},
    ],
    "contact": [
        {"id": "contact", "type": "contact", "order": 1, "enabled": True, "config": {}},
    ],
}


def _build(model, values, order=None):
    row = model()
    for field, value in values.items():
        setattr(row, field, value)
    if order is not None:
        row.order = order
    return row


def clear_content():
    """Remove all site content. Users and audit history are kept."""
    for model in (ContactMessage, PageLayout, AboutSection, Skill, Education,
                  Experience, Project, Profile, SiteConfig):
        model.query.delete()


def seed_content(*, admin_email: str, admin_password: str) -> None:
    with transactional():
        clear_content()

        admin = User.query.filter_by(email=admin_email).first()
        if admin is None:
            admin = User()
            admin.email = admin_email
            admin.name = "Admin"
            admin.role = "ADMIN"
            admin.set_password(admin_password)
            db.session.add(admin)

        db.session.add(_build(Profile, {
            "name": "Alex Morgan",
            "title": "Full-stack Developer",
            "email": "alex@example.com",
            "location": "Berlin, Germany",
            "bio": "I build web platforms end to end, from data model to UI.",
            "social": {
                "github": "https://github.com/example",
                "linkedin": "https://www.linkedin.com/in/example",
            },
        }))

        for key, value in SETTINGS.items():
            db.session.add(_build(SiteConfig, {"key": key, "value": value}))

        for index, (name, category, proficiency) in enumerate(SKILLS):
            db.session.add(_build(Skill, {
                "name": name,
                "category": category,
                "proficiency": proficiency,
            }, order=index))

        for index, values in enumerate(PROJECTS):
            db.session.add(_build(Project, values, order=index))

        for index, values in enumerate(EXPERIENCE):
            db.session.add(_build(Experience, values, order=index))

        for index, values in enumerate(EDUCATION):
            db.session.add(_build(Education, values, order=index))

        db.session.add(_build(AboutSection, {
            "description": [
                "I enjoy turning loosely defined problems into dependable software.",
                "Lately I have been working on content platforms and developer tooling.",
            ],
            "skills": [{"name": "Python"}, {"name": "TypeScript"}],
            "highlights": [
                {"icon": "code", "title": "Clean Code", "description": "Readable, tested and documented."},
                {"icon": "rocket", "title": "Shipping", "description": "Small, frequent releases."},
            ],
        }))

        for page_name, sections in LAYOUTS.items():
            db.session.add(_build(PageLayout, {"page_name": page_name, "sections": sections}))

    current_app.logger.info(
        f"Seeded {len(SKILLS)} skills, {len(PROJECTS)} projects, "
        f"{len(EXPERIENCE)} experiences, {len(LAYOUTS)} page layouts"
    )
    current_app.logger.info(f"Admin user: {admin_email}")
