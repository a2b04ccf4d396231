from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from portfolio.content import aggregator
from portfolio.extensions import db
from portfolio.models.page_layout import PageLayout
from portfolio.models.profile import Profile
from portfolio.models.project import Project
from portfolio.seed import seed_content


def _layout(page_name, sections) -> None:
    layout = PageLayout()
    layout.page_name = page_name
    layout.sections = sections
    db.session.add(layout)


def _project(title, slug, featured, order) -> None:
    project = Project()
    project.title = title
    project.slug = slug
    project.description = f"{title} description"
    project.category = "web"
    project.featured = featured
    project.order = order
    db.session.add(project)


def test_health(client) -> None:
    assert client.get("/api/v1/health").get_json()["status"] == "ok"


def test_home_renders_sections_in_order(client) -> None:
    _layout("home", [
        {"id": "second", "type": "custom", "order": 2, "enabled": True, "config": {"title": "Second block"}},
        {"id": "first", "type": "hero", "order": 1, "enabled": True, "config": {"headline": "First block"}},
        {"id": "hidden", "type": "custom", "order": 3, "enabled": False, "config": {"title": "Hidden block"}},
    ])
    db.session.commit()

    html = client.get("/").get_data(as_text=True)

    assert html.index("First block") < html.index("Second block")
    assert "Hidden block" not in html


def test_malformed_stored_section_does_not_break_the_page(client) -> None:
    _layout("home", [
        {"id": "hero", "type": "hero", "order": 0, "enabled": True, "config": {"headline": "Still here"}},
        {"id": "broken", "type": "custom", "order": 1, "enabled": True, "config": ["oops"]},
        None,
    ])
    db.session.commit()

    response = client.get("/")

    assert response.status_code == 200
    assert "Still here" in response.get_data(as_text=True)


def test_home_shows_featured_projects_only(client) -> None:
    _layout("home", [{"id": "p", "type": "projects", "order": 0}])
    _layout("projects", [{"id": "p", "type": "projects-grid", "order": 0}])
    _project("Featured Work", "featured-work", True, 0)
    _project("Side Quest", "side-quest", False, 1)
    db.session.commit()

    home = client.get("/").get_data(as_text=True)
    projects = client.get("/projects").get_data(as_text=True)

    assert "Featured Work" in home
    assert "Side Quest" not in home
    assert "Side Quest" in projects


def test_unknown_section_does_not_break_page(client) -> None:
    _layout("about", [
        {"id": "x", "type": "carousel-v2", "order": 0},
        {"id": "c", "type": "custom", "order": 1, "props": {"title": "After the carousel"}},
    ])
    db.session.commit()

    response = client.get("/about")

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "Unknown section type: carousel-v2" in html
    assert "After the carousel" in html


def test_contact_section_receives_profile_details(client) -> None:
    profile = Profile()
    profile.name = "Alex Morgan"
    profile.title = "Developer"
    profile.email = "alex@example.com"
    profile.location = "Berlin"
    profile.bio = "Hi"
    profile.social = {}
    db.session.add(profile)
    _layout("contact", [{"id": "contact", "type": "contact", "order": 0}])
    db.session.commit()

    html = client.get("/contact").get_data(as_text=True)

    assert "mailto:alex@example.com" in html
    assert "Get In Touch" in html


def test_page_without_layout_renders_empty(client) -> None:
    response = client.get("/experience")

    assert response.status_code == 200
    assert "Nothing here yet." in response.get_data(as_text=True)


def test_preview_query_renders_page_with_preview(client) -> None:
    _layout("about", [{"id": "h", "type": "hero", "order": 0, "props": {"headline": "About preview"}}])
    db.session.commit()

    html = client.get("/?preview=about").get_data(as_text=True)

    assert "About preview" in html
    assert "is-preview" in html


def test_preview_of_unknown_page_is_404(client) -> None:
    response = client.get("/?preview=nowhere")

    assert response.status_code == 404
    assert "text/html" in response.content_type


def test_config_failure_shows_error_page(client, monkeypatch) -> None:
    def broken():
        raise OperationalError("SELECT 1", {}, Exception("gone"))

    monkeypatch.setattr(aggregator, "_fetch_collections", broken)

    page = client.get("/")
    api = client.get("/api/v1/config")

    assert page.status_code == 500
    assert "temporarily unavailable" in page.get_data(as_text=True)
    assert api.status_code == 500
    assert api.get_json() == {"error": "Failed to load configuration"}


@pytest.mark.parametrize("path", ["/", "/about", "/projects", "/experience", "/contact"])
def test_seeded_site_renders(app, client, path) -> None:
    seed_content(admin_email="admin@example.com", admin_password="admin123")

    response = client.get(path)

    assert response.status_code == 200
    assert "Alex Morgan" in response.get_data(as_text=True)


def test_seed_cli_command(app) -> None:
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed", "--no-create-tables"])

    assert result.exit_code == 0
    assert "Seed completed" in result.output
    assert PageLayout.query.count() == 5


def test_openapi_document_is_served(client) -> None:
    response = client.get("/openapi/portfolio.yaml")

    assert response.status_code == 200
    assert b"Portfolio CMS API" in response.data
