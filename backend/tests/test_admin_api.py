from __future__ import annotations

from portfolio.models.audit_log import AuditLog
from portfolio.models.project import Project

PROJECT = {
    "title": "Headless CMS",
    "slug": "headless-cms",
    "description": "Content API",
    "category": "web",
    "tags": ["Flask"],
    "links": {"github": "https://github.com/example/cms"},
    "featured": True,
}


def _create_project(client, headers, **overrides):
    return client.post("/api/v1/admin/projects", json={**PROJECT, **overrides}, headers=headers)


def test_project_crud_writes_audit_entries(client, editor_headers, admin_headers) -> None:
    created = _create_project(client, editor_headers)
    assert created.status_code == 201
    project_id = created.get_json()["id"]
    assert created.get_json()["order"] == 0

    updated = client.put(
        f"/api/v1/admin/projects/{project_id}",
        json={"title": "Renamed"},
        headers=editor_headers,
    )
    assert updated.status_code == 200
    assert updated.get_json()["title"] == "Renamed"

    deleted = client.delete(f"/api/v1/admin/projects/{project_id}", headers=admin_headers)
    assert deleted.status_code == 200
    assert Project.query.count() == 0

    actions = [log.action for log in AuditLog.query.order_by(AuditLog.created_at).all()]
    assert sorted(actions) == ["project.create", "project.delete", "project.update"]

    update_log = AuditLog.query.filter_by(action="project.update").one()
    assert update_log.payload["title"] == "Renamed"
    assert update_log.payload["slug"] == "headless-cms"
    assert update_log.entity_id == project_id


def test_create_audit_entry_holds_the_new_record(client, editor_headers) -> None:
    project_id = _create_project(client, editor_headers).get_json()["id"]

    log = AuditLog.query.filter_by(action="project.create").one()

    assert log.payload["id"] == project_id
    assert log.payload["title"] == "Headless CMS"
    assert log.payload["tags"] == ["Flask"]
    assert log.payload["featured"] is True
    assert log.payload["order"] == 0


def test_new_projects_append_to_the_end(client, editor_headers) -> None:
    _create_project(client, editor_headers)
    second = _create_project(client, editor_headers, slug="second")

    assert second.get_json()["order"] == 1


def test_duplicate_slug_is_409(client, editor_headers) -> None:
    _create_project(client, editor_headers)

    response = _create_project(client, editor_headers, title="Other")

    assert response.status_code == 409


def test_slug_collision_on_update_is_409(client, editor_headers) -> None:
    _create_project(client, editor_headers)
    other = _create_project(client, editor_headers, slug="other").get_json()

    response = client.put(
        f"/api/v1/admin/projects/{other['id']}",
        json={"slug": "headless-cms"},
        headers=editor_headers,
    )

    assert response.status_code == 409


def test_validation_errors_list_fields(client, editor_headers) -> None:
    response = client.post(
        "/api/v1/admin/projects",
        json={"title": "", "slug": "x"},
        headers=editor_headers,
    )

    body = response.get_json()
    assert response.status_code == 400
    assert body["error"] == "Validation failed"
    fields = {d["field"] for d in body["details"]}
    assert {"title", "description", "category"} <= fields
    assert Project.query.count() == 0


def test_missing_body_is_validation_error(client, editor_headers) -> None:
    response = client.post("/api/v1/admin/skills", data="not json", headers=editor_headers)

    assert response.status_code == 400
    assert response.get_json()["details"][0]["field"] == "body"


def test_unknown_entity_is_404(client, viewer_headers) -> None:
    response = client.get("/api/v1/admin/projects/missing", headers=viewer_headers)

    assert response.status_code == 404
    assert response.get_json() == {"error": "Project not found"}


def test_skill_proficiency_is_bounded(client, editor_headers) -> None:
    response = client.post(
        "/api/v1/admin/skills",
        json={"name": "Python", "category": "Backend", "proficiency": 150},
        headers=editor_headers,
    )

    assert response.status_code == 400
    assert response.get_json()["details"][0]["field"] == "proficiency"


def test_skill_update_ignores_null_for_required_fields(client, editor_headers) -> None:
    skill = client.post(
        "/api/v1/admin/skills",
        json={"name": "Python", "category": "Backend", "proficiency": 90, "icon": "py"},
        headers=editor_headers,
    ).get_json()

    response = client.put(
        f"/api/v1/admin/skills/{skill['id']}",
        json={"name": None, "icon": None},
        headers=editor_headers,
    )

    assert response.status_code == 200
    assert response.get_json()["name"] == "Python"
    assert response.get_json()["icon"] is None


def test_experience_dates_round_trip(client, editor_headers, viewer_headers) -> None:
    created = client.post(
        "/api/v1/admin/experience",
        json={
            "company": "Acme",
            "position": "Engineer",
            "location": "Remote",
            "start_date": "2023-01-15",
            "current": True,
            "description": "Work",
        },
        headers=editor_headers,
    )
    assert created.status_code == 201
    body = created.get_json()
    assert body["start_date"] == "2023-01-15"
    assert body["end_date"] is None

    public = client.get("/api/v1/config").get_json()
    assert public["data"]["experience"][0]["end_date"] == "present"

    log = AuditLog.query.filter_by(action="experience.create").one()
    assert log.payload["start_date"] == "2023-01-15"
    assert log.payload["end_date"] is None


def test_education_crud(client, editor_headers, viewer_headers) -> None:
    created = client.post(
        "/api/v1/admin/education",
        json={
            "institution": "Technical University",
            "degree": "BSc",
            "location": "Berlin",
            "start_date": "2016-10-01",
            "end_date": "2020-05-31",
        },
        headers=editor_headers,
    ).get_json()

    listed = client.get("/api/v1/admin/education", headers=viewer_headers).get_json()

    assert [e["id"] for e in listed["education"]] == [created["id"]]
    assert listed["education"][0]["field"] is None


def test_hidden_project_stays_in_admin_list_only(client, editor_headers, viewer_headers) -> None:
    project = _create_project(client, editor_headers, visible=False).get_json()

    admin_list = client.get("/api/v1/admin/projects", headers=viewer_headers).get_json()
    public = client.get("/api/v1/config").get_json()

    assert [p["id"] for p in admin_list["projects"]] == [project["id"]]
    assert public["data"]["projects"] == []


def test_profile_upsert(client, editor_headers, viewer_headers) -> None:
    assert client.get("/api/v1/admin/profile", headers=viewer_headers).get_json() == {"profile": None}

    payload = {
        "name": "Alex Morgan",
        "title": "Developer",
        "email": "alex@example.com",
        "location": "Berlin",
        "bio": "Hi",
        "social": {"github": "https://github.com/example"},
    }
    first = client.put("/api/v1/admin/profile", json=payload, headers=editor_headers).get_json()
    second = client.put(
        "/api/v1/admin/profile",
        json={**payload, "title": "Engineer"},
        headers=editor_headers,
    ).get_json()

    assert first["profile"]["id"] == second["profile"]["id"]
    assert second["profile"]["title"] == "Engineer"
    assert AuditLog.query.filter_by(entity_type="profile").count() == 2

    update_log = AuditLog.query.filter_by(action="profile.update").one()
    assert update_log.payload["title"] == "Engineer"
    assert update_log.payload["social"]["github"] == "https://github.com/example"


def test_profile_rejects_bad_email(client, editor_headers) -> None:
    response = client.put(
        "/api/v1/admin/profile",
        json={"name": "A", "title": "B", "email": "nope", "location": "C", "bio": "D"},
        headers=editor_headers,
    )

    assert response.status_code == 400
    assert response.get_json()["details"][0]["field"] == "email"


def test_about_upsert_uses_defaults(client, editor_headers) -> None:
    response = client.put(
        "/api/v1/admin/about",
        json={"description": ["First paragraph"]},
        headers=editor_headers,
    )

    about = response.get_json()["about"]
    assert about["section_label"] == "About Me"
    assert about["image_position"] == "right"
    assert about["description"] == ["First paragraph"]


def test_site_setting_upsert_reflects_in_config(client, editor_headers) -> None:
    response = client.put(
        "/api/v1/config",
        json={"key": "theme", "value": {"primaryColor": "#000"}},
        headers=editor_headers,
    )
    assert response.status_code == 200

    client.put(
        "/api/v1/config",
        json={"key": "theme", "value": {"primaryColor": "#fff"}},
        headers=editor_headers,
    )

    assert client.get("/api/v1/config").get_json()["theme"] == {"primaryColor": "#fff"}


def test_dashboard_counts(client, editor_headers, viewer_headers) -> None:
    _create_project(client, editor_headers)
    client.post("/api/v1/contact", json={"name": "A", "email": "a@example.com", "message": "Hi"})

    counts = client.get("/api/v1/admin/dashboard", headers=viewer_headers).get_json()["counts"]

    assert counts["projects"] == 1
    assert counts["unread_messages"] == 1
