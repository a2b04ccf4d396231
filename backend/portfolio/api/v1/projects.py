# portfolio/api/v1/projects.py
from flask import jsonify, request

from portfolio.application.content.entities import (
    create_entity,
    delete_entity,
    get_entity,
    list_entities,
    update_entity,
)
from portfolio.models.project import Project
from portfolio.normalizers.project import normalize_project
from portfolio.schemas import parse_payload
from portfolio.schemas.content import ProjectCreate, ProjectUpdate, changed_fields
from portfolio.utils.decorators import roles_required
from . import v1_bp


@v1_bp.route("/admin/projects", methods=["GET"])
@roles_required("VIEWER")
def list_projects():
    return jsonify({
        "projects": [normalize_project(p, admin=True) for p in list_entities(Project)],
    }), 200


@v1_bp.route("/admin/projects", methods=["POST"])
@roles_required("EDITOR")
def create_project():
    data = parse_payload(ProjectCreate, request.get_json(silent=True))

    if Project.query.filter_by(slug=data.slug).first():
        return jsonify({"error": "Slug already exists"}), 409

    project = create_entity(
        model=Project,
        entity_type="project",
        data=data.model_dump(),
    )
    return jsonify(normalize_project(project, admin=True)), 201


@v1_bp.route("/admin/projects/<project_id>", methods=["GET"])
@roles_required("VIEWER")
def get_project(project_id):
    project = get_entity(Project, project_id, "Project")
    return jsonify(normalize_project(project, admin=True)), 200


@v1_bp.route("/admin/projects/<project_id>", methods=["PUT"])
@roles_required("EDITOR")
def update_project(project_id):
    data = parse_payload(ProjectUpdate, request.get_json(silent=True))
    fields = changed_fields(data)

    # Slug collision check
    if "slug" in fields:
        existing = Project.query.filter_by(slug=fields["slug"]).first()
        if existing and existing.id != project_id:
            return jsonify({"error": "Slug already exists"}), 409

    project = update_entity(
        model=Project,
        entity_type="project",
        label="Project",
        entity_id=project_id,
        data=fields,
    )
    return jsonify(normalize_project(project, admin=True)), 200


@v1_bp.route("/admin/projects/<project_id>", methods=["DELETE"])
@roles_required("ADMIN")
def delete_project(project_id):
    delete_entity(
        model=Project,
        entity_type="project",
        label="Project",
        entity_id=project_id,
    )
    return jsonify({"message": "Project deleted successfully"}), 200
