# portfolio/api/v1/experience.py
from flask import jsonify, request

from portfolio.application.content.entities import (
    create_entity,
    delete_entity,
    get_entity,
    list_entities,
    update_entity,
)
from portfolio.models.experience import Experience
from portfolio.normalizers.experience import normalize_experience
from portfolio.schemas import parse_payload
from portfolio.schemas.content import ExperienceCreate, ExperienceUpdate, changed_fields
from portfolio.utils.decorators import roles_required
from . import v1_bp


@v1_bp.route("/admin/experience", methods=["GET"])
@roles_required("VIEWER")
def list_experience():
    return jsonify({
        "experience": [normalize_experience(e, admin=True) for e in list_entities(Experience)],
    }), 200


@v1_bp.route("/admin/experience", methods=["POST"])
@roles_required("EDITOR")
def create_experience():
    data = parse_payload(ExperienceCreate, request.get_json(silent=True))
    experience = create_entity(
        model=Experience,
        entity_type="experience",
        data=data.model_dump(),
    )
    return jsonify(normalize_experience(experience, admin=True)), 201


@v1_bp.route("/admin/experience/<experience_id>", methods=["GET"])
@roles_required("VIEWER")
def get_experience(experience_id):
    experience = get_entity(Experience, experience_id, "Experience")
    return jsonify(normalize_experience(experience, admin=True)), 200


@v1_bp.route("/admin/experience/<experience_id>", methods=["PUT"])
@roles_required("EDITOR")
def update_experience(experience_id):
    data = parse_payload(ExperienceUpdate, request.get_json(silent=True))
    experience = update_entity(
        model=Experience,
        entity_type="experience",
        label="Experience",
        entity_id=experience_id,
        data=changed_fields(data),
    )
    return jsonify(normalize_experience(experience, admin=True)), 200


@v1_bp.route("/admin/experience/<experience_id>", methods=["DELETE"])
@roles_required("ADMIN")
def delete_experience(experience_id):
    delete_entity(
        model=Experience,
        entity_type="experience",
        label="Experience",
        entity_id=experience_id,
    )
    return jsonify({"message": "Experience deleted successfully"}), 200
