# portfolio/api/v1/skills.py
from flask import jsonify, request

from portfolio.application.content.entities import (
    create_entity,
    delete_entity,
    get_entity,
    list_entities,
    update_entity,
)
from portfolio.models.skill import Skill
from portfolio.normalizers.skill import normalize_skill
from portfolio.schemas import parse_payload
from portfolio.schemas.content import SkillCreate, SkillUpdate, changed_fields
from portfolio.utils.decorators import roles_required
from . import v1_bp


@v1_bp.route("/admin/skills", methods=["GET"])
@roles_required("VIEWER")
def list_skills():
    return jsonify({
        "skills": [normalize_skill(s, admin=True) for s in list_entities(Skill)],
    }), 200


@v1_bp.route("/admin/skills", methods=["POST"])
@roles_required("EDITOR")
def create_skill():
    data = parse_payload(SkillCreate, request.get_json(silent=True))
    skill = create_entity(model=Skill, entity_type="skill", data=data.model_dump())
    return jsonify(normalize_skill(skill, admin=True)), 201


@v1_bp.route("/admin/skills/<skill_id>", methods=["GET"])
@roles_required("VIEWER")
def get_skill(skill_id):
    skill = get_entity(Skill, skill_id, "Skill")
    return jsonify(normalize_skill(skill, admin=True)), 200


@v1_bp.route("/admin/skills/<skill_id>", methods=["PUT"])
@roles_required("EDITOR")
def update_skill(skill_id):
    data = parse_payload(SkillUpdate, request.get_json(silent=True))
    skill = update_entity(
        model=Skill,
        entity_type="skill",
        label="Skill",
        entity_id=skill_id,
        data=changed_fields(data),
    )
    return jsonify(normalize_skill(skill, admin=True)), 200


@v1_bp.route("/admin/skills/<skill_id>", methods=["DELETE"])
@roles_required("ADMIN")
def delete_skill(skill_id):
    delete_entity(model=Skill, entity_type="skill", label="Skill", entity_id=skill_id)
    return jsonify({"message": "Skill deleted successfully"}), 200
