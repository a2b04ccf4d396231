# portfolio/api/v1/education.py
from flask import jsonify, request

from portfolio.application.content.entities import (
    create_entity,
    delete_entity,
    get_entity,
    list_entities,
    update_entity,
)
from portfolio.models.education import Education
from portfolio.normalizers.experience import normalize_education
from portfolio.schemas import parse_payload
from portfolio.schemas.content import EducationCreate, EducationUpdate, changed_fields
from portfolio.utils.decorators import roles_required
from . import v1_bp


@v1_bp.route("/admin/education", methods=["GET"])
@roles_required("VIEWER")
def list_education():
    return jsonify({
        "education": [normalize_education(e, admin=True) for e in list_entities(Education)],
    }), 200


@v1_bp.route("/admin/education", methods=["POST"])
@roles_required("EDITOR")
def create_education():
    data = parse_payload(EducationCreate, request.get_json(silent=True))
    education = create_entity(
        model=Education,
        entity_type="education",
        data=data.model_dump(),
    )
    return jsonify(normalize_education(education, admin=True)), 201


@v1_bp.route("/admin/education/<education_id>", methods=["GET"])
@roles_required("VIEWER")
def get_education(education_id):
    education = get_entity(Education, education_id, "Education")
    return jsonify(normalize_education(education, admin=True)), 200


@v1_bp.route("/admin/education/<education_id>", methods=["PUT"])
@roles_required("EDITOR")
def update_education(education_id):
    data = parse_payload(EducationUpdate, request.get_json(silent=True))
    education = update_entity(
        model=Education,
        entity_type="education",
        label="Education",
        entity_id=education_id,
        data=changed_fields(data),
    )
    return jsonify(normalize_education(education, admin=True)), 200


@v1_bp.route("/admin/education/<education_id>", methods=["DELETE"])
@roles_required("ADMIN")
def delete_education(education_id):
    delete_entity(
        model=Education,
        entity_type="education",
        label="Education",
        entity_id=education_id,
    )
    return jsonify({"message": "Education deleted successfully"}), 200
