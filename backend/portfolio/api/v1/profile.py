# portfolio/api/v1/profile.py
from flask import jsonify, request

from portfolio.application.content.singletons import upsert_about, upsert_profile
from portfolio.models.about_section import AboutSection
from portfolio.models.profile import Profile
from portfolio.normalizers.profile import normalize_about, normalize_profile
from portfolio.schemas import parse_payload
from portfolio.schemas.content import AboutUpdate, ProfileUpdate
from portfolio.utils.decorators import roles_required
from . import v1_bp


@v1_bp.route("/admin/profile", methods=["GET"])
@roles_required("VIEWER")
def get_profile():
    return jsonify({"profile": normalize_profile(Profile.query.first())}), 200


@v1_bp.route("/admin/profile", methods=["PUT"])
@roles_required("EDITOR")
def update_profile():
    data = parse_payload(ProfileUpdate, request.get_json(silent=True))
    profile = upsert_profile(data.model_dump())
    return jsonify({"profile": normalize_profile(profile)}), 200


@v1_bp.route("/admin/about", methods=["GET"])
@roles_required("VIEWER")
def get_about():
    return jsonify({"about": normalize_about(AboutSection.query.first())}), 200


@v1_bp.route("/admin/about", methods=["PUT"])
@roles_required("EDITOR")
def update_about():
    data = parse_payload(AboutUpdate, request.get_json(silent=True))
    about = upsert_about(data.model_dump())
    return jsonify({"about": normalize_about(about)}), 200
