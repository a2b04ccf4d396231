from flask import request, jsonify
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    get_jwt,
    get_jwt_identity,
    jwt_required,
)
from portfolio.extensions import db
from portfolio.models.user import User
from portfolio.schemas import parse_payload
from portfolio.schemas.content import LoginRequest
from portfolio.utils.decorators import roles_required
from . import v1_bp


def issue_tokens(user):
    claims = {"role": user.role}
    return {
        "access_token": create_access_token(identity=user.id, additional_claims=claims),
        "refresh_token": create_refresh_token(identity=user.id, additional_claims=claims),
    }


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = parse_payload(LoginRequest, request.get_json(silent=True))

    user = User.query.filter_by(email=data.email).first()

    if not user or not user.check_password(data.password):
        return jsonify({"error": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"error": "User account disabled"}), 403

    return jsonify(issue_tokens(user)), 200


@v1_bp.route("/auth/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    user = db.session.get(User, get_jwt_identity())
    if not user or not user.is_active:
        return jsonify({"error": "User account disabled"}), 403

    access_token = create_access_token(
        identity=user.id,
        additional_claims={"role": user.role},
    )
    return jsonify({"access_token": access_token}), 200


@v1_bp.route("/auth/me", methods=["GET"])
@roles_required("VIEWER")
def me():
    user = db.session.get(User, get_jwt_identity())
    if not user:
        return jsonify({"error": "User not found"}), 404

    return jsonify({
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "role": get_jwt().get("role"),
        "is_active": user.is_active,
    }), 200
