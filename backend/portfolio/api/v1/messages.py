# portfolio/api/v1/messages.py
from flask import jsonify, request

from portfolio.application.content.messages import (
    MESSAGE_FILTERS,
    delete_message,
    get_message,
    list_messages,
    submit_message,
    update_message,
)
from portfolio.normalizers.message import normalize_message
from portfolio.schemas import parse_payload
from portfolio.schemas.content import ContactCreate, MessageUpdate
from portfolio.utils.decorators import roles_required
from . import v1_bp


@v1_bp.route("/contact", methods=["POST"])
def contact():
    data = parse_payload(ContactCreate, request.get_json(silent=True))
    submit_message(data.model_dump())
    return jsonify({"success": True}), 201


@v1_bp.route("/admin/messages", methods=["GET"])
@roles_required("VIEWER")
def list_contact_messages():
    filter_name = request.args.get("filter")
    if filter_name and filter_name not in MESSAGE_FILTERS:
        return jsonify({"error": f"Unknown filter: {filter_name}"}), 400

    return jsonify({
        "messages": [normalize_message(m) for m in list_messages(filter_name)],
    }), 200


@v1_bp.route("/admin/messages/<message_id>", methods=["GET"])
@roles_required("VIEWER")
def get_contact_message(message_id):
    return jsonify(normalize_message(get_message(message_id))), 200


@v1_bp.route("/admin/messages/<message_id>", methods=["PATCH"])
@roles_required("EDITOR")
def update_contact_message(message_id):
    data = parse_payload(MessageUpdate, request.get_json(silent=True))
    message = update_message(message_id, data.model_dump())
    return jsonify(normalize_message(message)), 200


@v1_bp.route("/admin/messages/<message_id>", methods=["DELETE"])
@roles_required("ADMIN")
def delete_contact_message(message_id):
    delete_message(message_id)
    return jsonify({"message": "Message deleted successfully"}), 200
