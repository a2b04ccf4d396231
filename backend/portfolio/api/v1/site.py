# portfolio/api/v1/site.py
from flask import jsonify, request

from portfolio.application.content.singletons import upsert_setting
from portfolio.content.aggregator import get_page_sections, load_config, request_cache
from portfolio.content.registry import catalog
from portfolio.normalizers.section import serialize_sections
from portfolio.schemas import parse_payload
from portfolio.schemas.content import SiteConfigUpdate
from portfolio.utils.decorators import roles_required
from . import v1_bp


@v1_bp.route("/config", methods=["GET"])
def get_config():
    return jsonify(load_config(request_cache())), 200


@v1_bp.route("/config", methods=["PUT"])
@roles_required("EDITOR")
def update_config():
    data = parse_payload(SiteConfigUpdate, request.get_json(silent=True))
    setting = upsert_setting(data.key, data.value)

    return jsonify({
        "id": setting.id,
        "key": setting.key,
        "value": setting.value,
    }), 200


@v1_bp.route("/pages/<page_name>/sections", methods=["GET"])
def list_page_sections(page_name):
    sections = get_page_sections(page_name, request_cache())
    return jsonify({
        "page": page_name,
        "sections": serialize_sections(sections),
    }), 200


@v1_bp.route("/sections/types", methods=["GET"])
def list_section_types():
    return jsonify({"types": catalog()}), 200
