# portfolio/api/v1/layouts.py
from flask import Response, jsonify, request

from portfolio.application.content.layouts import edit_layout, save_layout
from portfolio.content.aggregator import get_page_sections, load_config, request_cache
from portfolio.content.layouts import LayoutStore
from portfolio.content.renderer import render_sections, shared_data_from_config
from portfolio.normalizers.section import serialize_sections
from portfolio.schemas import parse_payload
from portfolio.schemas.layout import LayoutPatch, LayoutSave
from portfolio.utils.decorators import roles_required
from . import v1_bp


@v1_bp.route("/admin/layouts/<page_name>", methods=["GET"])
@roles_required("VIEWER")
def get_layout(page_name):
    # Hidden sections are included; the builder shows them dimmed
    sections = LayoutStore().load(page_name)
    sections = sorted(sections, key=lambda s: s.order)

    return jsonify({
        "page": page_name,
        "sections": serialize_sections(sections),
    }), 200


@v1_bp.route("/admin/layouts/<page_name>", methods=["PUT"])
@roles_required("EDITOR")
def replace_layout(page_name):
    data = parse_payload(LayoutSave, request.get_json(silent=True))

    sections = save_layout(
        page_name=page_name,
        sections=[s.model_dump() for s in data.sections],
    )

    return jsonify({
        "page": page_name,
        "sections": serialize_sections(sections),
    }), 200


@v1_bp.route("/admin/layouts/<page_name>", methods=["PATCH"])
@roles_required("EDITOR")
def patch_layout(page_name):
    data = parse_payload(LayoutPatch, request.get_json(silent=True))

    editor = edit_layout(page_name=page_name, operations=data.operations)
    state = editor.state

    return jsonify({
        "page": page_name,
        "sections": serialize_sections(state.sections),
        "selection": state.selection,
    }), 200


@v1_bp.route("/admin/layouts/<page_name>/preview", methods=["GET"])
@roles_required("VIEWER")
def preview_layout(page_name):
    """
    Render every visible section of the stored layout as one HTML
    fragment, with preview styling on.
    """
    cache = request_cache()
    config = load_config(cache)

    sections = get_page_sections(page_name, cache)
    shared = shared_data_from_config(config, page_name)
    html = "\n".join(render_sections(sections, shared, preview=True))

    return Response(html, mimetype="text/html")
