# portfolio/web/pages.py
from flask import abort, current_app, render_template, request

from portfolio.content.aggregator import get_page_sections, load_config, request_cache
from portfolio.content.renderer import render_sections, shared_data_from_config
from . import web_bp


def render_page(page_name, *, preview=False):
    """
    Render one public page: visible sections in order, each fed the
    page's shared data.
    """
    cache = request_cache()
    config = load_config(cache)
    sections = get_page_sections(page_name, cache)
    shared = shared_data_from_config(config, page_name)

    return render_template(
        "page.html",
        site=config,
        page_name=page_name,
        preview=preview,
        rendered=render_sections(sections, shared, preview=preview),
    )


@web_bp.route("/", methods=["GET"])
def home():
    # /?preview=<page> renders any page the way the builder previews it
    preview_page = request.args.get("preview")
    if preview_page:
        if preview_page not in current_app.config["SITE_PAGES"]:
            abort(404)
        return render_page(preview_page, preview=True)

    return render_page("home")


@web_bp.route("/about", methods=["GET"])
def about():
    return render_page("about")


@web_bp.route("/projects", methods=["GET"])
def projects():
    return render_page("projects")


@web_bp.route("/experience", methods=["GET"])
def experience():
    return render_page("experience")


@web_bp.route("/contact", methods=["GET"])
def contact():
    return render_page("contact")
