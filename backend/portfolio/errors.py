from flask import jsonify, current_app, render_template, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from portfolio.domain.invariants.exceptions import InvariantViolation
from portfolio.domain.errors import (
    ValidationFailed,
    EntityNotFound,
    ConfigLoadError,
    LayoutSaveError,
    SectionNotFound,
)


def _is_public_page():
    return request.blueprint == "web"


def _error_page(code, message):
    return render_template("error.html", code=code, message=message), code


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(ValidationFailed)
    def handle_validation_failed(error):
        return jsonify({
            "error": "Validation failed",
            "details": error.details
        }), 400

    @app.errorhandler(EntityNotFound)
    def handle_not_found(error):
        return jsonify({"error": str(error)}), 404

    @app.errorhandler(SectionNotFound)
    def handle_section_not_found(error):
        return jsonify({"error": str(error)}), 400

    @app.errorhandler(ConfigLoadError)
    def handle_config_load_error(error):
        current_app.logger.error(f"Config load failed: {error}")
        if _is_public_page():
            return _error_page(500, "The site is temporarily unavailable.")
        return jsonify({"error": "Failed to load configuration"}), 500

    @app.errorhandler(LayoutSaveError)
    def handle_layout_save_error(error):
        current_app.logger.error(f"Layout save failed: {error}")
        return jsonify({"error": "Failed to save page layout"}), 500

    @app.errorhandler(SQLAlchemyError)
    def handle_store_failure(error):
        current_app.logger.exception("Store operation failed")
        if _is_public_page():
            return _error_page(500, "The site is temporarily unavailable.")
        return jsonify({"error": "Store operation failed"}), 500

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        if _is_public_page():
            return _error_page(error.code, error.description)
        return jsonify({"error": error.description}), error.code
