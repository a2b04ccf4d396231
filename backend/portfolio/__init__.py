from flask import Flask, send_file, current_app, g
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .web import web_bp
from .errors import register_error_handlers
from .commands import register_commands
from .content.aggregator import discard_request_cache
from .utils.logging import configure_logging
from flask_swagger_ui import get_swaggerui_blueprint
import os


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Logging
    # -------------------------------------------------
    configure_logging(app)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # Models must be imported before create_all / migrations see them
    from . import models  # noqa: F401

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    app.register_blueprint(web_bp)
    register_error_handlers(app)
    register_commands(app)
    app.teardown_request(discard_request_cache)

    @app.teardown_request
    def forget_identity(exc=None):
        g.pop("current_user", None)

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route("/openapi/portfolio.yaml", methods=["GET"], endpoint="openapi_portfolio")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/portfolio.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Portfolio CMS API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    app.logger.info(f"Portfolio app created ({config_name})")
    return app
