"""Flask application factory for the organisations API."""

from flask import Flask, Response

from orgapi.config import ServiceConfig
from orgapi.services import OrganisationService


def create_app(service: OrganisationService, config: ServiceConfig) -> Flask:
    """Create and configure the Flask application around an already built service."""

    app = Flask(__name__)
    app.config["ORGANISATION_SERVICE"] = service
    app.config["SERVICE_CONFIG"] = config

    from .health import health_bp
    from .organisations import organisations_bp

    app.register_blueprint(organisations_bp)
    app.register_blueprint(health_bp)

    @app.errorhandler(405)
    def method_not_allowed(_error) -> Response:
        return Response(status=405)

    return app
