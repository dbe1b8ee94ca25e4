"""Public organisations endpoint."""

import json
import logging

from flask import Blueprint, Response, current_app, request

from orgapi.errors import MarshalFailure, OrganisationApiError
from orgapi.services import OrganisationService

from .canonical import canonical_redirect_path

logger = logging.getLogger(__name__)

organisations_bp = Blueprint("organisations", __name__)

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"


def _get_service() -> OrganisationService:
    service = current_app.config.get("ORGANISATION_SERVICE")
    if not isinstance(service, OrganisationService):
        raise RuntimeError("ORGANISATION_SERVICE config must be an OrganisationService instance")
    return service


def _json_message(message: str, status: int) -> Response:
    body = json.dumps({"message": message}, separators=(',', ':'))
    return Response(body, status=status, content_type=JSON_CONTENT_TYPE)


def _request_uri() -> str:
    """The request URI as the client sent it: undecoded, with any mount prefix and the query string."""
    raw_uri = request.environ.get("RAW_URI") or request.environ.get("REQUEST_URI")
    if raw_uri:
        return raw_uri
    uri = f"{request.script_root}{request.path}"
    if request.query_string:
        return f"{uri}?{request.query_string.decode('utf-8')}"
    return uri


@organisations_bp.get("/organisations/<uuid>")
def get_organisation(uuid: str) -> Response:
    """Serve one organisation, or redirect to its canonical uuid."""
    if not uuid.strip():
        return _json_message("uuid required", 400)

    try:
        organisation, found = _get_service().read(uuid)
    except OrganisationApiError as e:
        return _json_message(str(e), 500)

    if not found:
        return _json_message("Organisation not found.", 404)

    redirect_path = canonical_redirect_path(_request_uri(), uuid, organisation.id)
    if redirect_path is not None:
        logger.info("Redirecting alias uuid %s to %s", uuid, redirect_path)
        return Response(status=301, headers={"Location": redirect_path}, content_type=JSON_CONTENT_TYPE)

    try:
        body = organisation.to_json()
    except MarshalFailure as e:
        logger.error("Could not marshal organisation %s: %s", uuid, e)
        return _json_message(str(e), 500)

    response = Response(body, status=200, content_type=JSON_CONTENT_TYPE)
    response.headers["Cache-Control"] = current_app.config["SERVICE_CONFIG"].CACHE_CONTROL_HEADER
    return response
