"""Operational endpoints: health check, good-to-go, ping and build info."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

from flask import Blueprint, Response, current_app

from orgapi import __version__
from orgapi.errors import StoreUnavailable

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__)

CONNECTIVITY_CHECK = {
    "name": "Check connectivity to the graph store",
    "severity": 2,
    "businessImpact": "Unable to respond to Public Organisations api requests",
    "technicalSummary": "Cannot connect to a graph store instance with at least one organisation loaded in it",
    "panicGuide": "See the Runbook section of the project README",
}


def checker() -> Tuple[str, bool]:
    """Probe the graph store. Returns the check output and whether it passed."""
    service = current_app.config["ORGANISATION_SERVICE"]
    try:
        service.check_connectivity()
    except StoreUnavailable as e:
        cause = e.__cause__ or e
        logger.error("Graph store connectivity check failed: %s", cause)
        return f"Error connecting to the graph store: {cause}", False
    return "Connectivity to the graph store is ok", True


def _health_document(output: str, ok: bool) -> Dict[str, Any]:
    config = current_app.config["SERVICE_CONFIG"]
    check = {"id": f"{config.GRAPH_BACKEND.value}-check"}
    check.update(CONNECTIVITY_CHECK)
    check.update({
        "ok": ok,
        "checkOutput": output,
        "lastUpdated": datetime.now(timezone.utc).isoformat(),
    })
    return {
        "schemaVersion": 1,
        "name": config.APP_NAME,
        "description": "Serves organisations and their memberships from the graph store",
        "checks": [check],
        "ok": ok,
    }


@health_bp.get("/__health")
def health() -> Response:
    output, ok = checker()
    body = json.dumps(_health_document(output, ok))
    return Response(body, status=200, content_type="application/json; charset=UTF-8")


@health_bp.get("/__gtg")
def good_to_go() -> Response:
    """Returns 503 when the health check fails, for load balancers to take the node out."""
    output, ok = checker()
    headers = {"Cache-Control": "no-cache, no-store, must-revalidate"}
    if not ok:
        return Response(output, status=503, headers=headers, content_type="text/plain; charset=UTF-8")
    return Response("OK", status=200, headers=headers, content_type="text/plain; charset=UTF-8")


@health_bp.get("/__ping")
def ping() -> Response:
    return Response("pong", status=200, content_type="text/plain; charset=UTF-8")


@health_bp.get("/__build-info")
def build_info() -> Response:
    config = current_app.config["SERVICE_CONFIG"]
    body = json.dumps({"appName": config.APP_NAME, "version": __version__})
    return Response(body, status=200, content_type="application/json; charset=UTF-8")
