"""
VIP CRM JSON API — the endpoints behind /tools/vip/crm.

    GET /api/vip/insights
    GET /api/vip/activity?filter=all|vip|high-value|new-clients
    GET /api/vip/recommendations
    GET /api/vip/analytics?period=today|week|month|quarter
    GET /api/vip/workflows/<type>
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from ..core.security import rate_limit

log = logging.getLogger("staffsite.vip")

bp = Blueprint("vip", __name__)

NOT_FOUND = {"error": "Endpoint not found"}
INTERNAL_ERROR = {"error": "Internal server error"}

_WORKFLOWS_PREFIX = "/api/vip/workflows/"


def handle_vip_crm_api(path: str, params, service) -> tuple:
    """Dispatch a VIP CRM API path. Returns (status, payload); never raises."""
    try:
        if path == "/api/vip/insights":
            return 200, service.generate_ai_insights()
        if path == "/api/vip/activity":
            return 200, service.get_client_activity(params.get("filter") or "all")
        if path == "/api/vip/recommendations":
            return 200, service.generate_recommendations()
        if path == "/api/vip/analytics":
            return 200, service.generate_analytics(params.get("period") or "today")
        if path.startswith(_WORKFLOWS_PREFIX):
            return 200, service.get_workflow_configuration(path[len(_WORKFLOWS_PREFIX):])
        return 404, dict(NOT_FOUND)
    except Exception as e:
        log.error("VIP CRM API error on %s: %s", path, e, exc_info=True)
        return 500, dict(INTERNAL_ERROR)


@bp.route("/api/vip/<path:rest>", methods=["GET"])
@rate_limit("api")
def api_vip(rest):
    status, payload = handle_vip_crm_api(
        f"/api/vip/{rest}", request.args, current_app.extensions["vip_crm"])
    resp = jsonify(payload)
    resp.status_code = status
    resp.headers["Cache-Control"] = current_app.config["SITE"]["cache"]["api"]["cache_control"]
    return resp
