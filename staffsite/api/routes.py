"""
Site routes — personal pages and employee JSON endpoints.

The Host header picks the employee: <sub>.<domain> serves that staff
member's pages, the bare domain (or www) serves the staff directory, and
any other host (local dev) falls back to the default_subdomain setting.
"""

import logging
from datetime import datetime, timezone

from flask import Blueprint, current_app, g, jsonify, request

from .pages import (generate_404_page, generate_contact_page, generate_profile_page,
                    generate_root_domain_page, generate_schedule_page, generate_tools_page,
                    meeting_types_for, weekly_availability)
from ..core.cache import render_cache_key
from ..core.config import SCHEDULING_FEATURE, can_schedule, employee_tools
from ..core.employees import is_valid_subdomain, validate_employee_data
from ..core.security import auth_required, rate_limit

log = logging.getLogger("staffsite.routes")

bp = Blueprint("site", __name__)


# ═══════════════════════════════════════════════════════════════════════
# Host → employee
# ═══════════════════════════════════════════════════════════════════════

def resolve_subdomain(host: str, site: dict):
    """Staff subdomain for a Host header, or None for the directory."""
    host = (host or "").split(":")[0].strip().lower()
    domain = site["domain"].lower()
    if host in (domain, f"www.{domain}"):
        return None
    if host.endswith(f".{domain}"):
        return host[:-len(domain) - 1]
    return site.get("default_subdomain") or None


def _directory():
    return current_app.extensions["employees"]


def _api_error(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def lookup_employee():
    """(subdomain, employee, error) for the current request.

    subdomain is None on the directory host. error is a ready 400 response
    when the subdomain is malformed. employee is None when nobody owns it.
    """
    site = current_app.config["SITE"]
    sub = resolve_subdomain(request.host, site)
    g.subdomain = sub or ""
    if sub is None:
        return None, None, None
    if not is_valid_subdomain(sub):
        log.warning("Invalid subdomain requested: %r", sub)
        return sub, None, _api_error(site["errors"]["invalid_subdomain"], 400)
    return sub, _directory().get(sub), None


def require_employee():
    """(employee, None), or (None, JSON error response) for JSON endpoints."""
    _, employee, error = lookup_employee()
    if error is not None:
        return None, error
    if employee is None:
        return None, _api_error("Employee not found", 404)
    return employee, None


# ═══════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════

def _serve_page(page_type: str, builder, *args, gate=None):
    """Render (or fetch from cache) one page for the request's employee.

    gate: optional (predicate, error key). An employee failing the predicate
    gets a 403 JSON error instead of the page.
    """
    site = current_app.config["SITE"]
    sub, employee, error = lookup_employee()
    if error is not None:
        return error
    if sub is not None and employee is None:
        log.info("No employee for subdomain %r", sub)
        return generate_404_page(sub), 404, {"Cache-Control": "no-cache",
                                             "Content-Type": "text/html; charset=utf-8"}
    if employee is not None and gate is not None and not gate[0](employee):
        log.info("Page %s refused for %s", request.path, employee.get("id"))
        return _api_error(site["errors"][gate[1]], 403)
    if employee is None:
        page_type = "root"

    cache_cfg = site["cache"][page_type]
    cache = current_app.extensions["render_cache"]
    key = render_cache_key(employee or {"id": "_root"}, request.path)
    use_cache = site["render_cache"] and employee is not None

    html = cache.get(key) if use_cache else None
    if html is None:
        try:
            if employee is None:
                html = generate_root_domain_page(_directory().load())
            else:
                html = builder(employee, *args)
        except Exception as e:
            log.error("Page render failed: %s %s: %s", g.get("subdomain"), request.path, e,
                      exc_info=True)
            return _api_error(site["errors"]["internal"], 500)
        if use_cache:
            cache.set(key, html, cache_cfg["ttl"])

    return html, 200, {"Cache-Control": cache_cfg["cache_control"],
                       "Content-Type": "text/html; charset=utf-8"}


@bp.route("/")
@bp.route("/profile")
@rate_limit()
def profile():
    return _serve_page("profile", generate_profile_page)


@bp.route("/contact")
@rate_limit()
def contact():
    return _serve_page("contact", generate_contact_page)


@bp.route("/schedule")
@rate_limit()
def schedule():
    return _serve_page("schedule", generate_schedule_page,
                       gate=(can_schedule, "scheduling_unavailable"))


@bp.route("/tools")
@bp.route("/tools/<path:subpath>")
@rate_limit()
def tools(subpath=None):
    return _serve_page("tools", generate_tools_page, request.path)


# ═══════════════════════════════════════════════════════════════════════
# JSON API
# ═══════════════════════════════════════════════════════════════════════

def _no_cache(resp):
    resp.headers["Cache-Control"] = current_app.config["SITE"]["cache"]["api"]["cache_control"]
    return resp


@bp.route("/api/profile")
@rate_limit("api")
def api_profile():
    employee, error = require_employee()
    if error is not None:
        return error
    return _no_cache(jsonify({
        "success": True,
        "data": employee,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }))


@bp.route("/api/tools")
@rate_limit("api")
def api_tools():
    employee, error = require_employee()
    if error is not None:
        return error
    tier = employee.get("tier", 1)
    return _no_cache(jsonify({
        "success": True,
        "data": {
            "department": employee.get("department", ""),
            "tier": tier,
            "tools": employee_tools(employee),
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }))


@bp.route("/api/status")
@rate_limit("api")
def api_status():
    employee, error = require_employee()
    if error is not None:
        return error
    site = current_app.config["SITE"]
    return _no_cache(jsonify({
        "success": True,
        "data": {
            "employee": employee.get("name"),
            "subdomain": employee.get("id"),
            "tier": employee.get("tier"),
            "department": employee.get("department"),
            "features": employee.get("features") or [],
            "last_updated": employee.get("last_updated"),
            "cache": current_app.extensions["render_cache"].stats(),
            "config": {"domain": site["domain"], "site_name": site["site_name"]},
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }))


@bp.route("/api/schedule")
@rate_limit("api")
def api_schedule():
    employee, error = require_employee()
    if error is not None:
        return error
    if not can_schedule(employee):
        return jsonify({"success": False, "error": "Schedule access not available for this tier",
                        "code": "INSUFFICIENT_TIER",
                        "details": {"required_feature": SCHEDULING_FEATURE,
                                    "current_tier": employee.get("tier")}}), 403
    return _no_cache(jsonify({
        "success": True,
        "data": {
            "employee": employee.get("name"),
            "timezone": "America/New_York",
            "availability": weekly_availability(employee),
            "meeting_types": meeting_types_for(employee),
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }))


@bp.route("/api/cache/clear", methods=["POST"])
@auth_required
def api_cache_clear():
    dropped = current_app.extensions["render_cache"].clear()
    log.info("Render cache cleared by admin (%d entries)", dropped)
    return _no_cache(jsonify({"success": True, "cleared": dropped}))


@bp.route("/api/health")
def api_health():
    employees = _directory().load()
    return _no_cache(jsonify({
        "status": "ok",
        "service": "fire22-staffsite",
        "employees": len(employees),
        "render_cache": current_app.extensions["render_cache"].stats(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }))


@bp.route("/api/employees", methods=["GET"])
@auth_required
def api_employees():
    """Directory listing with each record's validation result."""
    rows = []
    for emp in _directory().load():
        check = validate_employee_data(emp)
        rows.append({"id": emp.get("id"), "name": emp.get("name"),
                     "department": emp.get("department"), "tier": emp.get("tier"),
                     "valid": check["ok"], "errors": check["errors"],
                     "warnings": check["warnings"]})
    return _no_cache(jsonify({"success": True, "count": len(rows), "data": rows}))


@bp.route("/api/employees", methods=["POST"])
@auth_required
def api_employees_upsert():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _api_error("JSON object body required", 400)
    result = _directory().upsert(data)
    if not result["ok"]:
        return jsonify({"success": False, "errors": result["errors"]}), 400
    current_app.extensions["render_cache"].clear()
    return jsonify({"success": True, "data": result["employee"],
                    "warnings": result["warnings"]}), 201
