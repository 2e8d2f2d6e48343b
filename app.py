#!/usr/bin/env python3
"""
Fire22 Staff Site — Application Entry Point
Creates the Flask app and registers the site, VIP CRM and contact Blueprints.
"""

import logging
import os
import time
import uuid

from flask import Flask, g, jsonify, request
from werkzeug.middleware.proxy_fix import ProxyFix

log = logging.getLogger("staffsite")
access_log = logging.getLogger("staffsite.access")


def create_app(config: dict = None):
    """Application factory.

    config: optional overrides applied to app.config before anything is built
    (tests pass DATA_DIR, TESTING and VIP_DATA_SOURCE).
    """
    from staffsite.core.cache import RenderCache
    from staffsite.core.config import load_config
    from staffsite.core.employees import EmployeeDirectory
    from staffsite.core.paths import DATA_DIR, ensure_dirs
    from staffsite.crm.service import VIPCRMService

    app = Flask(__name__)
    app.secret_key = os.environ.get("SECRET_KEY", "fire22-staffsite")
    app.config["DATA_DIR"] = DATA_DIR
    app.config["SITE"] = load_config()
    app.config["PROXY_HOPS"] = int(os.environ.get(
        "PROXY_HOPS", "1" if "RAILWAY_ENVIRONMENT" in os.environ else "0"))
    if config:
        app.config.update(config)
    ensure_dirs(app.config["DATA_DIR"])

    # Behind Railway's edge the client address arrives in X-Forwarded-For;
    # only the configured number of proxy hops is trusted.
    if app.config["PROXY_HOPS"]:
        hops = app.config["PROXY_HOPS"]
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops)

    # ── Shared services ──────────────────────────────────────────────────────
    app.extensions["employees"] = EmployeeDirectory(app.config["DATA_DIR"])
    app.extensions["render_cache"] = RenderCache()
    app.extensions["vip_crm"] = VIPCRMService(app.config.get("VIP_DATA_SOURCE"))

    # ── Routes ───────────────────────────────────────────────────────────────
    from staffsite.api.routes import bp as site_bp
    from staffsite.api.routes_contact import bp as contact_bp
    from staffsite.api.routes_vip import bp as vip_bp
    app.register_blueprint(site_bp)
    app.register_blueprint(vip_bp)
    app.register_blueprint(contact_bp)

    # ── Security middleware (rate limiting, headers) ─────────────────────────
    from staffsite.core.security import init_security
    init_security(app)

    # ── Request logging ──────────────────────────────────────────────────────
    @app.before_request
    def _start_request():
        g.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]
        g.started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        duration_ms = round((time.perf_counter() - g.get("started", time.perf_counter())) * 1000, 1)
        response.headers["X-Request-ID"] = g.get("request_id", "")
        access_log.info(
            "%s %s → %d (%.1fms)", request.method, request.path, response.status_code, duration_ms,
            extra={"route": request.path, "method": request.method,
                   "status": response.status_code, "duration_ms": duration_ms,
                   "request_id": g.get("request_id"), "subdomain": g.get("subdomain", "")})
        return response

    @app.errorhandler(404)
    def _not_found(e):
        message = app.config["SITE"]["errors"]["not_found"]
        if request.path.startswith("/api/"):
            return jsonify({"error": message}), 404
        return message, 404, {"Content-Type": "text/plain; charset=utf-8"}

    # ── Runtime self-test — catches path/route/data bugs at boot ─────────────
    from staffsite.core.startup_checks import run_startup_checks
    with app.app_context():
        checks = run_startup_checks(app)
        if checks["failed"] > 0:
            log.error("STARTUP: %d checks FAILED — review logs", checks["failed"])

    return app


# For gunicorn: gunicorn app:app
if os.environ.get("STAFFSITE_NO_AUTOAPP", "").lower() != "true":
    from logging_config import setup_logging
    setup_logging()
    app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=False)
