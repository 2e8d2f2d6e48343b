"""
Request guards for the staff site.

    rate_limit(group)   token bucket per client IP and route group, 429 JSON when empty
    auth_required       HTTP Basic auth (DASH_USER / DASH_PASS) for directory admin routes
    init_security(app)  security headers from the SITE config on every response

Set DISABLE_RATE_LIMIT=true to switch limiting off (tests, load runs).
"""

import functools
import logging
import os
import secrets
import time
from threading import Lock

from flask import current_app, jsonify, request, Response

log = logging.getLogger("staffsite.security")

# ═══════════════════════════════════════════════════════════════════════════════
# Rate Limiting
# ═══════════════════════════════════════════════════════════════════════════════

# capacity = burst size, per_second = refill speed
RATE_LIMITS = {
    "page":   {"capacity": 100, "per_second": 100 / 60},
    "api":    {"capacity": 30,  "per_second": 1.0},
    "submit": {"capacity": 5,   "per_second": 0.1},
}


class RateLimiter:
    """Token buckets keyed by client and route group.

    Each bucket is (tokens, last_seen). Idle buckets are pruned once the
    table grows past max_buckets.
    """

    def __init__(self, clock=time.monotonic, max_buckets: int = 10_000):
        self._clock = clock
        self.max_buckets = max_buckets
        self._buckets = {}
        self._lock = Lock()

    def allow(self, key: str, capacity: int, per_second: float) -> bool:
        now = self._clock()
        with self._lock:
            tokens, seen = self._buckets.get(key, (capacity, now))
            tokens = min(capacity, tokens + (now - seen) * per_second)
            allowed = tokens >= 1
            self._buckets[key] = (tokens - 1 if allowed else tokens, now)
            crowded = len(self._buckets) > self.max_buckets
        if crowded:
            self.prune()
        return allowed

    def prune(self, idle_seconds: float = 3600) -> int:
        """Drop buckets unused for idle_seconds. Returns how many went."""
        cutoff = self._clock() - idle_seconds
        with self._lock:
            stale = [k for k, (_, seen) in self._buckets.items() if seen < cutoff]
            for k in stale:
                del self._buckets[k]
        if stale:
            log.debug("Pruned %d idle rate-limit buckets", len(stale))
        return len(stale)


_limiter = RateLimiter()


def _client_ip() -> str:
    # forwarded headers are folded into remote_addr by ProxyFix (PROXY_HOPS)
    return request.remote_addr or "unknown"


def _limiting_disabled() -> bool:
    return os.environ.get("DISABLE_RATE_LIMIT", "").lower() in ("1", "true", "yes")


def rate_limit(group: str = "page"):
    """Route decorator: spend one token from the caller's bucket for this group."""
    def decorator(view):
        @functools.wraps(view)
        def guarded(*args, **kwargs):
            if not _limiting_disabled():
                ip = _client_ip()
                if not _limiter.allow(f"{group}:{ip}", **RATE_LIMITS.get(group, RATE_LIMITS["page"])):
                    log.warning("Rate limit hit: ip=%s group=%s path=%s", ip, group, request.path)
                    message = current_app.config["SITE"]["errors"]["rate_limited"]
                    return jsonify({"success": False, "error": message}), 429
            return view(*args, **kwargs)
        return guarded
    return decorator


# ═══════════════════════════════════════════════════════════════════════════════
# Admin Auth
# ═══════════════════════════════════════════════════════════════════════════════

REALM = "Fire22 Staff Directory"


def check_auth(username, password) -> bool:
    expected_user = os.environ.get("DASH_USER", "fire22")
    expected_pass = os.environ.get("DASH_PASS", "changeme")
    user_ok = secrets.compare_digest(username or "", expected_user)
    pass_ok = secrets.compare_digest(password or "", expected_pass)
    return user_ok and pass_ok


def auth_required(view):
    @functools.wraps(view)
    def guarded(*args, **kwargs):
        creds = request.authorization
        if creds is None or not check_auth(creds.username, creds.password):
            log.info("Admin auth rejected for %s %s", request.method, request.path)
            return Response(f"🔒 {REALM} — login required", 401,
                            {"WWW-Authenticate": f'Basic realm="{REALM}"'})
        return view(*args, **kwargs)
    return guarded


# ═══════════════════════════════════════════════════════════════════════════════
# Response Headers
# ═══════════════════════════════════════════════════════════════════════════════

def apply_security_headers(response):
    """Configured security headers, plus no-store where a route set no Cache-Control."""
    for name, value in current_app.config["SITE"]["security_headers"].items():
        response.headers.setdefault(name, value)
    response.headers.setdefault("Cache-Control", "no-store")
    return response


def init_security(app):
    app.after_request(apply_security_headers)
    log.info("Security initialized: rate limits %s, admin auth, %d response headers",
             "off" if _limiting_disabled() else "on",
             len(app.config["SITE"]["security_headers"]))
