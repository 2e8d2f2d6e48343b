"""
Integration tests for the site routes.

Host headers pick the employee: vinny2times.sportsfire.co (tier 5),
jane-smith.sportsfire.co (tier 1), sportsfire.co (directory). The
directory auto-seeds from employees_seed.json.
"""
import base64

import pytest

from staffsite.core import security
from staffsite.core.security import RATE_LIMITS, RateLimiter


def _auth_headers(user="fire22", pw="changeme"):
    creds = base64.b64encode(f"{user}:{pw}".encode()).decode()
    return {"Authorization": f"Basic {creds}"}


# ═══════════════════════════════════════════════════════════════════════════════
# PAGES
# ═══════════════════════════════════════════════════════════════════════════════

class TestPages:

    @pytest.mark.parametrize("path", ["/", "/profile", "/contact", "/schedule", "/tools",
                                      "/tools/vip", "/tools/vip/crm", "/tools/fantasy402"])
    def test_vip_pages_load(self, client, path):
        r = client.get(path)
        assert r.status_code == 200
        assert r.content_type.startswith("text/html")
        assert b"Vinny2Times" in r.data

    def test_cache_control_per_page_type(self, client):
        assert client.get("/profile").headers["Cache-Control"] == "public, max-age=300"
        assert client.get("/contact").headers["Cache-Control"] == "public, max-age=300"
        assert client.get("/tools").headers["Cache-Control"] == "public, max-age=60"

    def test_security_headers(self, client):
        r = client.get("/profile")
        assert r.headers["X-Content-Type-Options"] == "nosniff"
        assert r.headers["X-Frame-Options"] == "SAMEORIGIN"

    def test_request_id_header(self, client):
        r = client.get("/contact")
        assert r.headers.get("X-Request-ID")

    def test_request_id_passed_through(self, client):
        r = client.get("/contact", headers={"X-Request-ID": "abc123"})
        assert r.headers["X-Request-ID"] == "abc123"

    def test_vip_contact_markup(self, client, standard_client):
        assert b'id="vip-form"' in client.get("/contact").data
        assert b'id="vip-form"' not in standard_client.get("/contact").data

    def test_schedule_needs_scheduling_feature(self, standard_client):
        r = standard_client.get("/schedule")
        assert r.status_code == 403
        assert r.get_json()["error"] == "Scheduling not available for this user"
        assert b'href="/schedule"' not in standard_client.get("/profile").data

    def test_restricted_tool_for_low_tier(self, standard_client):
        r = standard_client.get("/tools/vip/crm")
        assert r.status_code == 200
        assert b"requires Tier 5 access" in r.data

    def test_host_is_case_insensitive(self, app):
        with app.test_client() as c:
            r = c.get("/profile", base_url="http://VINNY2TIMES.sportsfire.co")
        assert r.status_code == 200

    def test_port_ignored(self, app):
        with app.test_client() as c:
            r = c.get("/profile", base_url="http://jane-smith.sportsfire.co:8080")
        assert b"Jane Smith" in r.data


class TestDirectoryAndErrors:

    def test_root_domain_directory(self, root_client):
        r = root_client.get("/")
        assert r.status_code == 200
        assert b"Staff Directory" in r.data
        assert b"vinny2times.sportsfire.co" in r.data

    def test_www_is_directory(self, app):
        with app.test_client() as c:
            r = c.get("/", base_url="http://www.sportsfire.co")
        assert b"https://vinny2times.sportsfire.co/" in r.data

    def test_unknown_employee_404_html(self, app):
        with app.test_client() as c:
            r = c.get("/profile", base_url="http://nobody.sportsfire.co")
        assert r.status_code == 404
        assert b"Profile Not Found" in r.data
        assert r.headers["Cache-Control"] == "no-cache"

    def test_invalid_subdomain_400(self, app):
        with app.test_client() as c:
            r = c.get("/profile", base_url="http://-bad.sportsfire.co")
        assert r.status_code == 400
        assert r.get_json() == {"success": False, "error": "Invalid subdomain format"}

    def test_unknown_api_path_json_404(self, client):
        r = client.get("/api/does-not-exist")
        assert r.status_code == 404
        assert r.get_json() == {"error": "Endpoint not found"}

    def test_default_subdomain_for_local_host(self, app):
        app.config["SITE"]["default_subdomain"] = "jane-smith"
        with app.test_client() as c:
            r = c.get("/profile", base_url="http://localhost:5000")
        assert b"Jane Smith" in r.data

    def test_local_host_without_default_is_directory(self, app):
        with app.test_client() as c:
            r = c.get("/", base_url="http://localhost:5000")
        assert b"https://vinny2times.sportsfire.co/" in r.data

    def test_render_failure_returns_500_json(self, client, monkeypatch):
        import staffsite.api.routes as routes

        def explode(employee):
            raise RuntimeError("template bug")
        monkeypatch.setattr(routes, "generate_schedule_page", explode)
        r = client.get("/schedule")
        assert r.status_code == 500
        assert r.get_json() == {"success": False, "error": "Internal server error"}


# ═══════════════════════════════════════════════════════════════════════════════
# RENDER CACHE
# ═══════════════════════════════════════════════════════════════════════════════

class TestRenderCaching:

    def test_second_request_hits_cache(self, app, client):
        client.get("/profile")
        client.get("/profile")
        assert app.extensions["render_cache"].stats()["hits"] == 1

    def test_disabled(self, app, client):
        app.config["SITE"]["render_cache"] = False
        client.get("/profile")
        client.get("/profile")
        assert app.extensions["render_cache"].stats()["entries"] == 0

    def test_directory_not_cached(self, app, root_client):
        root_client.get("/")
        assert app.extensions["render_cache"].stats()["entries"] == 0


# ═══════════════════════════════════════════════════════════════════════════════
# JSON API
# ═══════════════════════════════════════════════════════════════════════════════

class TestEmployeeAPI:

    def test_profile(self, client):
        d = client.get("/api/profile").get_json()
        assert d["success"] is True
        assert d["data"]["id"] == "vinny2times"
        assert "timestamp" in d

    def test_profile_unknown_employee(self, app):
        with app.test_client() as c:
            r = c.get("/api/profile", base_url="http://nobody.sportsfire.co")
        assert r.status_code == 404
        assert r.get_json()["error"] == "Employee not found"

    def test_tools_filtered_by_tier(self, client, standard_client):
        vip_tools = client.get("/api/tools").get_json()["data"]["tools"]
        assert any(t["url"] == "/tools/vip/crm" for t in vip_tools)
        low = standard_client.get("/api/tools").get_json()["data"]
        assert low["tier"] == 1
        assert all(t["min_tier"] <= 1 for t in low["tools"])

    def test_status(self, client):
        d = client.get("/api/status").get_json()["data"]
        assert d["subdomain"] == "vinny2times"
        assert "premium-scheduling" in d["features"]
        assert set(d["cache"]) == {"entries", "hits", "misses"}
        assert d["config"]["domain"] == "sportsfire.co"

    def test_schedule(self, client):
        r = client.get("/api/schedule")
        assert r.status_code == 200
        d = r.get_json()["data"]
        assert d["timezone"] == "America/New_York"
        assert any(m["id"] == "vip" for m in d["meeting_types"])

    def test_schedule_requires_feature(self, standard_client):
        r = standard_client.get("/api/schedule")
        assert r.status_code == 403
        assert r.get_json()["code"] == "INSUFFICIENT_TIER"

    def test_tools_hide_schedule_without_feature(self, standard_client):
        tools = standard_client.get("/api/tools").get_json()["data"]["tools"]
        assert "/schedule" not in {t.get("url") for t in tools}

    def test_health(self, root_client):
        r = root_client.get("/api/health")
        assert r.status_code == 200
        d = r.get_json()
        assert d["status"] == "ok"
        assert d["employees"] >= 2
        assert r.headers["Cache-Control"] == "no-cache"


class TestAdminAPI:

    def test_requires_auth(self, root_client):
        r = root_client.get("/api/employees")
        assert r.status_code == 401
        assert "WWW-Authenticate" in r.headers

    def test_wrong_password(self, root_client):
        r = root_client.get("/api/employees", headers=_auth_headers("fire22", "wrong"))
        assert r.status_code == 401

    def test_list(self, admin_client):
        d = admin_client.get("/api/employees").get_json()
        assert d["success"] is True
        assert d["count"] == len(d["data"])
        assert all(row["valid"] for row in d["data"])

    def test_upsert_and_serve(self, app, admin_client, standard_employee):
        new = dict(standard_employee, id="new-hire", name="New Hire", email="new.hire@fire22.com")
        r = admin_client.post("/api/employees", json=new)
        assert r.status_code == 201
        assert r.get_json()["data"]["last_updated"]
        with app.test_client() as c:
            page = c.get("/profile", base_url="http://new-hire.sportsfire.co")
        assert b"New Hire" in page.data

    def test_upsert_rejects_invalid(self, admin_client):
        r = admin_client.post("/api/employees", json={"id": "x", "tier": 9})
        assert r.status_code == 400
        assert r.get_json()["errors"]

    def test_cache_clear_requires_auth(self, root_client):
        assert root_client.post("/api/cache/clear").status_code == 401

    def test_cache_clear(self, app, client, admin_client):
        client.get("/profile")
        r = admin_client.post("/api/cache/clear")
        assert r.status_code == 200
        assert r.get_json()["cleared"] == 1
        assert app.extensions["render_cache"].stats()["entries"] == 0

    def test_upsert_clears_render_cache(self, app, client, admin_client, vip_employee):
        client.get("/profile")
        assert app.extensions["render_cache"].stats()["entries"] == 1
        admin_client.post("/api/employees", json=vip_employee)
        assert app.extensions["render_cache"].stats()["entries"] == 0


# ═══════════════════════════════════════════════════════════════════════════════
# RATE LIMITING
# ═══════════════════════════════════════════════════════════════════════════════

class TestRateLimit:

    def test_429_when_exceeded(self, client, monkeypatch):
        monkeypatch.setenv("DISABLE_RATE_LIMIT", "false")
        monkeypatch.setitem(RATE_LIMITS, "api", {"capacity": 2, "per_second": 0.0})
        monkeypatch.setattr(security, "_limiter", RateLimiter())
        assert client.get("/api/profile").status_code == 200
        assert client.get("/api/profile").status_code == 200
        r = client.get("/api/profile")
        assert r.status_code == 429
        assert r.get_json()["success"] is False

    def test_forwarded_headers_ignored_without_proxy(self, client, monkeypatch):
        monkeypatch.setenv("DISABLE_RATE_LIMIT", "false")
        monkeypatch.setitem(RATE_LIMITS, "api", {"capacity": 2, "per_second": 0.0})
        monkeypatch.setattr(security, "_limiter", RateLimiter())
        codes = [client.get("/api/profile", headers={"X-Forwarded-For": f"10.0.0.{i}",
                                                     "CF-Connecting-IP": f"10.1.0.{i}"}).status_code
                 for i in range(3)]
        assert codes == [200, 200, 429]

    def test_trusted_proxy_hop_keys_by_forwarded_client(self, temp_data_dir, monkeypatch):
        from app import create_app
        monkeypatch.setenv("DISABLE_RATE_LIMIT", "false")
        monkeypatch.setitem(RATE_LIMITS, "api", {"capacity": 1, "per_second": 0.0})
        monkeypatch.setattr(security, "_limiter", RateLimiter())
        site = create_app({"TESTING": True, "DATA_DIR": temp_data_dir, "PROXY_HOPS": 1})
        with site.test_client() as c:
            def get(ip):
                return c.get("/api/profile", base_url="http://vinny2times.sportsfire.co",
                             headers={"X-Forwarded-For": ip}).status_code
            assert get("203.0.113.7") == 200
            assert get("203.0.113.7") == 429
            assert get("198.51.100.2") == 200
