"""
VIP CRM API — dispatcher unit tests and /api/vip/* route tests.
"""
import pytest

from staffsite.api.routes_vip import handle_vip_crm_api
from staffsite.crm.repositories import RandomVIPDataSource
from staffsite.crm.service import VIPCRMService


@pytest.fixture
def service():
    return VIPCRMService(RandomVIPDataSource(seed=11))


class TestDispatcher:

    def test_insights(self, service):
        status, body = handle_vip_crm_api("/api/vip/insights", {}, service)
        assert status == 200
        assert len(body) == 3

    def test_activity_default_filter(self, service):
        status, body = handle_vip_crm_api("/api/vip/activity", {}, service)
        assert status == 200
        assert len(body) == 15

    def test_activity_filter_param(self, service):
        _, body = handle_vip_crm_api("/api/vip/activity", {"filter": "new-clients"}, service)
        assert {a["type"] for a in body} <= {"registration", "first_deposit", "first_bet"}

    def test_recommendations(self, service):
        status, body = handle_vip_crm_api("/api/vip/recommendations", {}, service)
        assert status == 200
        assert len(body) == 4

    def test_analytics_week_scaled(self, service):
        status, body = handle_vip_crm_api("/api/vip/analytics", {"period": "week"}, service)
        assert status == 200
        assert body["multiplier"] == 7
        assert 200 * 7 <= body["revenueThousands"] <= 699 * 7
        assert body["revenueThousands"] % 7 == 0
        assert body["totalRevenue"] == f"${body['revenueThousands']}K"

    def test_analytics_default_today(self, service):
        _, body = handle_vip_crm_api("/api/vip/analytics", {}, service)
        assert body["period"] == "today"

    def test_workflow(self, service):
        status, body = handle_vip_crm_api("/api/vip/workflows/retention", {}, service)
        assert status == 200
        assert body["name"] == "Retention Outreach"

    def test_unknown_path_404(self, service):
        status, body = handle_vip_crm_api("/api/vip/unknown", {}, service)
        assert status == 404
        assert body == {"error": "Endpoint not found"}

    def test_exception_500(self, caplog):
        class Broken:
            def generate_recommendations(self):
                raise RuntimeError("boom")
        status, body = handle_vip_crm_api("/api/vip/recommendations", {}, Broken())
        assert status == 500
        assert body == {"error": "Internal server error"}
        assert "boom" in caplog.text


class TestVIPRoutes:

    def test_insights_json(self, client):
        r = client.get("/api/vip/insights")
        assert r.status_code == 200
        assert isinstance(r.get_json(), list)
        assert r.headers["Cache-Control"] == "no-cache"

    def test_analytics_period(self, client):
        d = client.get("/api/vip/analytics?period=quarter").get_json()
        assert d["multiplier"] == 90

    def test_activity_filter(self, client):
        d = client.get("/api/vip/activity?filter=vip").get_json()
        assert {a["type"] for a in d} <= {"bet_placed", "deposit", "vip_upgrade"}

    def test_unknown_endpoint(self, client):
        r = client.get("/api/vip/nope")
        assert r.status_code == 404
        assert "error" in r.get_json()

    def test_tier_independent(self, standard_client):
        assert standard_client.get("/api/vip/recommendations").status_code == 200

    def test_service_in_extensions(self, app):
        assert isinstance(app.extensions["vip_crm"], VIPCRMService)

    def test_post_not_allowed(self, client):
        assert client.post("/api/vip/insights").status_code == 405

    def test_seeded_source_repeats_across_apps(self, temp_data_dir):
        from app import create_app

        def confidences():
            site = create_app({"TESTING": True, "DATA_DIR": temp_data_dir,
                               "VIP_DATA_SOURCE": RandomVIPDataSource(seed=22)})
            with site.test_client() as c:
                r = c.get("/api/vip/insights", base_url="http://vinny2times.sportsfire.co")
            return [i["confidence"] for i in r.get_json()]

        assert confidences() == confidences()
