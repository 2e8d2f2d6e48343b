"""
Contact submissions and notification delivery.

requests.post is monkeypatched; no test touches the network.
"""
import json
import os

import pytest
import requests

from staffsite.api import routes_contact
from staffsite.api.routes_contact import (build_submission, load_submissions,
                                          record_notification, save_submission,
                                          validate_submission)
from staffsite.core import notify


class FakeResponse:
    def __init__(self, status=200):
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture
def sent(monkeypatch):
    """Capture outbound notification posts."""
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append({"url": url, "json": json, "timeout": timeout})
        return FakeResponse()
    monkeypatch.setattr(notify.requests, "post", fake_post)
    return calls


@pytest.fixture
def channels(monkeypatch):
    monkeypatch.setenv("NOTIFY_CONTACT", "true")
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "-100")
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.test/x")


@pytest.fixture
def sync_notify(monkeypatch):
    """Run notifications inline so results are on disk when the request returns."""
    def inline(submission, employee, on_complete=None):
        result = notify.notify_contact_submission(submission, employee)
        if on_complete:
            on_complete(result)
    monkeypatch.setattr(routes_contact, "notify_async", inline)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═══════════════════════════════════════════════════════════════════════════════

class TestValidation:

    def test_valid(self, contact_payload):
        assert validate_submission(contact_payload) == []

    def test_required_fields(self):
        errors = validate_submission({})
        assert "Name is required" in errors
        assert "Email is required" in errors
        assert "Subject is required" in errors
        assert "Message is required" in errors

    def test_bad_email(self, contact_payload):
        assert validate_submission(dict(contact_payload, email="nope")) == ["Invalid email format"]

    def test_non_string_fields(self, contact_payload):
        errors = validate_submission(dict(contact_payload, name=42, company=["x"]))
        assert "Name is required" in errors
        assert any(e.startswith("Company") for e in errors)

    def test_message_too_long(self, contact_payload):
        errors = validate_submission(dict(contact_payload, message="x" * 5001))
        assert errors == ["Message must be at most 5000 characters"]

    def test_whitespace_only(self, contact_payload):
        assert "Subject is required" in validate_submission(dict(contact_payload, subject="   "))


class TestStorage:

    def test_build_trims_and_keeps_optional(self, vip_employee, contact_payload):
        sub = build_submission("business", vip_employee,
                               dict(contact_payload, name="  Alex  ", company="Acme", phone=""))
        assert sub["name"] == "Alex"
        assert sub["company"] == "Acme"
        assert "phone" not in sub
        assert sub["id"].startswith("msg-")
        assert sub["employee_id"] == "vinny2times"

    def test_save_and_load(self, temp_data_dir, vip_employee, contact_payload):
        sub = build_submission("general", vip_employee, contact_payload)
        save_submission(sub, temp_data_dir)
        save_submission(build_submission("api", vip_employee, contact_payload), temp_data_dir)
        saved = load_submissions(temp_data_dir)
        assert [s["form_type"] for s in saved] == ["general", "api"]

    def test_load_corrupt_file(self, temp_data_dir, caplog):
        with open(os.path.join(temp_data_dir, "contact_messages.json"), "w") as f:
            f.write("{not json")
        assert load_submissions(temp_data_dir) == []
        assert "corrupt" in caplog.text

    def test_record_notification(self, temp_data_dir, vip_employee, contact_payload):
        sub = build_submission("general", vip_employee, contact_payload)
        save_submission(sub, temp_data_dir)
        record_notification(sub["id"], {"ok": False, "results": {
            "telegram": {"ok": True}, "slack": {"ok": False, "error": "timeout"}}}, temp_data_dir)
        assert load_submissions(temp_data_dir)[0]["notified"] == {"telegram": True, "slack": False}


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTE
# ═══════════════════════════════════════════════════════════════════════════════

class TestContactRoute:

    def test_submit_general(self, client, temp_data_dir, contact_payload, sync_notify):
        r = client.post("/api/contact/general", json=contact_payload)
        assert r.status_code == 201
        d = r.get_json()
        assert d["ok"] is True
        with open(os.path.join(temp_data_dir, "contact_messages.json")) as f:
            saved = json.load(f)
        assert saved[0]["id"] == d["id"]
        assert saved[0]["employee_id"] == "vinny2times"

    def test_form_encoded_body(self, client, contact_payload, sync_notify):
        r = client.post("/api/contact/technical", data=contact_payload)
        assert r.status_code == 201

    def test_validation_errors(self, client, sync_notify):
        r = client.post("/api/contact/general", json={"name": "A"})
        assert r.status_code == 400
        assert r.get_json()["ok"] is False
        assert "Email is required" in r.get_json()["errors"]

    def test_non_object_body(self, client):
        r = client.post("/api/contact/general", json=["a", "b"])
        assert r.status_code == 400

    def test_unknown_form_type(self, client, contact_payload):
        r = client.post("/api/contact/carrier-pigeon", json=contact_payload)
        assert r.status_code == 404

    def test_vip_form_tier_5(self, client, contact_payload, sync_notify):
        assert client.post("/api/contact/vip", json=contact_payload).status_code == 201

    def test_vip_form_rejected_below_tier_5(self, standard_client, temp_data_dir, contact_payload):
        r = standard_client.post("/api/contact/vip", json=contact_payload)
        assert r.status_code == 403
        assert not os.path.exists(os.path.join(temp_data_dir, "contact_messages.json"))

    def test_unknown_employee(self, app, contact_payload):
        with app.test_client() as c:
            r = c.post("/api/contact/general", json=contact_payload,
                       base_url="http://nobody.sportsfire.co")
        assert r.status_code == 404

    def test_notification_results_recorded(self, client, temp_data_dir, contact_payload,
                                           channels, sent, sync_notify):
        client.post("/api/contact/general", json=contact_payload)
        saved = load_submissions(temp_data_dir)
        assert saved[0]["notified"] == {"telegram": True, "slack": True}
        assert len(sent) == 2

    def test_async_dispatch(self, client, temp_data_dir, contact_payload, monkeypatch):
        threads = []
        real = notify.notify_async

        def spy(*args, **kwargs):
            t = real(*args, **kwargs)
            threads.append(t)
            return t
        monkeypatch.setattr(routes_contact, "notify_async", spy)
        r = client.post("/api/contact/general", json=contact_payload)
        assert r.status_code == 201
        threads[0].join(timeout=5)
        assert load_submissions(temp_data_dir)[0]["notified"] == {}


# ═══════════════════════════════════════════════════════════════════════════════
# NOTIFY
# ═══════════════════════════════════════════════════════════════════════════════

class TestNotify:

    @pytest.fixture
    def submission(self, vip_employee, contact_payload):
        return build_submission("general", vip_employee, contact_payload)

    def test_disabled(self, submission, vip_employee, sent):
        result = notify.notify_contact_submission(submission, vip_employee)
        assert result["reason"] == "disabled"
        assert sent == []

    def test_unconfigured_channels_skipped(self, submission, vip_employee, sent, monkeypatch):
        monkeypatch.setenv("NOTIFY_CONTACT", "true")
        result = notify.notify_contact_submission(submission, vip_employee)
        assert result == {"ok": True, "results": {}}
        assert sent == []

    def test_both_channels(self, submission, vip_employee, sent, channels):
        result = notify.notify_contact_submission(submission, vip_employee)
        assert result["ok"] is True
        assert sent[0]["url"] == "https://api.telegram.org/bot123:abc/sendMessage"
        assert sent[0]["json"]["chat_id"] == "-100"
        assert sent[1]["url"] == "https://hooks.slack.test/x"
        assert all(c["timeout"] == 10 for c in sent)

    def test_channel_failure_reported(self, submission, vip_employee, channels, monkeypatch, caplog):
        def failing_post(url, json=None, timeout=None):
            if "telegram" in url:
                raise requests.ConnectionError("down")
            return FakeResponse(500)
        monkeypatch.setattr(notify.requests, "post", failing_post)
        result = notify.notify_contact_submission(submission, vip_employee)
        assert result["ok"] is False
        assert result["results"]["telegram"]["ok"] is False
        assert "500" in result["results"]["slack"]["error"]
        assert "Telegram notify failed" in caplog.text

    def test_vip_tagged_urgent(self, vip_employee, contact_payload):
        text = notify.format_submission(build_submission("vip", vip_employee, contact_payload), vip_employee)
        assert text.startswith("🚨 URGENT")

    def test_general_not_urgent(self, vip_employee, contact_payload):
        text = notify.format_submission(build_submission("general", vip_employee, contact_payload), vip_employee)
        assert "URGENT" not in text
        assert "Account question" in text
