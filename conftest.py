"""
Shared pytest fixtures for the Fire22 staff site test suite.

Every test gets its own DATA_DIR; the app is built from create_app() with a
seeded CRM data source so VIP dashboard figures are repeatable.
"""
import json
import os
import base64
import pytest

# app.py builds a module-level app for gunicorn; tests build their own
os.environ.setdefault("STAFFSITE_NO_AUTOAPP", "true")

DOMAIN = "sportsfire.co"
VIP_HOST = f"vinny2times.{DOMAIN}"
STANDARD_HOST = f"jane-smith.{DOMAIN}"


# ── Temp data directory (per-test isolation) ──────────────────────────────────

@pytest.fixture(autouse=True)
def temp_data_dir(tmp_path, monkeypatch):
    """Redirect data files to an isolated tmp directory and silence side effects."""
    data = str(tmp_path / "data")
    os.makedirs(data, exist_ok=True)
    monkeypatch.setenv("STAFFSITE_DATA_DIR", data)
    monkeypatch.setenv("DISABLE_RATE_LIMIT", "true")
    monkeypatch.setenv("NOTIFY_CONTACT", "false")
    for name in ("STAFFSITE_DOMAIN", "DEFAULT_SUBDOMAIN", "RENDER_CACHE", "PROXY_HOPS",
                 "TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID", "SLACK_WEBHOOK_URL"):
        monkeypatch.delenv(name, raising=False)
    return data


# ── Flask test client ─────────────────────────────────────────────────────────

def _basic_auth_header(user="fire22", pw="changeme"):
    creds = base64.b64encode(f"{user}:{pw}".encode()).decode()
    return {"Authorization": f"Basic {creds}"}


class SiteClient:
    """Wraps the Flask test client to send every request to one host, optionally with Basic Auth."""
    def __init__(self, client, host, headers=None):
        self._client = client
        self._base_url = f"http://{host}"
        self._headers = headers or {}

    def _prep(self, kwargs):
        kwargs.setdefault("base_url", self._base_url)
        kwargs.setdefault("headers", {}).update(self._headers)
        return kwargs

    def get(self, *args, **kwargs):
        return self._client.get(*args, **self._prep(kwargs))

    def post(self, *args, **kwargs):
        return self._client.post(*args, **self._prep(kwargs))

    def put(self, *args, **kwargs):
        return self._client.put(*args, **self._prep(kwargs))

    def delete(self, *args, **kwargs):
        return self._client.delete(*args, **self._prep(kwargs))


@pytest.fixture
def app(temp_data_dir, monkeypatch):
    """Create Flask app configured for testing."""
    monkeypatch.setenv("DASH_USER", "fire22")
    monkeypatch.setenv("DASH_PASS", "changeme")

    from app import create_app
    from staffsite.crm.repositories import RandomVIPDataSource
    return create_app({
        "TESTING": True,
        "DATA_DIR": temp_data_dir,
        "VIP_DATA_SOURCE": RandomVIPDataSource(seed=22),
        "PROXY_HOPS": 0,
    })


@pytest.fixture
def client(app):
    """Test client on the tier 5 VIP employee's subdomain."""
    with app.test_client() as c:
        yield SiteClient(c, VIP_HOST)


@pytest.fixture
def standard_client(app):
    """Test client on a tier 1 employee's subdomain."""
    with app.test_client() as c:
        yield SiteClient(c, STANDARD_HOST)


@pytest.fixture
def root_client(app):
    """Test client on the bare domain (staff directory)."""
    with app.test_client() as c:
        yield SiteClient(c, DOMAIN)


@pytest.fixture
def admin_client(app):
    """Bare-domain client with HTTP Basic Auth on every request."""
    with app.test_client() as c:
        yield SiteClient(c, DOMAIN, _basic_auth_header())


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


# ── Seed helpers ──────────────────────────────────────────────────────────────

def _write_json(path, obj):
    with open(path, "w") as f:
        json.dump(obj, f, default=str)


@pytest.fixture
def seed_employees(temp_data_dir, vip_employee, standard_employee):
    """Write a two-person directory to the data dir, return the records."""
    employees = [vip_employee, standard_employee]
    _write_json(os.path.join(temp_data_dir, "employees.json"), employees)
    return employees


# ── Sample data factories ─────────────────────────────────────────────────────

@pytest.fixture
def vip_employee():
    """Tier 5 VIP Management record."""
    return {
        "id": "vinny2times",
        "name": "Vinny Two Times",
        "title": "Head of VIP Management",
        "department": "VIP Management",
        "email": "vinny2times@fire22.com",
        "phone": "+1-555-0199",
        "slack": "vinny2times",
        "telegram": "@vinny2times",
        "bio": "Runs the VIP desk.",
        "tier": 5,
        "features": ["vip-escalation", "fantasy402-integration", "premium-scheduling"],
        "hire_date": "2019-03-01",
        "last_updated": "2025-09-01T00:00:00Z",
    }


@pytest.fixture
def standard_employee():
    """Tier 1 Customer Support record."""
    return {
        "id": "jane-smith",
        "name": "Jane Smith",
        "title": "Support Specialist",
        "department": "Customer Support",
        "email": "jane.smith@fire22.com",
        "slack": "jane.smith",
        "bio": "",
        "tier": 1,
        "hire_date": "2023-06-15",
        "last_updated": "2025-09-01T00:00:00Z",
    }


@pytest.fixture
def contact_payload():
    return {
        "name": "Alex Client",
        "email": "alex@example.com",
        "subject": "Account question",
        "message": "Please call me back about my account.",
    }
