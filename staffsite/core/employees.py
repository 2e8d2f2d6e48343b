"""
staffsite/core/employees.py — Employee directory

Employee records are kept as JSON in DATA_DIR/employees.json. When the
file is missing or empty the bundled employees_seed.json is copied in, so
a fresh Railway volume comes up with the full staff list.
"""

import json
import logging
import os
import re
import threading
from datetime import datetime, timezone
from typing import Optional, TypedDict

from dateutil.parser import parse as _parse_date
from dateutil.relativedelta import relativedelta

from .paths import DATA_DIR, EMPLOYEES_SEED_PATH, employees_path

log = logging.getLogger("staffsite.employees")


class EmployeeData(TypedDict, total=False):
    id: str
    name: str
    title: str
    department: str
    email: str
    tier: int
    phone: str
    slack: str
    telegram: str
    bio: str
    headshot_url: str
    template: str
    features: list
    manager: str
    direct_reports: list
    hire_date: str
    last_updated: str


_SUBDOMAIN_RE = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9\-_]{0,62}$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_subdomain(subdomain: str) -> bool:
    """1-63 chars: alphanumerics, hyphens, underscores; must not start with - or _."""
    return bool(subdomain) and bool(_SUBDOMAIN_RE.match(subdomain))


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email or ""))


def format_employee_subdomain(name: str) -> str:
    """'Jane  Smith!' → 'jane-smith'"""
    slug = re.sub(r"[^a-z0-9\s-]", "", (name or "").lower())
    slug = re.sub(r"\s+", "-", slug.strip())
    return re.sub(r"-+", "-", slug)


def get_avatar_placeholder(name: str) -> str:
    return "".join(part[0] for part in (name or "").split() if part).upper()[:2]


def validate_employee_data(employee: dict) -> dict:
    """Check an employee record before it is served.

    Returns:
        {"ok": bool, "errors": [str], "warnings": [str]}
    """
    errors, warnings = [], []

    if not employee.get("id"):
        errors.append("Employee ID is required")
    elif not is_valid_subdomain(employee["id"]):
        errors.append("Employee ID is not a valid subdomain")
    if not employee.get("name"):
        errors.append("Employee name is required")
    if not employee.get("email"):
        errors.append("Employee email is required")
    elif not is_valid_email(employee["email"]):
        errors.append("Invalid email format")
    if not employee.get("department"):
        errors.append("Employee department is required")

    tier = employee.get("tier")
    if isinstance(tier, bool) or not isinstance(tier, int) or not 1 <= tier <= 5:
        errors.append("Employee tier must be between 1 and 5")

    if not employee.get("bio"):
        warnings.append("Employee bio is recommended for better profiles")

    return {"ok": not errors, "errors": errors, "warnings": warnings}


def years_of_service(employee: dict, today: datetime = None) -> Optional[int]:
    """Whole years since hire_date, or None when the date is missing or unparseable."""
    raw = employee.get("hire_date")
    if not raw:
        return None
    try:
        hired = _parse_date(raw)
    except (ValueError, OverflowError):
        log.warning("Unparseable hire_date for %s: %r", employee.get("id"), raw)
        return None
    today = today or datetime.now(timezone.utc)
    return max(relativedelta(today.replace(tzinfo=None), hired.replace(tzinfo=None)).years, 0)


class EmployeeDirectory:
    """JSON-file backed employee lookup, keyed by subdomain."""

    def __init__(self, data_dir: str = None, seed_path: str = None):
        self.data_dir = data_dir or DATA_DIR
        self.seed_path = seed_path or EMPLOYEES_SEED_PATH
        self._lock = threading.Lock()

    @property
    def path(self) -> str:
        return employees_path(self.data_dir)

    def _seed(self) -> list:
        if not os.path.exists(self.seed_path):
            log.warning("No employee seed file at %s", self.seed_path)
            return []
        with open(self.seed_path) as f:
            data = json.load(f)
        os.makedirs(self.data_dir, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)
        log.info("Auto-seeded %d employees from %s", len(data), self.seed_path)
        return data

    def _read_unlocked(self) -> list:
        try:
            with open(self.path) as f:
                data = json.load(f)
            if data:
                return data
        except FileNotFoundError:
            pass
        except json.JSONDecodeError as e:
            log.error("employees.json is corrupt, reseeding: %s", e)
        return self._seed()

    def _write_unlocked(self, employees: list):
        os.makedirs(self.data_dir, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(employees, f, indent=2)

    def load(self) -> list:
        """All employee records. Auto-seeds from the bundled file if missing."""
        with self._lock:
            return self._read_unlocked()

    def save(self, employees: list):
        with self._lock:
            self._write_unlocked(employees)

    def get(self, subdomain: str) -> Optional[EmployeeData]:
        if not subdomain:
            return None
        key = subdomain.lower()
        for emp in self.load():
            if str(emp.get("id", "")).lower() == key:
                return emp
        return None

    def upsert(self, employee: dict) -> dict:
        """Add or replace a record by id. Invalid records are rejected, not raised.

        The read and the write happen under one lock hold so concurrent
        upserts of different ids both survive.
        """
        check = validate_employee_data(employee)
        if not check["ok"]:
            return {"ok": False, "errors": check["errors"]}
        record = dict(employee)
        record["last_updated"] = datetime.now(timezone.utc).isoformat()
        with self._lock:
            employees = [e for e in self._read_unlocked()
                         if str(e.get("id", "")).lower() != employee["id"].lower()]
            employees.append(record)
            self._write_unlocked(employees)
        log.info("Employee saved: %s (%s)", record["id"], record.get("department", ""))
        return {"ok": True, "employee": record, "warnings": check["warnings"]}
