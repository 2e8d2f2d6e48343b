"""
staffsite/core/startup_checks.py — boot-time self test

create_app() runs these once the blueprints are registered. Nothing here
stops the app from starting; failures are logged loudly so a bad deploy
shows up in the first lines of the Railway log:

  1. paths      DATA_DIR exists and is writable, seed file present
  2. data files employees.json / contact_messages.json parse
  3. employees  every record validates, no duplicate subdomains
  4. config     staffsite_config.json parses, all five tiers and a domain set
  5. routes     page and API endpoints registered, no rule registered twice
"""

import json
import logging
import os
from collections import Counter

from .employees import validate_employee_data
from .paths import CONFIG_PATH, contact_messages_path, employees_path, validate_paths

log = logging.getLogger("staffsite.startup")

REQUIRED_ENDPOINTS = (
    "site.profile", "site.contact", "site.schedule", "site.tools",
    "site.api_health", "site.api_status", "site.api_schedule",
    "vip.api_vip", "contact.api_contact",
)


class CheckReport:
    """Collects PASS/WARN/FAIL lines and logs each as it is recorded."""

    def __init__(self):
        self.details = []

    def _add(self, level: str, msg: str, log_level: int, icon: str):
        self.details.append((level, msg))
        log.log(log_level, "%s %s", icon, msg)

    def ok(self, msg):
        self._add("PASS", msg, logging.INFO, "✅")

    def warn(self, msg):
        self._add("WARN", msg, logging.WARNING, "⚠️ ")

    def fail(self, msg):
        self._add("FAIL", msg, logging.ERROR, "❌ STARTUP CHECK FAILED:")

    def count(self, level: str) -> int:
        return sum(1 for lvl, _ in self.details if lvl == level)

    def as_dict(self) -> dict:
        return {"passed": self.count("PASS"), "failed": self.count("FAIL"),
                "warnings": self.count("WARN"), "details": list(self.details)}


def _check_paths(report: CheckReport, data_dir):
    result = validate_paths(data_dir)
    for err in result["errors"]:
        report.fail(err)
    for warning in result["warnings"]:
        report.warn(warning)
    if result["ok"]:
        report.ok(f"Paths OK (DATA_DIR={result['resolved']['DATA_DIR']}, "
                  f"volume={result['resolved']['USING_VOLUME']})")


def _check_data_files(report: CheckReport, data_dir):
    for path in (employees_path(data_dir), contact_messages_path(data_dir)):
        name = os.path.basename(path)
        if not os.path.exists(path):
            report.warn(f"{name} not created yet ({path})")
            continue
        try:
            with open(path) as f:
                records = json.load(f)
        except json.JSONDecodeError as e:
            report.fail(f"{name} is not valid JSON: {e}")
        except OSError as e:
            report.fail(f"{name} unreadable: {e}")
        else:
            report.ok(f"{name} parsed ({len(records) if isinstance(records, list) else '?'} records)")


def _check_employees(report: CheckReport, directory):
    employees = directory.load()
    if not employees:
        report.warn("Employee directory is empty; every subdomain will 404")
        return
    bad = 0
    for emp in employees:
        errors = validate_employee_data(emp)["errors"]
        if errors:
            bad += 1
            report.fail(f"Invalid employee record {emp.get('id', '?')}: {'; '.join(errors)}")
    ids = Counter(str(e.get("id", "")).lower() for e in employees)
    dupes = sorted(i for i, n in ids.items() if n > 1)
    if dupes:
        report.fail(f"Duplicate employee ids: {dupes}")
    if not bad and not dupes:
        report.ok(f"{len(employees)} employee records valid")


def _check_config(report: CheckReport, site: dict):
    if os.path.exists(CONFIG_PATH):
        try:
            with open(CONFIG_PATH) as f:
                json.load(f)
            report.ok(f"Config overrides parse ({CONFIG_PATH})")
        except (OSError, json.JSONDecodeError) as e:
            report.fail(f"Config file {CONFIG_PATH} unreadable: {e}")
    missing = [t for t in ("1", "2", "3", "4", "5") if t not in site.get("tiers", {})]
    if missing:
        report.fail(f"Config is missing tiers {missing}")
    if not site.get("domain"):
        report.fail("Config domain is empty")
    if not missing and site.get("domain"):
        report.ok(f"Config OK (domain={site['domain']})")


def _check_routes(report: CheckReport, app):
    rules = [r for r in app.url_map.iter_rules() if r.endpoint != "static"]
    endpoints = {r.endpoint for r in rules}
    missing = [e for e in REQUIRED_ENDPOINTS if e not in endpoints]
    if missing:
        report.fail(f"Endpoints not registered: {missing}")
    signatures = Counter((r.rule, frozenset(r.methods or ())) for r in rules)
    twice = sorted({rule for (rule, _), n in signatures.items() if n > 1})
    if twice:
        report.fail(f"Routes registered more than once: {twice}")
    if not missing and not twice:
        report.ok(f"{len(rules)} routes registered")


def run_startup_checks(app) -> dict:
    """Run every check against a built app.

    Returns:
        {"passed": int, "failed": int, "warnings": int, "details": [(level, msg), ...]}
    """
    report = CheckReport()
    data_dir = app.config.get("DATA_DIR")

    _check_paths(report, data_dir)
    _check_data_files(report, data_dir)
    if "employees" in app.extensions:
        _check_employees(report, app.extensions["employees"])
    _check_config(report, app.config.get("SITE", {}))
    _check_routes(report, app)

    summary = report.as_dict()
    if summary["failed"]:
        log.error("STARTUP: %d of %d checks failed", summary["failed"], len(report.details))
    else:
        log.info("STARTUP: %d checks passed, %d warnings", summary["passed"], summary["warnings"])
    return summary
