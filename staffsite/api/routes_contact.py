"""
Contact form submissions.

    POST /api/contact/<form_type>   (general | technical | api | business | vip)

Submissions are appended to DATA_DIR/contact_messages.json and pushed to
the configured notification channels in the background. The VIP form is
only accepted on a tier 5 employee's subdomain.
"""

import json
import logging
import os
import threading
import uuid
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

from .pages import FORM_TYPES, VIP_TIER
from .routes import require_employee
from ..core.employees import is_valid_email
from ..core.notify import notify_async
from ..core.paths import contact_messages_path
from ..core.security import rate_limit

log = logging.getLogger("staffsite.contact")

bp = Blueprint("contact", __name__)

_lock = threading.Lock()

MAX_FIELD = 200
MAX_MESSAGE = 5000
OPTIONAL_FIELDS = ("company", "phone", "category", "priority")


def _text(data: dict, key: str) -> str:
    value = data.get(key)
    return value.strip() if isinstance(value, str) else ""


def validate_submission(data: dict) -> list:
    """Error strings for a submission body; empty when it is acceptable."""
    errors = []
    name = _text(data, "name")
    email = _text(data, "email")
    subject = _text(data, "subject")
    message = _text(data, "message")

    if not name:
        errors.append("Name is required")
    elif len(name) > MAX_FIELD:
        errors.append(f"Name must be at most {MAX_FIELD} characters")
    if not email:
        errors.append("Email is required")
    elif not is_valid_email(email):
        errors.append("Invalid email format")
    if not subject:
        errors.append("Subject is required")
    elif len(subject) > MAX_FIELD:
        errors.append(f"Subject must be at most {MAX_FIELD} characters")
    if not message:
        errors.append("Message is required")
    elif len(message) > MAX_MESSAGE:
        errors.append(f"Message must be at most {MAX_MESSAGE} characters")
    for field in OPTIONAL_FIELDS:
        value = data.get(field)
        if value is not None and (not isinstance(value, str) or len(value) > MAX_FIELD):
            errors.append(f"{field.capitalize()} must be text of at most {MAX_FIELD} characters")
    return errors


def build_submission(form_type: str, employee: dict, data: dict) -> dict:
    submission = {
        "id": f"msg-{uuid.uuid4().hex[:12]}",
        "employee_id": employee["id"],
        "form_type": form_type,
        "name": _text(data, "name"),
        "email": _text(data, "email"),
        "subject": _text(data, "subject"),
        "message": _text(data, "message"),
        "created_at": datetime.now(timezone.utc).isoformat(),
        "notified": {},
    }
    for field in OPTIONAL_FIELDS:
        if _text(data, field):
            submission[field] = _text(data, field)
    return submission


# ═══════════════════════════════════════════════════════════════════════
# Storage
# ═══════════════════════════════════════════════════════════════════════

def load_submissions(data_dir: str = None) -> list:
    path = contact_messages_path(data_dir)
    try:
        with open(path) as f:
            return json.load(f)
    except FileNotFoundError:
        return []
    except json.JSONDecodeError as e:
        log.error("contact_messages.json is corrupt: %s", e)
        return []


def save_submission(submission: dict, data_dir: str = None):
    path = contact_messages_path(data_dir)
    with _lock:
        messages = load_submissions(data_dir)
        messages.append(submission)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w") as f:
            json.dump(messages, f, indent=2)


def record_notification(submission_id: str, result: dict, data_dir: str = None):
    """Store per-channel delivery results on a saved submission."""
    path = contact_messages_path(data_dir)
    with _lock:
        messages = load_submissions(data_dir)
        for msg in messages:
            if msg.get("id") == submission_id:
                msg["notified"] = {ch: r.get("ok", False)
                                   for ch, r in result.get("results", {}).items()}
                break
        else:
            log.warning("Notification result for unknown submission %s", submission_id)
            return
        with open(path, "w") as f:
            json.dump(messages, f, indent=2)


# ═══════════════════════════════════════════════════════════════════════
# Route
# ═══════════════════════════════════════════════════════════════════════

@bp.route("/api/contact/<form_type>", methods=["POST"])
@rate_limit("submit")
def api_contact(form_type):
    employee, error = require_employee()
    if error is not None:
        return error
    if form_type not in FORM_TYPES:
        return jsonify({"ok": False, "error": f"Unknown form type: {form_type}"}), 404
    if form_type == "vip" and employee.get("tier") != VIP_TIER:
        log.warning("VIP form rejected for %s (tier %s)", employee.get("id"), employee.get("tier"))
        return jsonify({"ok": False, "error": "VIP support is not available for this contact"}), 403

    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        return jsonify({"ok": False, "errors": ["Request body must be an object"]}), 400

    errors = validate_submission(data)
    if errors:
        return jsonify({"ok": False, "errors": errors}), 400

    data_dir = current_app.config["DATA_DIR"]
    submission = build_submission(form_type, employee, data)
    save_submission(submission, data_dir)
    log.info("Contact submission %s: %s form for %s",
             submission["id"], form_type, employee["id"])

    notify_async(submission, employee,
                 on_complete=lambda result: record_notification(submission["id"], result, data_dir))
    return jsonify({"ok": True, "id": submission["id"]}), 201
