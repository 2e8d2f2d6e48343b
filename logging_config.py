"""
Logging setup for the Fire22 staff site.

setup_logging() is called once from app.py before create_app(). Console
output is JSON on Railway (or with LOG_JSON=true) and coloured one-liners
in development; DATA_DIR/logs/staffsite.log always gets JSON.
"""
import json
import logging
import logging.handlers
import os
from datetime import datetime, timezone

from staffsite.core.paths import LOG_DIR

# Request context passed with extra={...}; copied verbatim into JSON lines
EXTRA_FIELDS = ("route", "method", "status", "duration_ms", "request_id",
                "subdomain", "employee", "form_type", "level_name")

LOG_FILE = "staffsite.log"
LOG_FILE_BYTES = 5_000_000
LOG_FILE_BACKUPS = 5
QUIET_LOGGERS = ("urllib3", "werkzeug")


def _utc_stamp(record) -> str:
    return datetime.fromtimestamp(record.created, timezone.utc).isoformat(timespec="milliseconds")


class JSONFormatter(logging.Formatter):
    """One JSON object per line, request extras lifted to the top level."""

    def format(self, record):
        entry = {
            "ts": _utc_stamp(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "src": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        entry.update({k: getattr(record, k) for k in EXTRA_FIELDS if hasattr(record, k)})
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """HH:MM:SS [L] logger: message  (coloured by level)"""

    PALETTE = {
        logging.DEBUG: "36", logging.INFO: "32", logging.WARNING: "33",
        logging.ERROR: "31", logging.CRITICAL: "35",
    }

    def format(self, record):
        stamp = datetime.fromtimestamp(record.created, timezone.utc).strftime("%H:%M:%S")
        line = f"{stamp} [{record.levelname[0]}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        code = self.PALETTE.get(record.levelno)
        return f"\033[{code}m{line}\033[0m" if code else line


def _wants_json() -> bool:
    flag = os.environ.get("LOG_JSON", "").lower()
    if flag:
        return flag in ("1", "true", "yes", "on")
    return "RAILWAY_ENVIRONMENT" in os.environ


def setup_logging(level=None, json_logs=None, log_dir=None):
    """Install console and rotating-file handlers on the root logger.

    Args:
        level: LOG_LEVEL env, else INFO
        json_logs: LOG_JSON env, else True on Railway
        log_dir: DATA_DIR/logs unless given
    """
    level = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    if json_logs is None:
        json_logs = _wants_json()
    log_dir = log_dir or LOG_DIR

    console = logging.StreamHandler()
    console.setFormatter(JSONFormatter() if json_logs else HumanFormatter())
    handlers = [console]

    file_error = None
    try:
        os.makedirs(log_dir, exist_ok=True)
        rotating = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE), maxBytes=LOG_FILE_BYTES, backupCount=LOG_FILE_BACKUPS)
        rotating.setFormatter(JSONFormatter())
        handlers.append(rotating)
    except OSError as e:
        file_error = e

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(getattr(logging, level, logging.INFO))
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    log = logging.getLogger("staffsite")
    if file_error:
        log.warning("File logging off, %s not writable: %s", log_dir, file_error)
    log.info("Logging initialized (%s, %s)", level, "json" if json_logs else "human",
             extra={"level_name": level})
