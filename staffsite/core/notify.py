"""
notify.py — Contact form notifications

CHANNELS:
  1. Telegram — Bot API sendMessage to TELEGRAM_CHAT_ID
  2. Slack    — incoming webhook at SLACK_WEBHOOK_URL

SETUP (Railway env vars):
  TELEGRAM_BOT_TOKEN = 123456:ABC...   ← Bot token from @BotFather
  TELEGRAM_CHAT_ID   = -100123456789   ← Staff alerts chat
  SLACK_WEBHOOK_URL  = https://hooks.slack.com/services/...
  NOTIFY_CONTACT     = true            ← Master switch (default: true)

Unconfigured channels are skipped. A failed channel is logged and
reported in the result dict; it never fails the submission itself.
"""

import logging
import os
import threading

import requests

log = logging.getLogger("staffsite.notify")

TELEGRAM_API = "https://api.telegram.org"
HTTP_TIMEOUT = 10


def _settings() -> dict:
    return {
        "enabled": os.environ.get("NOTIFY_CONTACT", "true").lower() not in ("false", "0", "off"),
        "telegram_token": os.environ.get("TELEGRAM_BOT_TOKEN", ""),
        "telegram_chat": os.environ.get("TELEGRAM_CHAT_ID", ""),
        "slack_webhook": os.environ.get("SLACK_WEBHOOK_URL", ""),
    }


def format_submission(submission: dict, employee: dict) -> str:
    urgent = submission.get("form_type") == "vip" or submission.get("priority") == "urgent"
    lines = [
        f"{'🚨 URGENT ' if urgent else ''}📬 New {submission.get('form_type', 'general')} inquiry "
        f"for {employee.get('name', employee.get('id', '?'))}",
        f"From: {submission.get('name', '')} <{submission.get('email', '')}>",
        f"Subject: {submission.get('subject', '')}",
        "",
        submission.get("message", "")[:1000],
    ]
    if submission.get("company"):
        lines.insert(2, f"Company: {submission['company']}")
    return "\n".join(lines)


def _send_telegram(text: str, cfg: dict) -> dict:
    url = f"{TELEGRAM_API}/bot{cfg['telegram_token']}/sendMessage"
    try:
        resp = requests.post(url, json={"chat_id": cfg["telegram_chat"], "text": text[:4096]},
                             timeout=HTTP_TIMEOUT)
        resp.raise_for_status()
        return {"ok": True}
    except requests.RequestException as e:
        log.warning("Telegram notify failed: %s", e)
        return {"ok": False, "error": str(e)}


def _send_slack(text: str, cfg: dict) -> dict:
    try:
        resp = requests.post(cfg["slack_webhook"], json={"text": text}, timeout=HTTP_TIMEOUT)
        resp.raise_for_status()
        return {"ok": True}
    except requests.RequestException as e:
        log.warning("Slack notify failed: %s", e)
        return {"ok": False, "error": str(e)}


def notify_contact_submission(submission: dict, employee: dict) -> dict:
    """Send a submission to every configured channel.

    Returns:
        {"ok": bool, "results": {channel: {"ok": bool, ...}}}
        ok is False only when a configured channel failed.
    """
    cfg = _settings()
    if not cfg["enabled"]:
        return {"ok": True, "results": {}, "reason": "disabled"}

    text = format_submission(submission, employee)
    results = {}
    if cfg["telegram_token"] and cfg["telegram_chat"]:
        results["telegram"] = _send_telegram(text, cfg)
    if cfg["slack_webhook"]:
        results["slack"] = _send_slack(text, cfg)

    log.info("Contact notify: %s | employee=%s | results=%s",
             submission.get("id"), employee.get("id"),
             {k: v.get("ok") for k, v in results.items()})
    return {"ok": all(r.get("ok") for r in results.values()), "results": results}


def notify_async(submission: dict, employee: dict, on_complete=None) -> threading.Thread:
    """Fire notify_contact_submission on a daemon thread.

    on_complete(result) runs on that thread once every channel has answered.
    """
    def _run():
        result = notify_contact_submission(submission, employee)
        if on_complete:
            on_complete(result)

    t = threading.Thread(
        target=_run,
        daemon=True,
        name=f"notify-{submission.get('id', '')[:12]}",
    )
    t.start()
    return t
