"""
staffsite/core/config.py — Site configuration

Defaults live here. An optional JSON file (STAFFSITE_CONFIG or
staffsite_config.json at the project root) overrides them key by key,
then environment variables override both (for production).
"""

import copy
import json
import logging
import os

from .paths import CONFIG_PATH

log = logging.getLogger("staffsite.config")

DEFAULTS = {
    "domain": "sportsfire.co",
    "site_name": "Fire22",
    # Subdomain used when the Host header carries no staff subdomain (local dev)
    "default_subdomain": "",
    "render_cache": True,
    "cache": {
        "profile":  {"ttl": 300, "cache_control": "public, max-age=300"},
        "contact":  {"ttl": 300, "cache_control": "public, max-age=300"},
        "schedule": {"ttl": 300, "cache_control": "public, max-age=300"},
        "tools":    {"ttl": 60,  "cache_control": "public, max-age=60"},
        "root":     {"ttl": 3600, "cache_control": "public, max-age=3600"},
        "api":      {"ttl": 0,   "cache_control": "no-cache"},
    },
    "security_headers": {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "SAMEORIGIN",
        "X-XSS-Protection": "1; mode=block",
        "Referrer-Policy": "strict-origin-when-cross-origin",
    },
    "errors": {
        "not_found": "Endpoint not found",
        "internal": "Internal server error",
        "invalid_subdomain": "Invalid subdomain format",
        "rate_limited": "Rate limit exceeded. Please try again later.",
        "scheduling_unavailable": "Scheduling not available for this user",
    },
    "vip": {
        "hotline": "1-800-VIP-HELP",
        "telegram": "@vip_support",
    },
    "tiers": {
        "1": {"name": "Contributor", "features": ["basic-tools"]},
        "2": {"name": "Specialist", "features": ["basic-tools", "scheduling"]},
        "3": {"name": "Senior", "features": ["basic-tools", "scheduling", "analytics"]},
        "4": {"name": "Lead", "features": ["basic-tools", "scheduling", "analytics",
                                           "team-management"]},
        "5": {"name": "VIP Executive", "features": ["basic-tools", "scheduling", "analytics",
                                                    "team-management", "advanced-tools",
                                                    "vip-escalation", "fantasy402-integration"]},
    },
}

# Employee feature that unlocks /schedule and /api/schedule.
SCHEDULING_FEATURE = "premium-scheduling"

# Tool cards per department. min_tier hides a card from lower tiers, a
# "feature" hides it from employees without that feature. Cards with no url
# have no page yet and render as "coming soon".
DEPARTMENT_TOOLS = {
    "VIP Management": [
        {"icon": "👑", "name": "VIP Command Center", "description": "Client portfolio, concierge and escalation tools", "url": "/tools/vip", "min_tier": 5},
        {"icon": "🤖", "name": "AI-Powered CRM", "description": "Predictive insights and live client activity", "url": "/tools/vip/crm", "min_tier": 5},
        {"icon": "🎰", "name": "Fantasy402 Sportsbook", "description": "Live markets, arbitrage and VIP betting activity", "url": "/tools/fantasy402", "min_tier": 4},
        {"icon": "🚨", "name": "Escalation Center", "description": "Critical incident response for VIP clients", "url": "/tools/escalation", "min_tier": 3},
        {"icon": "📊", "name": "Analytics", "description": "Revenue, retention and engagement dashboards", "url": "/tools/analytics", "min_tier": 1},
    ],
    "Technology": [
        {"icon": "🖥️", "name": "System Monitor", "description": "Service health, latency and error budgets", "url": "/tools/analytics", "min_tier": 1},
        {"icon": "🚀", "name": "Deployments", "description": "Release pipeline and rollback controls", "min_tier": 3},
        {"icon": "🔐", "name": "Security Center", "description": "Access reviews and vulnerability reports", "min_tier": 4},
    ],
    "Finance": [
        {"icon": "💰", "name": "Weekly Figures", "description": "Settlement, balances and agent performance", "url": "/tools/analytics", "min_tier": 1},
        {"icon": "🏦", "name": "Cashier Review", "description": "Deposit and withdrawal approvals", "min_tier": 3},
    ],
    "Customer Support": [
        {"icon": "🎧", "name": "Support Queue", "description": "Open tickets and live chat sessions", "min_tier": 1},
        {"icon": "🚨", "name": "Escalations", "description": "Route urgent cases to the VIP desk", "url": "/tools/escalation", "min_tier": 2},
    ],
    "Compliance": [
        {"icon": "⚖️", "name": "Compliance Reports", "description": "KYC status and regulatory filings", "min_tier": 1},
    ],
    "Marketing": [
        {"icon": "📣", "name": "Campaigns", "description": "Promotions and conversion tracking", "min_tier": 1},
        {"icon": "📊", "name": "Analytics", "description": "Acquisition and retention funnels", "url": "/tools/analytics", "min_tier": 2},
    ],
}

GENERAL_TOOLS = [
    {"icon": "📅", "name": "Schedule", "description": "Book time and manage availability", "url": "/schedule", "min_tier": 1, "feature": SCHEDULING_FEATURE},
    {"icon": "📇", "name": "Contact Hub", "description": "Every way to reach this team member", "url": "/contact", "min_tier": 1},
    {"icon": "📊", "name": "Analytics", "description": "Department metrics at a glance", "url": "/tools/analytics", "min_tier": 2},
]

# Environment overrides: env var → (config key, parser)
_ENV_OVERRIDES = {
    "STAFFSITE_DOMAIN": ("domain", str),
    "DEFAULT_SUBDOMAIN": ("default_subdomain", str),
    "RENDER_CACHE": ("render_cache", lambda v: v.lower() not in ("false", "0", "off")),
}


def load_config(path: str = None) -> dict:
    """Build the effective configuration: defaults ← JSON file ← env vars."""
    cfg = copy.deepcopy(DEFAULTS)
    path = path or CONFIG_PATH
    if os.path.exists(path):
        try:
            with open(path) as f:
                overrides = json.load(f)
            for key, value in overrides.items():
                if isinstance(value, dict) and isinstance(cfg.get(key), dict):
                    cfg[key].update(value)
                else:
                    cfg[key] = value
            log.info("Config overrides loaded from %s (%d keys)", path, len(overrides))
        except (OSError, json.JSONDecodeError) as e:
            log.warning("Config file %s unreadable, using defaults: %s", path, e)

    for env_name, (key, parse) in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is not None and raw != "":
            cfg[key] = parse(raw)
    return cfg


def get_tools_for_department(department: str, tier: int = 5, features: list = None) -> list:
    """Tool cards for a department, filtered to what the tier may open.

    When features is given, cards gated on a feature the employee lacks are dropped.
    """
    tools = DEPARTMENT_TOOLS.get(department, GENERAL_TOOLS)
    return [t for t in tools if tier >= t.get("min_tier", 1)
            and (features is None or t.get("feature") is None or t["feature"] in features)]


def employee_has_feature(employee: dict, feature: str) -> bool:
    return feature in (employee.get("features") or [])


def employee_tools(employee: dict) -> list:
    return get_tools_for_department(employee.get("department", ""), employee.get("tier", 1),
                                    employee.get("features") or [])


def can_schedule(employee: dict) -> bool:
    return employee_has_feature(employee, SCHEDULING_FEATURE)


def has_required_tier(user_tier: int, required_tier: int) -> bool:
    return user_tier >= required_tier


def is_feature_available(feature: str, tier: int, config: dict = None) -> bool:
    tiers = (config or DEFAULTS)["tiers"]
    return feature in tiers.get(str(tier), {}).get("features", [])
