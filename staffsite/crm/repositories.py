"""
Data sources behind the VIP CRM dashboard.

There is no client database yet: RandomVIPDataSource produces plausible
placeholder figures so the dashboard has something to show. A real
backend implements the same two interfaces and is passed to
VIPCRMService in its place.
"""

import random
from datetime import datetime, timedelta


class DataSourceError(Exception):
    """A CRM data source could not produce data."""


# Presentation for each activity type. Monetary types carry a value range
# (inclusive low, exclusive high); the rest show a fixed label.
ACTIVITY_TYPES = {
    "bet_placed":     {"icon": "🎰", "action": "Placed bet on NFL Championship", "range": (5000, 55000), "color": "#ffd700"},
    "deposit":        {"icon": "💰", "action": "Made deposit", "range": (1000, 26000), "color": "#22c55e"},
    "withdrawal":     {"icon": "💸", "action": "Requested withdrawal", "range": (2000, 22000), "color": "#ff6b35"},
    "login":          {"icon": "🔑", "action": "Logged into VIP portal", "label": "Active", "color": "#40e0d0"},
    "profile_update": {"icon": "👤", "action": "Updated profile preferences", "label": "Updated", "color": "#a855f7"},
    "vip_upgrade":    {"icon": "⭐", "action": "Upgraded to VIP Elite", "label": "Premium", "color": "#ffd700"},
    "large_bet":      {"icon": "💎", "action": "Placed large bet", "range": (25000, 125000), "color": "#ffd700"},
    "registration":   {"icon": "🎯", "action": "Completed registration", "label": "New Client", "color": "#22c55e"},
    "first_deposit":  {"icon": "💵", "action": "Made first deposit", "range": (1000, 11000), "color": "#22c55e"},
    "first_bet":      {"icon": "🎲", "action": "Placed first bet", "range": (500, 5500), "color": "#40e0d0"},
}

ACTIVITY_CLIENTS = [
    "Diamond Client #247",
    "Premium Client #189",
    "VIP Client #456",
    "High Roller #123",
]

TOP_CLIENTS = [
    {"name": "Diamond Client #247", "tier": "VIP Elite", "revenue": "$89K", "growth": 23},
    {"name": "Premium Client #189", "tier": "VIP Gold", "revenue": "$67K", "growth": 18},
    {"name": "VIP Client #456", "tier": "VIP Silver", "revenue": "$45K", "growth": 31},
    {"name": "High Roller #123", "tier": "VIP Elite", "revenue": "$92K", "growth": 27},
    {"name": "Whale Client #78", "tier": "VIP Gold", "revenue": "$78K", "growth": 15},
]


class ClientActivityRepository:
    """Where client-level signals come from."""

    def high_value_clients(self) -> list:
        """[{"name", "activity_increase", "value"}], strongest first."""
        raise NotImplementedError

    def retention_risks(self) -> list:
        """[{"name", "drop_percent", "risk_level"}], highest risk first."""
        raise NotImplementedError

    def upselling_opportunities(self) -> list:
        """[{"name", "product", "value"}], best first."""
        raise NotImplementedError

    def client_event(self, activity_type: str, now: datetime) -> dict:
        """One client event of the given type: {"client", "amount"|None, "occurred_at"}."""
        raise NotImplementedError


class AnalyticsRepository:
    """Where aggregate dashboard figures come from."""

    def daily_snapshot(self) -> dict:
        """Baseline figures for a single day (see RandomVIPDataSource for keys)."""
        raise NotImplementedError

    def top_clients(self) -> list:
        raise NotImplementedError


class RandomVIPDataSource(ClientActivityRepository, AnalyticsRepository):
    """Placeholder data. Seed it for repeatable output in tests."""

    def __init__(self, seed=None, rng: random.Random = None):
        self.rng = rng or random.Random(seed)

    def high_value_clients(self) -> list:
        return [
            {"name": "Diamond Client #247", "activity_increase": 340, "value": "$89K"},
            {"name": "Premium Client #189", "activity_increase": 280, "value": "$67K"},
            {"name": "VIP Client #456", "activity_increase": 195, "value": "$45K"},
        ]

    def retention_risks(self) -> list:
        return [
            {"name": "Client XYZ", "drop_percent": 67, "risk_level": "high"},
            {"name": "Client ABC", "drop_percent": 45, "risk_level": "medium"},
            {"name": "Client DEF", "drop_percent": 23, "risk_level": "low"},
        ]

    def upselling_opportunities(self) -> list:
        return [
            {"name": "Client 123", "product": "Fantasy402 Premium", "value": "$50K/month"},
            {"name": "Client 456", "product": "VIP Elite Upgrade", "value": "$75K/month"},
            {"name": "Client 789", "product": "Sports Analytics Pro", "value": "$25K/month"},
        ]

    def client_event(self, activity_type: str, now: datetime) -> dict:
        meta = ACTIVITY_TYPES[activity_type]
        amount = self.rng.randrange(*meta["range"]) if "range" in meta else None
        return {
            "client": self.rng.choice(ACTIVITY_CLIENTS),
            "amount": amount,
            "occurred_at": now - timedelta(seconds=self.rng.uniform(0, 3600)),
        }

    def daily_snapshot(self) -> dict:
        r = self.rng
        return {
            "revenue_thousands": r.randrange(200, 700),
            "revenue_growth": r.randrange(5, 30),
            "active_clients": r.randrange(800, 1000),
            "client_growth": r.randrange(2, 17),
            "conversion_rate": r.randrange(15, 25),
            "conversion_growth": r.randrange(1, 9),
            "avg_response_time": r.randrange(100, 300),
            "response_improvement": r.randrange(10, 40),
        }

    def top_clients(self) -> list:
        return [dict(c) for c in TOP_CLIENTS]
