"""
VIP CRM service — the data behind /tools/vip/crm.

Insights, the client activity feed, recommendations, period analytics and
follow-up workflow definitions, assembled from a ClientActivityRepository
and an AnalyticsRepository. Built once per app in create_app() and read
from app.extensions["vip_crm"].
"""

import logging
import random
from datetime import datetime, timezone

from .repositories import ACTIVITY_TYPES, DataSourceError, RandomVIPDataSource

log = logging.getLogger("staffsite.crm")

ACTIVITY_FILTERS = {
    "all": ["bet_placed", "deposit", "withdrawal", "login", "profile_update"],
    "vip": ["bet_placed", "deposit", "vip_upgrade"],
    "high-value": ["bet_placed", "deposit", "large_bet"],
    "new-clients": ["registration", "first_deposit", "first_bet"],
}

ACTIVITY_FEED_SIZE = 15

PERIOD_MULTIPLIERS = {
    "today": 1,
    "week": 7,
    "month": 30,
    "quarter": 90,
}

RECOMMENDATIONS = [
    {
        "id": "premium-upgrade",
        "icon": "💎",
        "title": "Premium VIP Upgrade",
        "description": "Recommend upgrading top clients to premium tier for enhanced services",
        "value": "$50K/month potential",
        "confidence": 91,
        "color": "#ffd700",
        "buttonColor": "255, 215, 0",
    },
    {
        "id": "retention-campaign",
        "icon": "🎯",
        "title": "Retention Campaign",
        "description": "Target at-risk clients with personalized retention offers",
        "value": "23 clients identified",
        "confidence": 87,
        "color": "#ff6b35",
        "buttonColor": "255, 107, 53",
    },
    {
        "id": "sports-preferences",
        "icon": "🏈",
        "title": "Sports Preferences Analysis",
        "description": "Personalize recommendations based on betting patterns",
        "value": "15% conversion boost",
        "confidence": 94,
        "color": "#40e0d0",
        "buttonColor": "64, 224, 208",
    },
    {
        "id": "automated-followup",
        "icon": "⚡",
        "title": "Automated Follow-up",
        "description": "Implement smart follow-up sequences for better engagement",
        "value": "40% response rate",
        "confidence": 89,
        "color": "#22c55e",
        "buttonColor": "34, 197, 94",
    },
]

# delay is hours after the workflow is triggered
WORKFLOWS = {
    "welcome": {
        "name": "VIP Welcome Series",
        "description": "Automated onboarding sequence for new VIP clients",
        "steps": [
            {"delay": 0, "action": "Welcome Email", "template": "vip-welcome"},
            {"delay": 24, "action": "VIP Portal Tour", "template": "portal-intro"},
            {"delay": 72, "action": "Personal Manager Intro", "template": "manager-intro"},
            {"delay": 168, "action": "First Bet Bonus", "template": "bonus-offer"},
        ],
        "active": True,
        "successRate": "87%",
    },
    "retention": {
        "name": "Retention Outreach",
        "description": "Proactive engagement for at-risk clients",
        "steps": [
            {"delay": 0, "action": "Engagement Check", "template": "activity-survey"},
            {"delay": 12, "action": "Personalized Offer", "template": "retention-offer"},
            {"delay": 48, "action": "Follow-up Call", "template": "phone-script"},
            {"delay": 96, "action": "Loyalty Reward", "template": "loyalty-bonus"},
        ],
        "active": True,
        "successRate": "73%",
    },
    "upselling": {
        "name": "Premium Upselling",
        "description": "Intelligent upgrade recommendations",
        "steps": [
            {"delay": 0, "action": "Usage Analysis", "template": "usage-report"},
            {"delay": 24, "action": "Upgrade Proposal", "template": "premium-pitch"},
            {"delay": 72, "action": "ROI Demonstration", "template": "value-prop"},
            {"delay": 120, "action": "Limited Time Offer", "template": "special-deal"},
        ],
        "active": True,
        "successRate": "65%",
    },
}

FALLBACK_INSIGHT = {
    "id": "analyzing",
    "icon": "🔄",
    "title": "Analyzing Client Data",
    "description": "AI is processing real-time client activity and betting patterns",
    "color": "#ffd700",
    "timestamp": "Live",
    "confidence": 100,
}


def relative_time(when: datetime, now: datetime) -> str:
    """'Just now', '5 min ago', '3 hr ago', '2 days ago'."""
    diff_mins = int((now - when).total_seconds() // 60)
    diff_hours = diff_mins // 60
    if diff_mins < 1:
        return "Just now"
    if diff_mins < 60:
        return f"{diff_mins} min ago"
    if diff_hours < 24:
        return f"{diff_hours} hr ago"
    return f"{diff_hours // 24} days ago"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VIPCRMService:

    def __init__(self, activity_repo=None, analytics_repo=None, rng: random.Random = None,
                 clock=_utcnow):
        source = activity_repo or RandomVIPDataSource()
        self.activity_repo = source
        self.analytics_repo = analytics_repo or (
            source if hasattr(source, "daily_snapshot") else RandomVIPDataSource())
        # a seeded source seeds the whole service
        self.rng = rng or getattr(source, "rng", None) or random.Random()
        self._clock = clock

    # ── Insights ─────────────────────────────────────────────────────────

    def generate_ai_insights(self) -> list:
        """Up to three insights, or the single 'analyzing' placeholder when the source is down."""
        try:
            high_value = self.activity_repo.high_value_clients()
            risks = self.activity_repo.retention_risks()
            upsell = self.activity_repo.upselling_opportunities()
        except DataSourceError as e:
            log.warning("CRM data source unavailable, serving fallback insights: %s", e)
            return [dict(FALLBACK_INSIGHT)]

        now = self._clock()
        stamp = relative_time(now, now)
        insights = []

        if high_value:
            top = high_value[0]
            insights.append({
                "id": "high-value-client",
                "icon": "📈",
                "title": "High-Value Client Identified",
                "description": f"{top['name']} shows {top['activity_increase']}% increase in "
                               f"betting activity • Recommend premium upgrade",
                "color": "#22c55e",
                "timestamp": stamp,
                "confidence": self.rng.randint(80, 99),
            })

        if risks:
            risk = risks[0]
            insights.append({
                "id": "retention-risk",
                "icon": "🎯",
                "title": "Retention Risk Detected",
                "description": f"{risk['name']} engagement dropped {risk['drop_percent']}% • "
                               f"Suggest immediate outreach",
                "color": "#ff6b35",
                "timestamp": stamp,
                "confidence": self.rng.randint(80, 94),
            })

        if upsell:
            opp = upsell[0]
            insights.append({
                "id": "upselling-opportunity",
                "icon": "💎",
                "title": "Upselling Opportunity",
                "description": f"{opp['name']} ready for {opp['product']} • "
                               f"Expected value: {opp['value']}",
                "color": "#40e0d0",
                "timestamp": stamp,
                "confidence": self.rng.randint(85, 96),
            })

        return insights

    # ── Activity feed ────────────────────────────────────────────────────

    def get_client_activity(self, activity_filter: str = "all") -> list:
        """Latest client events, newest first. Unknown filters behave like 'all'."""
        types = ACTIVITY_FILTERS.get(activity_filter, ACTIVITY_FILTERS["all"])
        now = self._clock()
        try:
            activities = [
                self._build_activity(self.rng.choice(types), i, now)
                for i in range(ACTIVITY_FEED_SIZE)
            ]
        except DataSourceError as e:
            log.warning("CRM activity feed unavailable: %s", e)
            return []
        activities.sort(key=lambda a: a["timestamp"], reverse=True)
        return activities

    def _build_activity(self, activity_type: str, index: int, now: datetime) -> dict:
        meta = ACTIVITY_TYPES[activity_type]
        event = self.activity_repo.client_event(activity_type, now)
        amount = event.get("amount")
        value = f"${amount}" if amount is not None else meta["label"]
        return {
            "id": f"activity-{index}",
            "type": activity_type,
            "client": event["client"],
            "icon": meta["icon"],
            "action": meta["action"],
            "value": value,
            "valueColor": meta["color"],
            "color": meta["color"],
            "time": relative_time(event["occurred_at"], now),
            "timestamp": event["occurred_at"].isoformat(),
        }

    # ── Recommendations / analytics / workflows ──────────────────────────

    def generate_recommendations(self) -> list:
        return [dict(r) for r in RECOMMENDATIONS]

    def generate_analytics(self, period: str = "today") -> dict:
        """Dashboard figures for a period; revenue scales by the period's day count."""
        multiplier = PERIOD_MULTIPLIERS.get(period, 1)
        snap = self.analytics_repo.daily_snapshot()
        revenue = snap["revenue_thousands"] * multiplier
        return {
            "period": period if period in PERIOD_MULTIPLIERS else "today",
            "multiplier": multiplier,
            "revenueThousands": revenue,
            "totalRevenue": f"${revenue}K",
            "revenueGrowth": snap["revenue_growth"],
            "activeClients": snap["active_clients"],
            "clientGrowth": snap["client_growth"],
            "conversionRate": snap["conversion_rate"],
            "conversionGrowth": snap["conversion_growth"],
            "avgResponseTime": snap["avg_response_time"],
            "responseImprovement": snap["response_improvement"],
            "topClients": self.analytics_repo.top_clients(),
        }

    def get_workflow_configuration(self, workflow_type: str = None) -> dict:
        wf = WORKFLOWS.get(workflow_type or "", WORKFLOWS["welcome"])
        return {**wf, "steps": [dict(s) for s in wf["steps"]]}
