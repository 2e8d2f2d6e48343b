"""
Page builders for the staff subdomains.

Each generate_*_page() takes an employee record, builds the template
context (tier flags, contact methods, business hours, tool cards) and
renders one complete HTML document. Output depends only on the inputs
and the site config, so the render cache can hold it.

Must be called inside an application context.
"""

import logging
from itertools import groupby

from flask import current_app, render_template_string
from markupsafe import Markup

from . import content as C
from .components import (generate_action_buttons, generate_footer, generate_header,
                         generate_html_head, generate_tool_cards, sanitize_html)
from .templates import (DIRECTORY_HEADER, LAYOUT_CLOSE, LAYOUT_OPEN, PAGE_CONTACT,
                        PAGE_DIRECTORY, PAGE_NOT_FOUND, PAGE_PROFILE, PAGE_SCHEDULE)
from .templates_tools import (ESCALATION, TOOL_DASHBOARD, TOOL_RESTRICTED, TOOLS_CSS,
                              TOOLS_OVERVIEW, VIP_CRM, VIP_HUB)
from ..core.config import can_schedule, employee_tools, has_required_tier
from ..core.employees import get_avatar_placeholder, years_of_service
from ..crm.service import ACTIVITY_FILTERS, PERIOD_MULTIPLIERS, WORKFLOWS

log = logging.getLogger("staffsite.pages")

VIP_TIER = 5
CRM_REFRESH_MS = 30000


def _site() -> dict:
    return current_app.config["SITE"]


def _is_vip(employee: dict) -> bool:
    return employee.get("tier") == VIP_TIER


def render(content: str, *, title: str, description: str = "", employee: dict = None,
           active_path: str = "/profile", main_class: str = "ctr", header=None, **kw) -> str:
    """Wrap page content in the shared layout and render it in one pass."""
    if header is None:
        header = generate_header(employee, active_path) if employee else Markup("")
    html = LAYOUT_OPEN + content + LAYOUT_CLOSE
    return render_template_string(
        html,
        head=generate_html_head(title, description),
        header=header,
        footer=generate_footer(),
        main_class=main_class,
        employee=employee or {},
        sanitize=sanitize_html,
        **kw,
    )


# ═══════════════════════════════════════════════════════════════════════
# Tier rules
# ═══════════════════════════════════════════════════════════════════════

def contact_methods(employee: dict) -> list:
    """Contact channels in display order. VIP line first for tier 5."""
    vip = _site()["vip"]
    methods = []
    if _is_vip(employee):
        methods.append({
            "icon": "👑", "title": "VIP Priority Line", "value": vip["hotline"],
            "action": f"tel:{vip['hotline']}",
            "description": "24/7 VIP support hotline - Immediate assistance",
            "primary": True, "category": "urgent", "availability": "24/7",
        })
    if employee.get("phone"):
        methods.append({
            "icon": "📞", "title": "Direct Phone", "value": employee["phone"],
            "action": f"tel:{employee['phone']}",
            "description": "Call directly during business hours",
            "primary": employee.get("tier", 1) >= 4, "category": "direct",
            "availability": "Business Hours",
        })
    if employee.get("email"):
        methods.append({
            "icon": "📧", "title": "Enterprise Email", "value": employee["email"],
            "action": f"mailto:{employee['email']}",
            "description": "Professional email communication",
            "primary": True, "category": "professional", "availability": "24/7",
        })
    if employee.get("telegram"):
        handle = employee["telegram"].lstrip("@")
        methods.append({
            "icon": "✈️", "title": "Telegram", "value": f"@{handle}",
            "action": f"https://t.me/{handle}",
            "description": "Instant messaging & file sharing",
            "primary": False, "category": "instant", "availability": "24/7",
        })
    if employee.get("slack"):
        handle = employee["slack"].lstrip("@")
        methods.append({
            "icon": "💬", "title": "Slack", "value": f"@{handle}",
            "action": f"slack://user?id={handle}",
            "description": "Team collaboration platform",
            "primary": False, "category": "team", "availability": "Business Hours",
        })
    return methods


def contact_summary(employee: dict) -> list:
    """Quick-copy strip: only the channels the employee actually has."""
    items = [("📧", "Email", employee.get("email")),
             ("📱", "Phone", employee.get("phone")),
             ("💬", "Slack", employee.get("slack") and "@" + employee["slack"].lstrip("@")),
             ("✈️", "Telegram", employee.get("telegram") and "@" + employee["telegram"].lstrip("@"))]
    return [{"icon": i, "label": label, "value": v} for i, label, v in items if v]


def weekly_availability(employee: dict) -> list:
    tier = employee.get("tier", 1)
    return [
        {"day": "Monday - Friday", "hours": "9:00 AM - 6:00 PM EST", "available": True,
         "note": "Full support across all channels including live chat, phone, and email"},
        {"day": "Saturday", "hours": "10:00 AM - 4:00 PM EST", "available": tier >= 3,
         "note": "Full support across all channels including live chat, phone, and email"},
        {"day": "Sunday", "hours": "Emergency Only", "available": tier == VIP_TIER,
         "note": "Emergency support only for critical system issues"},
    ]


def business_hours(employee: dict) -> list:
    """Only the slots this employee is available for."""
    return [h for h in weekly_availability(employee) if h["available"]]


def _field(name, label, type_="text", required=False, options=None, placeholder=""):
    return {"name": name, "label": label, "type": type_, "required": required,
            "options": options or [], "placeholder": placeholder}


_NAME = _field("name", "Your Name", required=True)
_EMAIL = _field("email", "Email", "email", required=True)
_PHONE = _field("phone", "Phone", "tel")
_COMPANY = _field("company", "Company")
_SUBJECT = _field("subject", "Subject", required=True)
_MESSAGE = _field("message", "Message", "textarea", required=True)

CONTACT_FORMS = [
    {"id": "general", "label": "General Inquiry", "icon": "💬", "title": "General Inquiry",
     "description": "Send a general message or question", "vip": False,
     "fields": [_NAME, _COMPANY, _EMAIL, _PHONE, _SUBJECT,
                _field("category", "Category", "select", options=[
                    ("general", "General Question"), ("feedback", "Feedback"),
                    ("suggestion", "Suggestion"), ("other", "Other")]),
                _MESSAGE]},
    {"id": "technical", "label": "Technical Support", "icon": "🛠️", "title": "Technical Support",
     "description": "Report technical issues or request assistance", "vip": False,
     "fields": [_NAME, _EMAIL,
                _field("priority", "Urgency Level", "select", options=[
                    ("low", "Low - General inquiry"), ("medium", "Medium - Affects workflow"),
                    ("high", "High - Blocks work"), ("urgent", "Urgent - Production down")]),
                _field("category", "Issue Type", "select", options=[
                    ("bug", "Bug"), ("performance", "Performance"), ("access", "Access"),
                    ("other", "Other")]),
                _SUBJECT,
                _field("message", "Describe the issue", "textarea", required=True,
                       placeholder="Steps to reproduce, expected and actual behaviour")]},
    {"id": "api", "label": "API Integration", "icon": "🔌", "title": "API Integration Support",
     "description": "Help with authentication, webhooks and rate limits", "vip": False,
     "fields": [_NAME, _COMPANY, _EMAIL,
                _field("category", "Topic", "select", options=[
                    ("integration", "New Integration"), ("authentication", "Authentication"),
                    ("webhooks", "Webhooks"), ("rate-limits", "Rate Limits")]),
                _SUBJECT, _MESSAGE]},
    {"id": "business", "label": "Business Development", "icon": "💼", "title": "Business Development",
     "description": "Partnerships, enterprise plans and reseller programs", "vip": False,
     "fields": [_NAME, _COMPANY, _EMAIL, _PHONE,
                _field("category", "Opportunity", "select", options=[
                    ("partnership", "Partnership"), ("enterprise", "Enterprise Plan"),
                    ("reseller", "Reseller Program")]),
                _SUBJECT, _MESSAGE]},
]

VIP_CONTACT_FORM = {
    "id": "vip", "label": "VIP Support", "icon": "👑", "title": "VIP Priority Support",
    "description": "Exclusive support channel for premium clients", "vip": True,
    "fields": [_field("name", "VIP Client Name", required=True),
               _field("priority", "Priority Level", "select", options=[
                   ("standard", "VIP Standard"), ("urgent", "VIP Urgent"),
                   ("critical", "VIP Critical")]),
               _field("email", "Secure Email", "email", required=True),
               _field("phone", "Direct Line", "tel"),
               _field("subject", "VIP Matter", required=True,
                      placeholder="Brief description of VIP matter"),
               _field("message", "VIP Request Details", "textarea", required=True,
                      placeholder="Details of your VIP request or concern")],
}

FORM_TYPES = [f["id"] for f in CONTACT_FORMS] + [VIP_CONTACT_FORM["id"]]


def contact_forms(employee: dict) -> list:
    return CONTACT_FORMS + ([VIP_CONTACT_FORM] if _is_vip(employee) else [])


# ═══════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════

def generate_contact_page(employee: dict) -> str:
    return render(
        PAGE_CONTACT,
        title=f"Contact {employee.get('name', '')} - Fire22",
        description=f"Enterprise contact hub for {employee.get('name', '')}, "
                    f"{employee.get('title', '')}",
        employee=employee,
        active_path="/contact",
        is_vip=_is_vip(employee),
        initials=get_avatar_placeholder(employee.get("name", "")),
        hero_stats=C.CONTACT_HERO_STATS,
        summary=contact_summary(employee),
        methods=contact_methods(employee),
        support_channels=C.SUPPORT_CHANNELS,
        support_options=C.SUPPORT_OPTIONS,
        api_resources=C.API_RESOURCES,
        forms=contact_forms(employee),
        live_support=C.LIVE_SUPPORT,
        tickets=C.SAMPLE_TICKETS,
        sla_levels=C.SLA_LEVELS,
        hours=business_hours(employee),
        guarantees=C.RESPONSE_GUARANTEES,
        vip=_site()["vip"],
    )


def _standard_profile(employee: dict, tools: list) -> dict:
    years = years_of_service(employee)
    tier_name = _site()["tiers"].get(str(employee.get("tier")), {}).get("name", "Staff")
    reports = employee.get("direct_reports") or []
    hire_year = (employee.get("hire_date") or "")[:4]
    return {
        "credentials": C.STANDARD_CREDENTIALS,
        "hero_stats": [
            {"value": f"{years}+" if years else "New", "label": "Years at Fire22"},
            {"value": tier_name, "label": "Access Tier"},
            {"value": str(len(reports)), "label": "Direct Reports"},
            {"value": str(len(tools)), "label": "Tools Available"},
        ],
        "achievements": C.STANDARD_ACHIEVEMENTS,
        "timeline": [{
            "year": hire_year or "—", "title": employee.get("title", ""), "company": "Fire22",
            "description": f"Joined the {employee.get('department', '')} team",
            "achievements": [],
        }],
        "services": [{"icon": t["icon"], "title": t["name"], "description": t["description"],
                      "features": []} for t in tools],
        "metrics": [
            {"icon": "📅", "label": "Years at Fire22", "value": str(years or 0), "change": "", "trend": "up"},
            {"icon": "🎖️", "label": "Access Tier", "value": f"Tier {employee.get('tier', 1)}",
             "change": tier_name, "trend": "up"},
            {"icon": "👥", "label": "Direct Reports", "value": str(len(reports)), "change": "", "trend": "up"},
            {"icon": "✨", "label": "Features Enabled", "value": str(len(employee.get("features") or [])),
             "change": "", "trend": "up"},
        ],
        "success_stories": C.TEAM_SUCCESS_STORIES,
        "testimonials": C.TEAM_TESTIMONIALS,
        "recognitions": C.TEAM_RECOGNITIONS,
        "certifications": C.TEAM_CERTIFICATIONS,
        "default_bio": f"{employee.get('title', 'Team member')} in the "
                       f"{employee.get('department', 'Fire22')} department.",
    }


def _vip_profile(employee: dict) -> dict:
    return {
        "credentials": C.VIP_CREDENTIALS,
        "hero_stats": C.VIP_HERO_STATS,
        "achievements": C.VIP_ACHIEVEMENTS,
        "timeline": C.VIP_TIMELINE,
        "services": C.VIP_SERVICES,
        "metrics": C.VIP_METRICS,
        "success_stories": C.SUCCESS_STORIES,
        "testimonials": C.TESTIMONIALS,
        "recognitions": C.RECOGNITIONS,
        "certifications": C.CERTIFICATIONS,
        "default_bio": "Elite VIP Management Executive specializing in premium client "
                       "relationships, high-value betting operations, and exclusive customer "
                       "experiences.",
    }


def generate_profile_page(employee: dict) -> str:
    is_vip = _is_vip(employee)
    tools = employee_tools(employee)
    sections = _vip_profile(employee) if is_vip else _standard_profile(employee, tools)
    buttons = [
        {"href": "/contact", "icon": "📧", "class_name": "btn-s",
         "label": "Contact Executive" if is_vip else "Contact"},
        {"href": "/tools", "icon": "🔧", "class_name": "btn-g",
         "label": "VIP Management Tools" if is_vip else f"{employee.get('department', '')} Tools"},
    ]
    if can_schedule(employee):
        buttons.insert(0, {"href": "/schedule", "icon": "📅", "class_name": "btn-p",
                           "label": "Schedule VIP Consultation" if is_vip else "Schedule a Meeting"})
    hero_actions = generate_action_buttons(buttons)
    return render(
        PAGE_PROFILE,
        title=f"{employee.get('name', '')} - {employee.get('title', '')}",
        description=employee.get("bio") or sections["default_bio"],
        employee=employee,
        active_path="/profile",
        is_vip=is_vip,
        hero_actions=hero_actions,
        can_schedule=can_schedule(employee),
        direct_reports=employee.get("direct_reports") or [],
        vip=_site()["vip"],
        **sections,
    )


def meeting_types_for(employee: dict) -> list:
    tier = employee.get("tier", 1)
    return [m for m in C.MEETING_TYPES if has_required_tier(tier, m["min_tier"])]


def generate_schedule_page(employee: dict) -> str:
    meeting_types = meeting_types_for(employee)
    return render(
        PAGE_SCHEDULE,
        title=f"Schedule - {employee.get('name', '')}",
        description=f"Book a meeting with {employee.get('name', '')}",
        employee=employee,
        active_path="/schedule",
        week=weekly_availability(employee),
        meeting_types=meeting_types,
    )


# ═══════════════════════════════════════════════════════════════════════
# Tools
# ═══════════════════════════════════════════════════════════════════════

# (path fragment, page key, minimum tier). First substring match wins, so
# specific /vip/* paths must precede /vip.
TOOL_ROUTES = [
    ("/fantasy402", "fantasy402", 4),
    ("/vip/telegram", "vip_telegram", VIP_TIER),
    ("/vip/crm", "vip_crm", VIP_TIER),
    ("/vip/portfolio", "vip_portfolio", VIP_TIER),
    ("/vip/analytics", "vip_analytics", VIP_TIER),
    ("/vip/security", "vip_security", VIP_TIER),
    ("/vip/gaming", "vip_gaming", VIP_TIER),
    ("/vip", "vip_hub", VIP_TIER),
    ("/escalation", "escalation", 3),
    ("/analytics", "analytics", 1),
]


def select_tool_page(pathname: str):
    """(page key, minimum tier) for a tools path, or None for the overview."""
    for fragment, key, min_tier in TOOL_ROUTES:
        if pathname and fragment in pathname:
            return key, min_tier
    return None


def _dashboard(key: str, employee: dict) -> str:
    back = ("/tools/vip", "VIP Center") if key.startswith("vip_") else ("/tools", "All Tools")
    return render_template_string(TOOL_DASHBOARD, d=C.DASHBOARDS[key], employee=employee,
                                  back_url=back[0], back_label=back[1])


def _vip_hub(employee: dict) -> str:
    quick = generate_action_buttons([
        {"href": "/tools/vip/crm", "icon": "🤖", "label": "Open CRM", "class_name": "btn-g"},
        {"href": "/tools/escalation", "icon": "🚨", "label": "Escalate", "class_name": "btn-danger"},
        {"href": "/contact", "icon": "📞", "label": "Contact Hub", "class_name": "btn-s"},
    ])
    return render_template_string(VIP_HUB, stats=C.VIP_HUB_STATS,
                                  feature_cards=generate_tool_cards(C.VIP_FEATURES),
                                  quick_actions=quick)


def _vip_crm(employee: dict) -> str:
    filters = [(key, key.replace("-", " ").title()) for key in ACTIVITY_FILTERS]
    return render_template_string(VIP_CRM, periods=list(PERIOD_MULTIPLIERS),
                                  activity_filters=filters, workflows=list(WORKFLOWS.items()),
                                  refresh_ms=CRM_REFRESH_MS)


def _escalation(employee: dict) -> str:
    return render_template_string(ESCALATION,
                                  escalation_buttons=generate_action_buttons(C.ESCALATION_BUTTONS),
                                  levels=C.ESCALATION_LEVELS, vip=_site()["vip"])


def _tool_title(key: str) -> str:
    titles = {"vip_hub": "VIP Management Center", "vip_crm": "AI-Powered VIP CRM",
              "escalation": "VIP Escalation Command Center"}
    return titles.get(key) or C.DASHBOARDS[key]["title"]


_TOOL_RENDERERS = {
    "vip_hub": _vip_hub,
    "vip_crm": _vip_crm,
    "escalation": _escalation,
}


def generate_tools_content(employee: dict, pathname: str = None, tools: list = None) -> Markup:
    """The tools sub-page for a path, or the department overview."""
    selected = select_tool_page(pathname)
    if selected is None:
        return Markup(render_template_string(
            TOOLS_OVERVIEW, employee=employee, tool_cards=generate_tool_cards(tools or [])))

    key, min_tier = selected
    if not has_required_tier(employee.get("tier", 1), min_tier):
        log.info("Tools page %s denied for %s (tier %s < %s)",
                 key, employee.get("id"), employee.get("tier"), min_tier)
        return Markup(render_template_string(
            TOOL_RESTRICTED, employee=employee, required=min_tier,
            title=_tool_title(key)))

    renderer = _TOOL_RENDERERS.get(key)
    html = renderer(employee) if renderer else _dashboard(key, employee)
    return Markup(html)


def generate_tools_page(employee: dict, pathname: str = None) -> str:
    tools = employee_tools(employee)
    body = generate_tools_content(employee, pathname, tools)
    return render(
        TOOLS_CSS + "{{ body }}",
        title=f"Department Tools - {employee.get('name', '')}",
        description=f"Access specialized tools and resources for "
                    f"{employee.get('department', '')} operations",
        employee=employee,
        active_path="/tools",
        main_class="tools-container",
        body=body,
    )


# ═══════════════════════════════════════════════════════════════════════
# Directory / 404
# ═══════════════════════════════════════════════════════════════════════

def generate_root_domain_page(employees: list) -> str:
    site = _site()
    people = sorted(
        ({"id": e.get("id", ""), "name": e.get("name", ""), "title": e.get("title", ""),
          "department": e.get("department") or "Other", "tier": e.get("tier", 1),
          "initials": get_avatar_placeholder(e.get("name", ""))} for e in employees),
        key=lambda p: (p["department"], p["name"]))
    departments = [(dept, list(group)) for dept, group in groupby(people, key=lambda p: p["department"])]
    header = Markup(render_template_string(DIRECTORY_HEADER, site_name=site["site_name"],
                                           domain=site["domain"]))
    return render(
        PAGE_DIRECTORY,
        title=f"{site['site_name']} Staff Directory",
        description=f"Personal pages for the {site['site_name']} team",
        header=header,
        departments=departments,
        count=len(people),
        site_name=site["site_name"],
        domain=site["domain"],
    )


def generate_404_page(subdomain: str) -> str:
    site = _site()
    header = Markup(render_template_string(DIRECTORY_HEADER, site_name=site["site_name"],
                                           domain=site["domain"]))
    return render(
        PAGE_NOT_FOUND,
        title="Profile Not Found",
        description="This staff profile does not exist",
        header=header,
        subdomain=subdomain,
        domain=site["domain"],
    )
