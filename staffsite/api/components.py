"""
Shared page components — head, header, footer, action buttons, tool cards.

Each returns Markup so it can be dropped into a page template without
being escaped twice. Everything else that reaches the page goes through
Jinja autoescaping.
"""

from flask import render_template_string
from markupsafe import Markup

from .templates import (ACTION_BUTTONS, FOOTER, HEADER, HTML_HEAD, BASE_CSS,
                        TOOL_CARDS)
from ..core.config import can_schedule
from ..core.employees import get_avatar_placeholder

NAV_LINKS = [
    ("/profile", "👤", "Profile"),
    ("/schedule", "📅", "Schedule"),
    ("/tools", "🔧", "Tools"),
    ("/contact", "📇", "Contact"),
]

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
}


def sanitize_html(value) -> Markup:
    """Escape & < > " ' / for interpolation into markup."""
    text = "" if value is None else str(value)
    return Markup("".join(_HTML_ESCAPES.get(ch, ch) for ch in text))


def generate_html_head(title: str, description: str = "") -> Markup:
    return Markup(render_template_string(
        HTML_HEAD, title=title, description=description, base_css=Markup(BASE_CSS)))


def generate_header(employee: dict, active_path: str = "/profile") -> Markup:
    links = [link for link in NAV_LINKS if link[0] != "/schedule" or can_schedule(employee)]
    return Markup(render_template_string(
        HEADER, employee=employee, active_path=active_path, nav_links=links,
        initials=get_avatar_placeholder(employee.get("name", "")),
        is_vip=employee.get("tier") == 5))


def generate_footer() -> Markup:
    return Markup(render_template_string(FOOTER))


def generate_action_buttons(buttons: list) -> Markup:
    """buttons: [{"href", "label", "icon", "class_name", "message"?}]

    A button with a message shows it in a dialog instead of navigating.
    """
    return Markup(render_template_string(ACTION_BUTTONS, buttons=buttons))


def generate_tool_cards(tools: list) -> Markup:
    return Markup(render_template_string(TOOL_CARDS, tools=tools))
