"""
Page builders — tier-gated markup, sanitisation, determinism, tools dispatch.

Builders are called directly inside an app context; route behaviour is
covered in test_routes.py.
"""
import pytest

from staffsite.api.components import (generate_action_buttons, generate_header,
                                      generate_tool_cards, sanitize_html)
from staffsite.api.pages import (business_hours, contact_methods, generate_404_page,
                                 generate_contact_page, generate_profile_page,
                                 generate_root_domain_page, generate_schedule_page,
                                 generate_tools_content, generate_tools_page, select_tool_page)

VIP_MARKERS = ('id="vip-form"', 'class="vip-hours-notice', "VIP Priority Line")


def _employee(base, **changes):
    emp = dict(base)
    emp.update(changes)
    return emp


# ═══════════════════════════════════════════════════════════════════════════════
# COMPONENTS
# ═══════════════════════════════════════════════════════════════════════════════

class TestSanitize:

    def test_escapes_all_six(self):
        assert str(sanitize_html("&<>\"'/")) == "&amp;&lt;&gt;&quot;&#x27;&#x2F;"

    def test_none_is_empty(self):
        assert str(sanitize_html(None)) == ""

    def test_plain_text_unchanged(self):
        assert str(sanitize_html("Vinny Two Times")) == "Vinny Two Times"


class TestComponents:

    def test_header_active_link(self, app_ctx, vip_employee):
        html = str(generate_header(vip_employee, "/contact"))
        assert 'href="/contact" class="hdr-btn hdr-active"' in html
        assert "VT" in html

    def test_action_button_with_message(self, app_ctx):
        html = str(generate_action_buttons([
            {"href": "#", "label": "Alert", "icon": "🚨", "message": "Team notified"}]))
        assert 'data-message="Team notified"' in html
        assert "<a " not in html

    def test_header_schedule_link_needs_feature(self, app_ctx, vip_employee, standard_employee):
        assert 'href="/schedule"' in str(generate_header(vip_employee))
        assert 'href="/schedule"' not in str(generate_header(standard_employee))

    def test_tool_card_without_url_is_not_a_link(self, app_ctx):
        html = str(generate_tool_cards([{"icon": "x", "name": "Deployments",
                                         "description": "", "min_tier": 3}]))
        assert "<a " not in html
        assert "Coming soon" in html

    def test_tool_cards_empty(self, app_ctx):
        assert "No tools are available" in str(generate_tool_cards([]))

    def test_tool_cards_escape(self, app_ctx):
        html = str(generate_tool_cards([{"icon": "x", "name": "<b>bold</b>",
                                         "description": "", "url": "/tools", "min_tier": 1}]))
        assert "<b>bold</b>" not in html
        assert "&lt;b&gt;bold&lt;/b&gt;" in html


# ═══════════════════════════════════════════════════════════════════════════════
# CONTACT PAGE
# ═══════════════════════════════════════════════════════════════════════════════

class TestContactPage:

    def test_single_document(self, app_ctx, vip_employee):
        html = generate_contact_page(vip_employee)
        assert html.count("<html") == 1
        assert html.count("</html>") == 1
        assert html.startswith("<!DOCTYPE html>")

    def test_hero_has_sanitized_name_and_title(self, app_ctx, vip_employee):
        emp = _employee(vip_employee, name="Dan O'Neil", title="Head of VIP / Risk")
        html = generate_contact_page(emp)
        hero = html[html.index('id="contact-hero"'):]
        assert str(sanitize_html(emp["name"])) in hero
        assert str(sanitize_html(emp["title"])) in hero

    def test_vip_markup_for_tier_5(self, app_ctx, vip_employee):
        html = generate_contact_page(vip_employee)
        for marker in VIP_MARKERS:
            assert marker in html

    @pytest.mark.parametrize("tier", [1, 2, 3, 4])
    def test_no_vip_markup_below_tier_5(self, app_ctx, vip_employee, tier):
        html = generate_contact_page(_employee(vip_employee, tier=tier))
        for marker in VIP_MARKERS:
            assert marker not in html

    def test_script_in_name_is_escaped(self, app_ctx, standard_employee):
        html = generate_contact_page(_employee(standard_employee, name="<script>alert(1)</script>"))
        assert "<script>alert(1)</script>" not in html

    def test_all_sections(self, app_ctx, standard_employee):
        html = generate_contact_page(standard_employee)
        for section in ("contact-hero", "contact-methods", "support-channels", "api-integration",
                        "contact-forms", "live-support", "support-tickets", "business-hours"):
            assert f'id="{section}"' in html

    def test_standard_forms(self, app_ctx, standard_employee):
        html = generate_contact_page(standard_employee)
        for form in ("general", "technical", "api", "business"):
            assert f'id="{form}-form"' in html


class TestContactRules:

    def test_vip_line_first(self, app_ctx, vip_employee):
        methods = contact_methods(vip_employee)
        assert methods[0]["title"] == "VIP Priority Line"
        assert methods[0]["value"] == "1-800-VIP-HELP"

    def test_direct_phone_primary_from_tier_4(self, app_ctx, vip_employee):
        phone = [m for m in contact_methods(_employee(vip_employee, tier=4)) if m["title"] == "Direct Phone"]
        assert phone[0]["primary"] is True
        phone = [m for m in contact_methods(_employee(vip_employee, tier=3)) if m["title"] == "Direct Phone"]
        assert phone[0]["primary"] is False

    def test_missing_channels_skipped(self, app_ctx, standard_employee):
        titles = [m["title"] for m in contact_methods(standard_employee)]
        assert "Direct Phone" not in titles
        assert "Telegram" not in titles
        assert "Slack" in titles

    @pytest.mark.parametrize("tier,days", [
        (1, ["Monday - Friday"]),
        (2, ["Monday - Friday"]),
        (3, ["Monday - Friday", "Saturday"]),
        (4, ["Monday - Friday", "Saturday"]),
        (5, ["Monday - Friday", "Saturday", "Sunday"]),
    ])
    def test_business_hours_by_tier(self, app_ctx, standard_employee, tier, days):
        hours = business_hours(_employee(standard_employee, tier=tier))
        assert [h["day"] for h in hours] == days


# ═══════════════════════════════════════════════════════════════════════════════
# PROFILE / SCHEDULE / DIRECTORY
# ═══════════════════════════════════════════════════════════════════════════════

class TestProfilePage:

    def test_vip_credentials(self, app_ctx, vip_employee):
        html = generate_profile_page(vip_employee)
        assert "Schedule VIP Consultation" in html
        assert html.count("</html>") == 1

    def test_standard_profile(self, app_ctx, standard_employee):
        html = generate_profile_page(dict(standard_employee, features=["premium-scheduling"]))
        assert "Schedule VIP Consultation" not in html
        assert "Schedule a Meeting" in html
        assert "Customer Support Tools" in html

    def test_no_schedule_links_without_feature(self, app_ctx, standard_employee):
        html = generate_profile_page(standard_employee)
        assert 'href="/schedule"' not in html
        assert "Schedule a Meeting" not in html

    def test_sections(self, app_ctx, vip_employee):
        html = generate_profile_page(vip_employee)
        for section in ("achievements", "timeline", "services", "performance",
                        "client-success", "testimonials", "recognition", "certifications"):
            assert f'id="{section}"' in html


class TestSchedulePage:

    def test_vip_consultation_tier_5_only(self, app_ctx, vip_employee, standard_employee):
        assert "vip-consultation" in generate_schedule_page(vip_employee)
        assert "vip-consultation" not in generate_schedule_page(standard_employee)

    def test_booking_form(self, app_ctx, standard_employee):
        html = generate_schedule_page(standard_employee)
        assert 'id="booking-form"' in html
        assert "Strategy Session" not in html


class TestDirectoryPages:

    def test_root_lists_employees(self, app_ctx, vip_employee, standard_employee):
        html = generate_root_domain_page([vip_employee, standard_employee])
        assert "vinny2times.sportsfire.co" in html
        assert "jane-smith.sportsfire.co" in html
        assert "Customer Support" in html

    def test_404_page(self, app_ctx):
        html = generate_404_page("nobody")
        assert "nobody" in html
        assert html.count("</html>") == 1


# ═══════════════════════════════════════════════════════════════════════════════
# TOOLS
# ═══════════════════════════════════════════════════════════════════════════════

class TestToolsDispatch:

    @pytest.mark.parametrize("path,key", [
        ("/tools/fantasy402", "fantasy402"),
        ("/tools/vip/telegram", "vip_telegram"),
        ("/tools/vip/crm", "vip_crm"),
        ("/tools/vip/portfolio", "vip_portfolio"),
        ("/tools/vip/analytics", "vip_analytics"),
        ("/tools/vip/security", "vip_security"),
        ("/tools/vip/gaming", "vip_gaming"),
        ("/tools/vip", "vip_hub"),
        ("/tools/escalation", "escalation"),
        ("/tools/analytics", "analytics"),
    ])
    def test_selects_page(self, path, key):
        assert select_tool_page(path)[0] == key

    def test_specific_vip_paths_win_over_hub(self):
        assert select_tool_page("/tools/vip/analytics")[0] == "vip_analytics"

    def test_overview(self):
        assert select_tool_page("/tools") is None
        assert select_tool_page(None) is None

    def test_overview_shows_tool_cards(self, app_ctx, vip_employee):
        html = str(generate_tools_content(vip_employee, "/tools",
                                          [{"icon": "🤖", "name": "AI-Powered CRM", "description": "",
                                            "url": "/tools/vip/crm", "min_tier": 5}]))
        assert "VIP Management Department Tools" in html
        assert "/tools/vip/crm" in html

    def test_crm_page_for_vip(self, app_ctx, vip_employee):
        html = str(generate_tools_content(vip_employee, "/tools/vip/crm"))
        assert "AI-Powered VIP CRM" in html
        assert "/api/vip/insights" in html

    def test_restricted_below_tier(self, app_ctx, standard_employee):
        html = str(generate_tools_content(standard_employee, "/tools/vip/crm"))
        assert "requires Tier 5 access" in html
        assert "/api/vip/insights" not in html

    def test_escalation_from_tier_3(self, app_ctx, standard_employee):
        html = str(generate_tools_content(_employee(standard_employee, tier=3), "/tools/escalation"))
        assert "VIP Escalation Command Center" in html
        assert "requires Tier" not in html

    def test_tools_page_layout(self, app_ctx, vip_employee):
        html = generate_tools_page(vip_employee, "/tools/vip")
        assert '<main class="tools-container">' in html
        assert 'href="/tools" class="hdr-btn hdr-active"' in html
        assert "Enterprise VIP Management Center" in html


# ═══════════════════════════════════════════════════════════════════════════════
# DETERMINISM
# ═══════════════════════════════════════════════════════════════════════════════

class TestDeterministicRendering:

    @pytest.mark.parametrize("builder", [generate_contact_page, generate_profile_page,
                                         generate_schedule_page, generate_tools_page])
    @pytest.mark.parametrize("who", ["vip_employee", "standard_employee"])
    def test_byte_identical(self, app_ctx, request, builder, who):
        employee = request.getfixturevalue(who)
        assert builder(employee) == builder(employee)

    def test_tools_subpages_identical(self, app_ctx, vip_employee):
        for path in ("/tools/vip/crm", "/tools/fantasy402", "/tools/escalation"):
            assert generate_tools_page(vip_employee, path) == generate_tools_page(vip_employee, path)
