"""HTTP layer for the staff site.

Modules:
    routes          — page routes (profile, contact, schedule, tools) and employee JSON API
    routes_vip      — VIP CRM JSON endpoints under /api/vip/
    routes_contact  — contact form submissions
    pages           — page builders and tier rules
    components      — shared header/footer/head/button fragments
    templates       — page templates and base CSS
    templates_tools — tools hub and dashboard templates
    content         — static page copy
"""
