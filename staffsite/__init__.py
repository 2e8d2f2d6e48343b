"""
Fire22 Staff Site — Personal subdomain pages for Fire22 staff

Packages:
    api/        Page routes, VIP CRM API, contact submissions, templates
    crm/        VIP CRM mock data service and its data sources
    core/       Shared configuration, paths, employee directory, security
"""
