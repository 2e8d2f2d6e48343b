"""VIP CRM dashboard data.

Modules:
    service        — VIPCRMService: insights, activity feed, analytics, workflows
    repositories   — data source interfaces and the random placeholder source
"""
