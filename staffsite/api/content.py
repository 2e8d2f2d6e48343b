"""
Static copy for the staff pages: profile sections, contact channels,
support options and the tools dashboards. Kept apart from the templates
so the markup stays readable and the page builders can pick sets by tier.
"""

# ── Profile ──────────────────────────────────────────────────────────────

VIP_CREDENTIALS = [
    "MBA in Business Administration",
    "Certified VIP Relationship Manager",
    "15+ Years Premium Client Experience",
    "Sports Betting Industry Expert",
]

STANDARD_CREDENTIALS = [
    "MBA in Business Administration",
    "10+ Years Client Management",
    "Sports Industry Specialist",
]

VIP_HERO_STATS = [
    {"value": "15+", "label": "Years Experience"},
    {"value": "$50M+", "label": "Client Assets Managed"},
    {"value": "500+", "label": "VIP Clients Served"},
    {"value": "96%", "label": "Client Retention"},
]

VIP_ACHIEVEMENTS = [
    {"icon": "🏆", "title": "VIP Client Excellence Award 2024",
     "description": "Recognized for outstanding performance in premium client management and retention",
     "year": "2024"},
    {"icon": "💰", "title": "$2.8M Monthly VIP Revenue",
     "description": "Generated through strategic client relationships and premium service offerings",
     "year": "2024"},
    {"icon": "⭐", "title": "96.4% Client Retention Rate",
     "description": "Industry-leading retention through personalized VIP service excellence",
     "year": "2024"},
    {"icon": "🚀", "title": "24 New VIP Clients",
     "description": "Onboarded high-value clients this month through strategic partnerships",
     "year": "2024"},
]

STANDARD_ACHIEVEMENTS = [
    {"icon": "🏅", "title": "Team Excellence Recognition",
     "description": "Recognized by department leadership for consistent, high-quality delivery",
     "year": "2024"},
    {"icon": "🤝", "title": "Cross-Team Collaboration",
     "description": "Partnered across departments to ship shared initiatives on schedule",
     "year": "2024"},
    {"icon": "📈", "title": "Process Improvement",
     "description": "Streamlined day-to-day workflows and reduced turnaround times",
     "year": "2023"},
]

VIP_TIMELINE = [
    {"year": "2024", "title": "Head of VIP Management", "company": "Fire22",
     "description": "Leading premium client relationship management and strategic VIP operations",
     "achievements": ["Generated $2.8M monthly VIP revenue", "Achieved 96.4% client retention",
                      "Onboarded 24 new VIP clients"]},
    {"year": "2022", "title": "Senior VIP Relationship Manager", "company": "Premium Sports Network",
     "description": "Managed high-value client portfolios and implemented retention strategies",
     "achievements": ["Increased client lifetime value by 150%", "Developed VIP concierge services",
                      "Launched premium betting programs"]},
    {"year": "2019", "title": "VIP Client Specialist", "company": "Elite Betting Group",
     "description": "Specialized in premium client acquisition and relationship management",
     "achievements": ["Built $50M+ client asset portfolio", "Achieved 95% client satisfaction",
                      "Implemented personalized betting strategies"]},
    {"year": "2016", "title": "Client Relationship Manager", "company": "Sports Investment Partners",
     "description": "Managed client relationships and developed betting optimization strategies",
     "achievements": ["Managed 200+ high-value clients", "Developed risk management protocols",
                      "Increased client retention by 40%"]},
]

VIP_SERVICES = [
    {"icon": "👑", "title": "High-Roller Client Management",
     "description": "Specialized support for premium clients with dedicated concierge services, "
                    "priority access, and personalized betting strategies.",
     "features": ["Dedicated Concierge", "Priority Access", "Custom Strategies"]},
    {"icon": "🚨", "title": "VIP Escalation Handling",
     "description": "Priority incident resolution and emergency support for high-value client "
                    "matters requiring immediate attention.",
     "features": ["24/7 Support", "Priority Resolution", "Emergency Protocols"]},
    {"icon": "📊", "title": "Performance Analytics",
     "description": "Advanced reporting and insights for client performance, betting patterns, "
                    "and strategic optimization recommendations.",
     "features": ["Real-time Analytics", "Performance Insights", "Strategic Recommendations"]},
    {"icon": "🤝", "title": "Client Relationship Management",
     "description": "Client onboarding, retention strategies, and relationship development.",
     "features": ["Client Onboarding", "Retention Strategies", "Relationship Development"]},
    {"icon": "💼", "title": "Business Development",
     "description": "Strategic partnership development and high-value client acquisition "
                    "through exclusive networks.",
     "features": ["Partnership Development", "Client Acquisition", "Network Expansion"]},
    {"icon": "🎯", "title": "Portfolio Optimization",
     "description": "Portfolio analysis and betting strategy optimization for returns and risk "
                    "management.",
     "features": ["Portfolio Analysis", "Risk Management", "Return Optimization"]},
]

VIP_METRICS = [
    {"label": "Active VIP Clients", "value": "1,247", "change": "+12.3%", "trend": "up", "icon": "👥"},
    {"label": "Monthly VIP Revenue", "value": "$2.8M", "change": "+18.7%", "trend": "up", "icon": "💰"},
    {"label": "Client Retention Rate", "value": "96.4%", "change": "+2.1%", "trend": "up", "icon": "📈"},
    {"label": "New VIPs This Month", "value": "24", "change": "+45.2%", "trend": "up", "icon": "🚀"},
    {"label": "Average Response Time", "value": "< 3 min", "change": "-45s", "trend": "down", "icon": "⚡"},
    {"label": "Client Satisfaction", "value": "4.9/5", "change": "+0.2", "trend": "up", "icon": "⭐"},
]

SUCCESS_STORIES = [
    {"client": "Diamond Club Member", "achievement": "$500K Portfolio Growth", "timeframe": "6 months",
     "description": "Portfolio optimization through personalized strategies and market insights."},
    {"client": "Premium Client", "achievement": "Consistent 15% Monthly Returns", "timeframe": "12 months",
     "description": "Steady monthly returns through risk management and diversified strategies."},
    {"client": "High-Net-Worth Individual", "achievement": "Emergency Crisis Resolution",
     "timeframe": "24 hours",
     "description": "Critical account issues resolved and full access restored within a day of escalation."},
]

TEAM_SUCCESS_STORIES = [
    {"client": "Internal Stakeholders", "achievement": "On-Time Delivery", "timeframe": "Quarterly",
     "description": "Department commitments delivered on schedule with clear status reporting."},
    {"client": "Partner Teams", "achievement": "Faster Turnaround", "timeframe": "6 months",
     "description": "Request handling times reduced by tightening hand-offs between teams."},
]

TESTIMONIALS = [
    {"client": "Diamond Club Member", "rating": 5, "avatar": "👑",
     "text": "Strategic insights and a personal approach that delivered exceptional returns "
             "while managing risk.",
     "result": "$500K Portfolio Growth in 6 months"},
    {"client": "Premium Client", "rating": 5, "avatar": "💎",
     "text": "Outstanding VIP service and expertise. Consistent monthly returns through careful "
             "risk management.",
     "result": "Consistent 15% Monthly Returns for 12 months"},
    {"client": "High-Net-Worth Individual", "rating": 5, "avatar": "🏆",
     "text": "When I needed emergency support, help was there within minutes.",
     "result": "24-Hour Crisis Resolution"},
    {"client": "VIP Portfolio Manager", "rating": 5, "avatar": "📈",
     "text": "Data-driven strategy combined with personal attention. Invaluable.",
     "result": "200% ROI Improvement"},
]

TEAM_TESTIMONIALS = [
    {"client": "Department Lead", "rating": 5, "avatar": "🤝",
     "text": "Reliable, thorough and always ready to help the wider team.",
     "result": "Consistently exceeds expectations"},
    {"client": "Colleague", "rating": 5, "avatar": "⭐",
     "text": "Clear communication and great follow-through on every request.",
     "result": "Trusted team partner"},
]

RECOGNITIONS = [
    {"title": "Top 10 VIP Relationship Managers", "issuer": "Sports Betting Excellence Awards",
     "year": "2024", "icon": "🏆",
     "description": "Recognized for exceptional client service and relationship management"},
    {"title": "Client Satisfaction Excellence", "issuer": "Premium Client Services Association",
     "year": "2023", "icon": "⭐",
     "description": "Awarded for maintaining 98%+ client satisfaction scores"},
    {"title": "Innovation in VIP Services", "issuer": "Financial Services Innovation Forum",
     "year": "2023", "icon": "🚀",
     "description": "Recognized for pioneering personalized VIP management solutions"},
    {"title": "Risk Management Leadership", "issuer": "Sports Investment Risk Council",
     "year": "2022", "icon": "🛡️",
     "description": "Acknowledged for advanced risk management strategies"},
    {"title": "Mentorship Excellence", "issuer": "VIP Services Professional Network",
     "year": "2022", "icon": "🎓",
     "description": "Recognized for mentoring emerging VIP relationship professionals"},
    {"title": "Client Retention Champion", "issuer": "Client Relationship Management Institute",
     "year": "2021", "icon": "💎",
     "description": "Awarded for achieving industry-leading client retention rates"},
]

TEAM_RECOGNITIONS = [
    {"title": "Fire22 Team Award", "issuer": "Fire22 Leadership", "year": "2024", "icon": "🔥",
     "description": "Recognized for contributions to department goals"},
]

CERTIFICATIONS = [
    {"title": "Certified VIP Relationship Manager", "issuer": "International Association of VIP Services",
     "year": "2023", "status": "Active"},
    {"title": "MBA Business Administration", "issuer": "Harvard Business School",
     "year": "2018", "status": "Completed"},
    {"title": "Sports Betting Industry Certification", "issuer": "Professional Sports Bettors Association",
     "year": "2022", "status": "Active"},
    {"title": "Financial Risk Management", "issuer": "CFA Institute", "year": "2021", "status": "Active"},
]

TEAM_CERTIFICATIONS = [
    {"title": "Responsible Gaming Training", "issuer": "Fire22 Compliance", "year": "2024",
     "status": "Active"},
    {"title": "Data Protection Essentials", "issuer": "Fire22 Security", "year": "2024",
     "status": "Active"},
]

# ── Contact ──────────────────────────────────────────────────────────────

CONTACT_HERO_STATS = [
    {"value": "24/7", "label": "Support"},
    {"value": "< 2hrs", "label": "Response"},
    {"value": "99.9%", "label": "API Uptime"},
]

SUPPORT_CHANNELS = [
    {"icon": "💬", "title": "Start Live Chat", "target": "live-support",
     "description": "Instant help from the support team during business hours",
     "features": ["Average wait < 2 min", "Screen sharing", "Chat transcripts"]},
    {"icon": "🔌", "title": "API Integration", "target": "api-integration",
     "description": "Documentation, testing tools and engineering support for integrations",
     "features": ["REST & webhooks", "Sandbox access", "SDKs"]},
    {"icon": "📝", "title": "Contact Forms", "target": "contact-forms",
     "description": "Structured requests routed to the right team automatically",
     "features": ["Priority routing", "Draft saving", "Email confirmation"]},
]

SUPPORT_OPTIONS = [
    {"icon": "📚", "title": "Knowledge Base", "description": "Guides and answers to common questions"},
    {"icon": "🎓", "title": "Training Sessions", "description": "Onboarding and product walkthroughs"},
    {"icon": "👥", "title": "Community Forum", "description": "Discuss integrations with other partners"},
]

API_RESOURCES = [
    {"icon": "📖", "title": "API Documentation",
     "description": "Endpoint reference, authentication and rate limits",
     "href": "/api/tools", "label": "View Docs"},
    {"icon": "📡", "title": "API Monitoring",
     "description": "Live status and latency for production endpoints",
     "href": "/api/health", "label": "Check Status"},
    {"icon": "🧪", "title": "API Testing Tools",
     "description": "Sandbox requests and a Postman collection",
     "href": "#contact-forms", "label": "Request Access"},
    {"icon": "🔔", "title": "Webhook Management",
     "description": "Register endpoints and replay failed deliveries",
     "href": "#contact-forms", "label": "Manage Webhooks"},
    {"icon": "📦", "title": "SDK & Libraries",
     "description": "Client libraries for Python, JavaScript and Go",
     "href": "#contact-forms", "label": "Get SDKs"},
]

LIVE_SUPPORT = [
    {"icon": "💬", "title": "Live Chat Support", "status": "online",
     "description": "Chat with the support team in real time", "wait": "< 2 min"},
    {"icon": "🎥", "title": "Video Consultation", "status": "online",
     "description": "Face-to-face walkthroughs and screen sharing", "wait": "Scheduled"},
    {"icon": "📞", "title": "Phone Support", "status": "online",
     "description": "Speak directly with a specialist", "wait": "< 5 min"},
    {"icon": "🖥️", "title": "Remote Assistance", "status": "busy",
     "description": "Secure remote session for hands-on troubleshooting", "wait": "< 15 min"},
]

SAMPLE_TICKETS = [
    {"id": "TKT-2024-001", "subject": "API rate limit increase request", "status": "open",
     "priority": "high", "updated": "2 hours ago"},
    {"id": "TKT-2024-002", "subject": "Webhook delivery delays", "status": "in-progress",
     "priority": "medium", "updated": "1 day ago"},
    {"id": "TKT-2024-003", "subject": "Dashboard access for new team member", "status": "resolved",
     "priority": "low", "updated": "3 days ago"},
]

SLA_LEVELS = [
    {"name": "Critical", "response": "< 30 min", "resolution": "< 4 hrs"},
    {"name": "High", "response": "< 2 hrs", "resolution": "< 24 hrs"},
    {"name": "Medium", "response": "< 4 hrs", "resolution": "< 3 days"},
    {"name": "Low", "response": "< 24 hrs", "resolution": "< 7 days"},
]

RESPONSE_GUARANTEES = [
    {"name": "Standard", "response": "< 4 hours", "description": "General inquiries and non-urgent matters",
     "css": ""},
    {"name": "Priority", "response": "< 2 hours", "description": "API issues and workflow disruptions",
     "css": "priority"},
    {"name": "VIP", "response": "< 30 min", "description": "Critical business and system issues",
     "css": "vip"},
]

# ── Schedule ─────────────────────────────────────────────────────────────

MEETING_TYPES = [
    {"id": "quick", "icon": "⚡", "name": "Quick Sync", "duration": 15,
     "description": "Short check-in or question", "min_tier": 1},
    {"id": "standard", "icon": "📋", "name": "Standard Meeting", "duration": 30,
     "description": "Project discussion or review", "min_tier": 1},
    {"id": "strategy", "icon": "🎯", "name": "Strategy Session", "duration": 60,
     "description": "Planning and deep-dive working session", "min_tier": 3},
    {"id": "vip", "icon": "👑", "name": "VIP Consultation", "duration": 45,
     "description": "Priority consultation for VIP client matters", "min_tier": 5},
]

# ── Tools dashboards ─────────────────────────────────────────────────────

VIP_FEATURES = [
    {"icon": "📱", "name": "Telegram VIP Channel", "url": "/tools/vip/telegram",
     "description": "Secure Telegram integration for VIP client communications"},
    {"icon": "🤖", "name": "AI-Powered CRM", "url": "/tools/vip/crm",
     "description": "Intelligent client relationship management with predictive analytics"},
    {"icon": "💎", "name": "VIP Portfolio Manager", "url": "/tools/vip/portfolio",
     "description": "Portfolio tracking and risk management for high-value clients"},
    {"icon": "📊", "name": "Real-Time Analytics", "url": "/tools/vip/analytics",
     "description": "Live performance metrics and client engagement tracking"},
    {"icon": "🚨", "name": "Emergency Response", "url": "/tools/escalation",
     "description": "24/7 emergency escalation protocols and crisis management"},
    {"icon": "🔐", "name": "Security Center", "url": "/tools/vip/security",
     "description": "Enhanced security protocols and client data protection"},
    {"icon": "🎰", "name": "Exclusive Gaming Access", "url": "/tools/vip/gaming",
     "description": "VIP-only gaming experiences and exclusive betting opportunities"},
    {"icon": "🎲", "name": "Fantasy402 Platform", "url": "/tools/fantasy402",
     "description": "Sportsbook operations, markets and live betting"},
]

VIP_HUB_STATS = [
    {"label": "VIP Clients", "value": "1,247", "change": "+12.3%", "trend": "up"},
    {"label": "Monthly Revenue", "value": "$2.8M", "change": "+18.7%", "trend": "up"},
    {"label": "Retention", "value": "96.4%", "change": "+2.1%", "trend": "up"},
    {"label": "Avg Response", "value": "< 3 min", "change": "-45s", "trend": "down"},
]

ESCALATION_BUTTONS = [
    {"href": "/tools/escalation", "label": "Code Red Emergency", "icon": "🚨", "class_name": "btn-danger",
     "message": "🚨 Code Red Emergency\n✅ All emergency protocols activated\n📞 Emergency hotline "
                "prioritized\n🛡️ VIP protection measures engaged"},
    {"href": "/tools/escalation", "label": "VIP Client Emergency", "icon": "📞", "class_name": "btn-s",
     "message": "📞 VIP Client Emergency\n✅ High-priority client support\n👑 VIP escalation "
                "procedures\n💎 Premium client protection"},
    {"href": "/tools/escalation", "label": "Technical Emergency", "icon": "🔧", "class_name": "btn-s",
     "message": "🔧 Technical Emergency\n✅ System diagnostics running\n🛠️ Technical support team "
                "alerted\n⚡ Backup systems ready"},
    {"href": "/tools/analytics", "label": "Analytics & Insights", "icon": "📊", "class_name": "btn-s",
     "message": "📊 Escalation Analytics\n✅ Incident pattern analysis\n📈 Response time "
                "optimization\n💡 Predictive incident prevention"},
]

ESCALATION_LEVELS = [
    {"level": "P1", "name": "Critical", "response": "Immediate", "owner": "Escalation lead + VIP manager"},
    {"level": "P2", "name": "High", "response": "< 30 min", "owner": "VIP manager"},
    {"level": "P3", "name": "Standard", "response": "< 4 hrs", "owner": "Support team"},
]

# Generic dashboards: stats strip, feature panels, a feed table.
DASHBOARDS = {
    "fantasy402": {
        "icon": "🎰",
        "title": "Fantasy402 Sportsbook Platform",
        "intro": "Live market operations, arbitrage monitoring and VIP betting activity.",
        "stats": [
            {"label": "Active Markets", "value": "1,247", "change": "+23", "trend": "up"},
            {"label": "Live Bets Today", "value": "15,834", "change": "+12.3%", "trend": "up"},
            {"label": "Revenue Today", "value": "$247K", "change": "+18.7%", "trend": "up"},
            {"label": "Win Rate", "value": "54.2%", "change": "+2.1%", "trend": "up"},
        ],
        "panels": [
            {"icon": "🏈", "title": "NFL", "items": ["127 markets", "$2.1M volume", "+15% trend"]},
            {"icon": "🏀", "title": "NBA", "items": ["89 markets", "$1.8M volume", "+22% trend"]},
            {"icon": "⚾", "title": "MLB", "items": ["156 markets", "$950K volume", "+8% trend"]},
            {"icon": "🏒", "title": "NHL", "items": ["67 markets", "$650K volume", "+12% trend"]},
        ],
        "feed_title": "💎 Arbitrage Opportunities",
        "feed_columns": ["Game", "Profit", "Confidence"],
        "feed": [
            ["Chiefs vs Eagles", "$1,247", "98%"],
            ["Lakers vs Celtics", "$892", "95%"],
            ["Yankees vs Red Sox", "$654", "92%"],
        ],
    },
    "vip_telegram": {
        "icon": "📱",
        "title": "VIP Telegram Integration Hub",
        "intro": "Secure messaging with VIP clients, automated replies and escalation hooks.",
        "stats": [
            {"label": "Active Chats", "value": "47", "change": "+5", "trend": "up"},
            {"label": "Messages Today", "value": "1,284", "change": "+9.4%", "trend": "up"},
            {"label": "Avg Reply", "value": "1.8 min", "change": "-22s", "trend": "down"},
            {"label": "Bot Uptime", "value": "99.98%", "change": "+0.01%", "trend": "up"},
        ],
        "panels": [
            {"icon": "🔒", "title": "End-to-End Encryption",
             "items": ["Secret chats for VIP matters", "Device verification"]},
            {"icon": "🤖", "title": "AI-Powered Responses",
             "items": ["Suggested replies", "After-hours triage"]},
            {"icon": "📊", "title": "Analytics Integration",
             "items": ["Engagement tracking", "Sentiment trends"]},
            {"icon": "🚨", "title": "Crisis Management",
             "items": ["One-tap escalation", "On-call routing"]},
        ],
        "feed_title": "📱 Recent Telegram Activity",
        "feed_columns": ["Client", "Event", "When"],
        "feed": [
            ["Diamond Client #247", "Requested limit increase", "2 min ago"],
            ["Premium Client #189", "Confirmed event booking", "11 min ago"],
            ["VIP Client #456", "Asked about withdrawal status", "26 min ago"],
        ],
    },
    "vip_portfolio": {
        "icon": "💎",
        "title": "VIP Portfolio Manager",
        "intro": "Portfolio tracking, exposure and risk management for high-value clients.",
        "stats": [
            {"label": "Assets Under Management", "value": "$52.4M", "change": "+6.2%", "trend": "up"},
            {"label": "Active Portfolios", "value": "312", "change": "+14", "trend": "up"},
            {"label": "Avg Monthly Return", "value": "11.8%", "change": "+0.9%", "trend": "up"},
            {"label": "Risk Score", "value": "Low", "change": "stable", "trend": "up"},
        ],
        "panels": [
            {"icon": "📈", "title": "Performance", "items": ["Daily P&L", "Benchmark comparison"]},
            {"icon": "🛡️", "title": "Risk Controls", "items": ["Exposure limits", "Stop-loss alerts"]},
            {"icon": "🎯", "title": "Allocation", "items": ["By sport", "By market type"]},
            {"icon": "📑", "title": "Reporting", "items": ["Monthly statements", "Client-ready exports"]},
        ],
        "feed_title": "🏆 Top Performing VIP Portfolios",
        "feed_columns": ["Client", "Value", "Return"],
        "feed": [
            ["High Roller #123", "$9.2M", "+27%"],
            ["Diamond Client #247", "$8.9M", "+23%"],
            ["Whale Client #78", "$7.8M", "+15%"],
        ],
    },
    "vip_analytics": {
        "icon": "📊",
        "title": "Real-Time VIP Analytics",
        "intro": "Live engagement, revenue and retention metrics across the VIP book.",
        "stats": [
            {"label": "Sessions Now", "value": "184", "change": "+12", "trend": "up"},
            {"label": "Revenue Today", "value": "$412K", "change": "+8.1%", "trend": "up"},
            {"label": "Conversion", "value": "21.4%", "change": "+1.2%", "trend": "up"},
            {"label": "Churn Risk", "value": "3.1%", "change": "-0.4%", "trend": "down"},
        ],
        "panels": [
            {"icon": "👥", "title": "Engagement", "items": ["Active clients by hour", "Session depth"]},
            {"icon": "💰", "title": "Revenue", "items": ["By tier", "By sport"]},
            {"icon": "🎯", "title": "Retention", "items": ["Cohort curves", "Risk signals"]},
            {"icon": "⚡", "title": "Operations", "items": ["Response times", "Queue depth"]},
        ],
        "feed_title": "🔴 Live Data Stream",
        "feed_columns": ["Metric", "Value", "Change"],
        "feed": [
            ["Deposits (1h)", "$86K", "+4.2%"],
            ["Bets placed (1h)", "1,932", "+6.8%"],
            ["New VIP sign-ups", "3", "+1"],
        ],
    },
    "vip_security": {
        "icon": "🔐",
        "title": "VIP Security Center",
        "intro": "Account protection, access auditing and fraud monitoring for VIP clients.",
        "stats": [
            {"label": "Threats Blocked", "value": "1,024", "change": "+31", "trend": "up"},
            {"label": "2FA Coverage", "value": "98.7%", "change": "+0.6%", "trend": "up"},
            {"label": "Open Alerts", "value": "2", "change": "-3", "trend": "down"},
            {"label": "Last Audit", "value": "Passed", "change": "this week", "trend": "up"},
        ],
        "panels": [
            {"icon": "🛡️", "title": "Access Control", "items": ["Role-based permissions", "Session limits"]},
            {"icon": "🔍", "title": "Fraud Detection", "items": ["Velocity checks", "Device fingerprinting"]},
            {"icon": "🔑", "title": "Authentication", "items": ["Hardware keys", "2FA enforcement"]},
            {"icon": "📋", "title": "Compliance", "items": ["KYC refresh", "Audit exports"]},
        ],
        "feed_title": "📋 Security Audit Log",
        "feed_columns": ["Event", "Account", "When"],
        "feed": [
            ["New device verified", "Diamond Client #247", "8 min ago"],
            ["Login blocked (geo)", "VIP Client #456", "42 min ago"],
            ["Withdrawal limit reviewed", "High Roller #123", "2 hr ago"],
        ],
    },
    "vip_gaming": {
        "icon": "🎰",
        "title": "Exclusive VIP Gaming Access",
        "intro": "Private tables, tournaments and high-limit markets for VIP clients.",
        "stats": [
            {"label": "Private Tables", "value": "12", "change": "+2", "trend": "up"},
            {"label": "Players Online", "value": "86", "change": "+9", "trend": "up"},
            {"label": "High-Limit Volume", "value": "$1.3M", "change": "+14.5%", "trend": "up"},
            {"label": "Tournaments", "value": "3", "change": "this week", "trend": "up"},
        ],
        "panels": [
            {"icon": "🃏", "title": "Private Tables", "items": ["Invite-only", "Custom limits"]},
            {"icon": "🏆", "title": "Tournaments", "items": ["Weekly VIP series", "Guaranteed pools"]},
            {"icon": "🎁", "title": "Rewards", "items": ["Cashback tiers", "Event invitations"]},
            {"icon": "📈", "title": "Market Access", "items": ["Early lines", "Raised limits"]},
        ],
        "feed_title": "🎰 Live Gaming Activity",
        "feed_columns": ["Client", "Game", "Stake"],
        "feed": [
            ["Premium Client #189", "High-Limit Blackjack", "$25K"],
            ["Diamond Client #247", "NFL Futures", "$50K"],
            ["VIP Client #456", "VIP Poker Series", "$10K"],
        ],
    },
    "analytics": {
        "icon": "📊",
        "title": "Enterprise Analytics Dashboard",
        "intro": "Client intelligence, revenue trends and platform performance.",
        "stats": [
            {"label": "Monthly Revenue", "value": "$8.4M", "change": "+11.2%", "trend": "up"},
            {"label": "Active Clients", "value": "24,310", "change": "+4.8%", "trend": "up"},
            {"label": "Avg Bet Size", "value": "$182", "change": "+3.5%", "trend": "up"},
            {"label": "Support Tickets", "value": "312", "change": "-7.9%", "trend": "down"},
        ],
        "panels": [
            {"icon": "🎯", "title": "Client Segments", "items": ["VIP 4%", "Regular 61%", "Casual 35%"]},
            {"icon": "🧠", "title": "Insights", "items": ["Weekend volume up", "NBA engagement rising"]},
            {"icon": "💰", "title": "Revenue Intelligence", "items": ["12-month trend", "Margin by sport"]},
            {"icon": "🔬", "title": "Predictive Analytics", "items": ["Churn forecast", "Demand forecast"]},
        ],
        "feed_title": "🎰 Fantasy402 Performance",
        "feed_columns": ["Sport", "Handle", "Hold"],
        "feed": [
            ["NFL", "$3.2M", "6.1%"],
            ["NBA", "$2.4M", "5.4%"],
            ["MLB", "$1.1M", "4.9%"],
        ],
    },
}
