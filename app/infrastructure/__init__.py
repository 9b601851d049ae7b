"""Infrastructure modules for the notifier application.

Centralized infrastructure components:
- configuration: Settings management (Settings, NotificationSettings)
- logging: Structured logging setup, context binding and processors
- notifications: Urgency-routed notification dispatcher and handlers
- hookspecs: pluggy hook specifications for handler plugins
- services: Singleton providers and the handler plugin manager
"""
