"""
Application services.

Singleton providers live in infrastructure.services.providers and the
handler plugin machinery in infrastructure.services.plugins.
"""
