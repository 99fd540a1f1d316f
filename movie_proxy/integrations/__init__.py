"""
External system integrations (TMDb).

Upstream metadata clients should live under this namespace so they remain
decoupled from the app entrypoint (`api/`).
"""
