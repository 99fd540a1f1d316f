"""
Shared movie proxy library code.

This package holds code reused by the FastAPI app in `api/`, chiefly the TMDb
integration client.

App entrypoints (FastAPI routers) should live outside this package and import
from `movie_proxy` rather than the other way around.
"""
