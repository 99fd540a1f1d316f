"""
Dependency injection for the TMDb client and shared error helpers.
"""
from __future__ import annotations

import logging
from typing import Annotated, NoReturn

from fastapi import Depends, HTTPException

from movie_proxy.integrations.tmdb.client import TmdbClient, resolve_token
from movie_proxy.utils.env import load_env

# Load environment variables if running standalone
load_env()

logger = logging.getLogger(__name__)


def get_tmdb_token() -> str | None:
    return resolve_token()


def get_tmdb_client() -> TmdbClient:
    """
    Returns a TMDb client authenticated with `TMDB_TOKEN`.

    The client is built even when the token is missing; upstream calls then fail
    with `TmdbClientError`, which routes report as a 500.
    """
    return TmdbClient(get_tmdb_token())


# Type alias for dependency injection
TmdbClientDep = Annotated[TmdbClient, Depends(get_tmdb_client)]


def raise_upstream_error(exc: Exception, context: str, detail: str) -> NoReturn:
    """
    Log an upstream failure and raise a generic 500 for the client.

    Args:
        exc: The error raised while talking to TMDb
        context: Description of the operation for the log line
        detail: Message returned to the caller

    Raises:
        HTTPException: always 500; upstream status and body are only logged
    """
    logger.error(
        f"Error {context}: %s",
        {
            "message": str(exc),
            "status": getattr(exc, "status_code", None),
            "data": getattr(exc, "body_snippet", None),
        },
    )
    # Don't leak upstream error details to client
    raise HTTPException(status_code=500, detail=detail) from exc
