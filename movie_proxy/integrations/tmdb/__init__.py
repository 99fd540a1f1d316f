"""
TMDb integration clients.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from movie_proxy.integrations.tmdb.client import (
        MOVIE_LIST_TYPES,
        TmdbClient,
        TmdbClientError,
        fetch_movie_feed,
        parse_id_list,
        parse_positive_int,
        resolve_token,
    )

__all__ = [
    "MOVIE_LIST_TYPES",
    "TmdbClient",
    "TmdbClientError",
    "fetch_movie_feed",
    "parse_id_list",
    "parse_positive_int",
    "resolve_token",
]


def __getattr__(name: str):
    if name in __all__:
        from movie_proxy.integrations.tmdb import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
