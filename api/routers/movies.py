"""
Movie endpoints proxied to TMDb.

Each route validates its query/path parameters, forwards to a single upstream
call (or one per id for the batch lookup) and relays the TMDb JSON body as-is.
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from api.deps import TmdbClientDep, raise_upstream_error
from movie_proxy.integrations.tmdb.client import (
    MOVIE_LIST_TYPES,
    TmdbClientError,
    fetch_movie_feed,
    parse_id_list,
    parse_positive_int,
)

router = APIRouter(tags=["movies"])


# --- Pydantic models ---


class ErrorResponse(BaseModel):
    error: str


class MovieBatchResponse(BaseModel):
    results: list[dict[str, Any]]


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _require_movie_id(movie_id: str) -> int:
    try:
        return parse_positive_int(movie_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid movie ID") from None


# --- Endpoints ---


@router.get("/movies/byIds", response_model=MovieBatchResponse, responses=ERROR_RESPONSES)
def get_movies_by_ids(
    client: TmdbClientDep,
    ids: str | None = Query(default=None),
) -> dict:
    """Fetch details for a comma-separated list of movie ids, in input order."""
    if not client.token:
        raise HTTPException(status_code=500, detail="TMDB token not set in environment variables")

    movie_ids = parse_id_list(ids)
    if not movie_ids:
        raise HTTPException(status_code=400, detail="No movie IDs provided")

    try:
        results = client.fetch_movies_by_ids(movie_ids)
    except TmdbClientError as exc:
        raise_upstream_error(exc, "fetching movies by IDs", "Failed to fetch movies by IDs")
    return {"results": results}


@router.get("/movies", responses=ERROR_RESPONSES)
def list_movies(
    client: TmdbClientDep,
    movie_type: str = Query(default="popular", alias="type"),
    genre: str | None = Query(default=None),
    query: str | None = Query(default=None),
    page: str = Query(default="1"),
) -> dict:
    """List movies by text search, genre, or curated list type (in that order of precedence)."""
    if not query and not genre and movie_type not in MOVIE_LIST_TYPES:
        raise HTTPException(status_code=400, detail="Invalid movie type or genre")
    try:
        page_number = parse_positive_int(page)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid page number") from None

    try:
        return fetch_movie_feed(client, movie_type=movie_type, genre=genre, query=query, page=page_number)
    except TmdbClientError as exc:
        raise_upstream_error(exc, "fetching movies", "Failed to fetch movie list from TMDB")


@router.get("/movie/{movie_id}", responses=ERROR_RESPONSES)
def get_movie(client: TmdbClientDep, movie_id: str) -> dict:
    """Get TMDb details for a movie."""
    tmdb_id = _require_movie_id(movie_id)
    try:
        return client.fetch_movie_details(tmdb_id)
    except TmdbClientError as exc:
        raise_upstream_error(exc, "fetching movie details", "Failed to fetch movie details")


@router.get("/movie/{movie_id}/credits", responses=ERROR_RESPONSES)
def get_movie_credits(client: TmdbClientDep, movie_id: str) -> dict:
    """Get cast and crew for a movie."""
    tmdb_id = _require_movie_id(movie_id)
    try:
        return client.fetch_movie_credits(tmdb_id)
    except TmdbClientError as exc:
        raise_upstream_error(exc, "fetching movie credits", "Failed to fetch movie credits")


@router.get("/movie/{movie_id}/similar", responses=ERROR_RESPONSES)
def get_similar_movies(client: TmdbClientDep, movie_id: str) -> dict:
    tmdb_id = _require_movie_id(movie_id)
    try:
        return client.fetch_similar_movies(tmdb_id)
    except TmdbClientError as exc:
        raise_upstream_error(exc, "fetching similar movies", "Failed to fetch similar movies")
