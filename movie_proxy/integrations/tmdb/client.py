from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, Mapping
from urllib.parse import quote

import requests

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_LANGUAGE = "en-US"

# Curated lists served by `/movie/{type}`.
MOVIE_LIST_TYPES = ("popular", "now_playing", "top_rated", "upcoming")


class TmdbClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


def resolve_token(token: str | None = None) -> str | None:
    """
    Resolve the TMDb bearer token from the argument or `TMDB_TOKEN`.

    Returns None when neither is set so callers can decide how to fail.
    """

    resolved = (token or os.getenv("TMDB_TOKEN") or "").strip()
    return resolved or None


def parse_positive_int(value: str | int | None) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Not a positive integer: {value!r}")
    if isinstance(value, int):
        parsed = value
    else:
        raw = str(value if value is not None else "").strip()
        if not raw.isdigit():
            raise ValueError(f"Not a positive integer: {value!r}")
        parsed = int(raw)
    if parsed < 1:
        raise ValueError(f"Not a positive integer: {value!r}")
    return parsed


def parse_id_list(raw: str | None) -> list[str]:
    # "1, 2,,3" -> ["1", "2", "3"]
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


class TmdbClient:
    """
    Minimal TMDb v3 client authenticated with a bearer token.

    Each call issues exactly one GET and never retries; any failure surfaces
    as `TmdbClientError`.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        session: requests.Session | None = None,
        base_url: str = TMDB_API_BASE_URL,
        language: str = DEFAULT_LANGUAGE,
        timeout_seconds: float = 20.0,
    ) -> None:
        self.token = resolve_token(token)
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.timeout_seconds = timeout_seconds

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "accept": "application/json",
        }

    def get_json(self, path: str, *, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        if not self.token:
            raise TmdbClientError("TMDB_TOKEN is not set.")

        url = f"{self.base_url}/{path.lstrip('/')}"
        query: dict[str, Any] = {"language": self.language}
        if params:
            query.update(params)

        try:
            resp = self.session.get(url, params=query, headers=self._headers(), timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise TmdbClientError(f"TMDb request failed: {exc}") from exc

        if resp.status_code != 200:
            raise TmdbClientError(
                f"TMDb request failed with HTTP {resp.status_code}.",
                status_code=resp.status_code,
                body_snippet=(resp.text or "")[:400],
            )

        try:
            payload = resp.json()
        except ValueError as exc:
            raise TmdbClientError(
                "TMDb returned non-JSON response.",
                status_code=resp.status_code,
                body_snippet=(resp.text or "")[:400],
            ) from exc

        if not isinstance(payload, dict):
            raise TmdbClientError("TMDb returned unexpected JSON shape (not an object).")
        return payload

    # --- Movie lists ---

    def list_movies(self, movie_type: str, *, page: int = 1) -> dict[str, Any]:
        """Fetch one page of a curated list (`popular`, `now_playing`, ...)."""
        if movie_type not in MOVIE_LIST_TYPES:
            raise ValueError(f"Unknown movie list type: {movie_type!r}")
        return self.get_json(f"/movie/{movie_type}", params={"page": page})

    def search_movies(self, query: str, *, page: int = 1) -> dict[str, Any]:
        return self.get_json("/search/movie", params={"query": query, "page": page})

    def discover_movies(self, genre: str, *, page: int = 1) -> dict[str, Any]:
        return self.get_json("/discover/movie", params={"with_genres": genre, "page": page})

    # --- Single movie ---

    def fetch_movie_details(self, movie_id: int | str) -> dict[str, Any]:
        return self.get_json(f"/movie/{_path_segment(movie_id)}")

    def fetch_movie_credits(self, movie_id: int | str) -> dict[str, Any]:
        return self.get_json(f"/movie/{_path_segment(movie_id)}/credits")

    def fetch_similar_movies(self, movie_id: int | str) -> dict[str, Any]:
        return self.get_json(f"/movie/{_path_segment(movie_id)}/similar")

    def fetch_movies_by_ids(self, movie_ids: Iterable[int | str], *, max_workers: int = 8) -> list[dict[str, Any]]:
        """
        Fetch details for several movies concurrently.

        Results keep the order of `movie_ids`. The batch is all-or-nothing: if any
        lookup fails, the first failing id's error is raised and no results are returned.
        """

        ids = list(movie_ids)
        if not ids:
            return []

        with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(ids)))) as pool:
            futures = [pool.submit(self.fetch_movie_details, movie_id) for movie_id in ids]
            return [fut.result() for fut in futures]


def _path_segment(value: int | str) -> str:
    return quote(str(value).strip(), safe="")


def fetch_movie_feed(
    client: TmdbClient,
    *,
    movie_type: str = "popular",
    genre: str | None = None,
    query: str | None = None,
    page: int = 1,
) -> dict[str, Any]:
    """
    Resolve a movie listing request to one upstream call.

    A text `query` wins over `genre`, which wins over the curated `movie_type` list.
    """

    if query:
        return client.search_movies(query, page=page)
    if genre:
        return client.discover_movies(genre, page=page)
    return client.list_movies(movie_type, page=page)
