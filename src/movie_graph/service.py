"""
Caller-facing movie operations.

Each call validates its sort and pagination arguments up front, then opens
one session and one read transaction in which it resolves the caller's
favorites and runs the main query, so both reads see the same snapshot.
"""

from __future__ import annotations

import logging

from neo4j import Driver

from .database import run_read
from .detail import fetch_detail
from .favorites import resolve_favorites
from .listings import ALL_MOVIES, ListingFilter, by_actor, by_director, by_genre, fetch_listing
from .query_config import QueryConfig
from .similarity import fetch_similar
from .sorting import resolve_sort, validate_page

logger = logging.getLogger(__name__)


class MovieService:
    def __init__(self, driver: Driver | None = None, config: QueryConfig | None = None):
        self.driver = driver
        self.config = config or QueryConfig()

    def _page(self, limit: int | None, skip: int) -> tuple[int, int]:
        if limit is None:
            limit = self.config.default_limit
        return validate_page(limit, skip, self.config.max_limit)

    def _read(self, work, *args):
        return run_read(work, *args, driver=self.driver, database=self.config.database)

    def _list(
        self,
        listing_filter: ListingFilter,
        sort: str | None,
        order: str | None,
        limit: int | None,
        skip: int,
        user_id: str | None,
    ) -> list[dict]:
        sort_spec = resolve_sort(sort, order, self.config)
        limit, skip = self._page(limit, skip)

        def work(tx):
            favorites = resolve_favorites(tx, user_id)
            return fetch_listing(tx, listing_filter, sort_spec, limit, skip, favorites)

        return self._read(work)

    def all(self, sort=None, order=None, limit=None, skip=0, user_id=None) -> list[dict]:
        """Page through every movie that has a value for the sort field."""
        return self._list(ALL_MOVIES, sort, order, limit, skip, user_id)

    def by_genre(self, name, sort=None, order=None, limit=None, skip=0, user_id=None) -> list[dict]:
        """Page through the movies in genre ``name``."""
        return self._list(by_genre(name), sort, order, limit, skip, user_id)

    def by_actor(self, person_id, sort=None, order=None, limit=None, skip=0, user_id=None) -> list[dict]:
        """Page through the movies the person acted in."""
        return self._list(by_actor(person_id), sort, order, limit, skip, user_id)

    def by_director(self, person_id, sort=None, order=None, limit=None, skip=0, user_id=None) -> list[dict]:
        """Page through the movies the person directed."""
        return self._list(by_director(person_id), sort, order, limit, skip, user_id)

    def find_by_id(self, movie_id: str, user_id: str | None = None) -> dict:
        """
        Fetch a single movie with actors, directors, genres and ratingCount.

        Raises:
            NotFoundError: if no movie has this tmdbId
        """
        def work(tx):
            favorites = resolve_favorites(tx, user_id)
            return fetch_detail(tx, movie_id, favorites)

        return self._read(work)

    def similar(self, movie_id: str, limit=None, skip=0, user_id=None) -> list[dict]:
        """Rank movies by shared genres, actors and directors, weighted by rating."""
        limit, skip = self._page(limit, skip)

        def work(tx):
            favorites = resolve_favorites(tx, user_id)
            return fetch_similar(tx, movie_id, limit, skip, favorites)

        return self._read(work)
