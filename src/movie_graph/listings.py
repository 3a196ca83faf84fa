"""
Paginated movie listings.

All four listings (every movie, by genre, by actor, by director) share one
query shape and differ only in the MATCH pattern that decides which movies
are eligible. That pattern is a ``ListingFilter``; the sort clause comes
from a validated ``SortSpec`` and skip/limit are bound as parameters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .projection import to_native
from .sorting import SortSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingFilter:
    """Eligibility pattern for a listing; must bind the movie as ``m``."""

    name: str
    pattern: str
    params: dict[str, Any] = field(default_factory=dict)


ALL_MOVIES = ListingFilter("all", "MATCH (m:Movie)")


def by_genre(name: str) -> ListingFilter:
    return ListingFilter(
        "genre",
        "MATCH (:Genre {name: $name})<-[:IN_GENRE]-(m:Movie)",
        {"name": name},
    )


def by_actor(person_id: str) -> ListingFilter:
    return ListingFilter(
        "actor",
        "MATCH (:Person {tmdbId: $personId})-[:ACTED_IN]->(m:Movie)",
        {"personId": person_id},
    )


def by_director(person_id: str) -> ListingFilter:
    return ListingFilter(
        "director",
        "MATCH (:Person {tmdbId: $personId})-[:DIRECTED]->(m:Movie)",
        {"personId": person_id},
    )


def compose_listing(listing_filter: ListingFilter, sort: SortSpec) -> str:
    """Build the Cypher text for one listing page."""
    # Movies without the sort attribute have no defined position, so they are left out
    return "\n".join([
        listing_filter.pattern,
        f"WHERE m.`{sort.field}` IS NOT NULL",
        "WITH m",
        sort.order_by("m"),
        "SKIP $skip",
        "LIMIT $limit",
        "RETURN m {.*} AS movie",
    ])


def fetch_listing(
    tx,
    listing_filter: ListingFilter,
    sort: SortSpec,
    limit: int,
    skip: int,
    favorites: frozenset[str],
) -> list[dict]:
    """
    Run a listing query and return projected movies with a ``favorite`` flag.

    ``limit`` and ``skip`` must already be validated ints (see
    ``sorting.validate_page``) so they are sent as Cypher Integers.
    """
    query = compose_listing(listing_filter, sort)
    params = {**listing_filter.params, "skip": skip, "limit": limit}
    logger.debug(f"Listing '{listing_filter.name}' sort={sort.field} {sort.order} skip={skip} limit={limit}")

    movies = []
    for record in tx.run(query, params):
        movie = to_native(record["movie"])
        movie["favorite"] = movie.get("tmdbId") in favorites
        movies.append(movie)
    return movies
