import logging

from .errors import NotFoundError
from .projection import to_native

logger = logging.getLogger(__name__)

DETAIL_QUERY = """
MATCH (m:Movie {tmdbId: $id})
RETURN m {
    .*,
    actors: [(m)<-[:ACTED_IN]-(actor:Person) | actor.name],
    directors: [(m)<-[:DIRECTED]-(director:Person) | director.name],
    genres: [(m)-[:IN_GENRE]->(genre:Genre) | genre.name],
    ratingCount: COUNT { (m)<-[:RATED]-(:User) }
} AS movie
"""

RELATION_LISTS = ("actors", "directors", "genres")


def _distinct(names) -> list:
    # Parallel edges between the same pair of nodes yield repeated names
    return list(dict.fromkeys(name for name in names or [] if name is not None))


def fetch_detail(tx, movie_id: str, favorites: frozenset[str]) -> dict:
    """
    Load one movie with its actors, directors, genres and rating count.

    Raises:
        NotFoundError: if no movie has the given tmdbId
    """
    records = list(tx.run(DETAIL_QUERY, {"id": movie_id}))
    if not records:
        raise NotFoundError(movie_id)
    if len(records) > 1:
        logger.warning(f"{len(records)} movies share tmdbId {movie_id}, using the first")

    movie = to_native(records[0]["movie"])
    for key in RELATION_LISTS:
        movie[key] = _distinct(movie.get(key))
    movie["ratingCount"] = movie.get("ratingCount") or 0
    movie["favorite"] = movie_id in favorites
    return movie
