"""
Content-based "similar movies" ranking.

Two movies are connected when they share a genre, an actor or a director.
The relation kind is not distinguished and every shared path counts, so a
candidate sharing two actors and one genre with the reference has
``inCommon == 3``. The score is ``imdbRating * inCommon``; candidates
without a rating are left out rather than scored as zero.

Counting, scoring, ranking and paging all happen in Cypher so that only
one page of movies crosses the wire.
"""

import logging

from .projection import to_native

logger = logging.getLogger(__name__)

RATING_FIELD = "imdbRating"
SHARED_RELATIONS = ("IN_GENRE", "ACTED_IN", "DIRECTED")

_REL = "|".join(SHARED_RELATIONS)

# Ties on score are broken by tmdbId so pages are stable
SIMILAR_QUERY = f"""
MATCH (r:Movie {{tmdbId: $id}})-[:{_REL}]-(shared)-[:{_REL}]-(m:Movie)
WHERE m <> r AND m.`{RATING_FIELD}` IS NOT NULL
WITH m, count(*) AS inCommon
WITH m, inCommon, m.`{RATING_FIELD}` * inCommon AS score
ORDER BY score DESC, m.`tmdbId` ASC
SKIP $skip
LIMIT $limit
RETURN m {{.*, score: score, inCommon: inCommon}} AS movie
"""


def fetch_similar(
    tx,
    movie_id: str,
    limit: int,
    skip: int,
    favorites: frozenset[str],
) -> list[dict]:
    """
    Rank movies related to ``movie_id`` by weighted shared-connection count.

    ``limit`` and ``skip`` must already be validated ints so they are sent
    as Cypher Integers.

    Returns:
        One page of movie dicts carrying ``score``, ``inCommon`` and ``favorite``
    """
    movies = []
    for record in tx.run(SIMILAR_QUERY, {"id": movie_id, "skip": skip, "limit": limit}):
        movie = to_native(record["movie"])
        movie["favorite"] = movie.get("tmdbId") in favorites
        movies.append(movie)
    logger.debug(f"Ranked {len(movies)} similar movies for {movie_id} (skip={skip}, limit={limit})")
    return movies
