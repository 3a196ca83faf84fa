import logging

logger = logging.getLogger(__name__)

FAVORITES_QUERY = """
MATCH (:User {userId: $userId})-[:HAS_FAVORITE]->(m:Movie)
RETURN DISTINCT m.tmdbId AS id
"""


def resolve_favorites(tx, user_id: str | None) -> frozenset[str]:
    """
    Return the tmdbIds the user has marked as favorite.

    Must be called with the same transaction as the query it personalizes so
    both reads see one snapshot. No user id means no read and an empty set;
    an unknown user also yields an empty set.
    """
    if not user_id:
        return frozenset()

    result = tx.run(FAVORITES_QUERY, {"userId": user_id})
    favorites = frozenset(record["id"] for record in result if record["id"] is not None)
    logger.debug(f"Resolved {len(favorites)} favorites for user {user_id}")
    return favorites
