"""
Configuration constants for the movie graph query layer.

This module centralizes connection settings and query defaults.
Values can be overridden via environment variables.
"""
import os
import logging

logger = logging.getLogger(__name__)


def _get_int_env(key: str, default: int, min_val: int = 1) -> int:
    """
    Read a page-size setting such as MOVIE_GRAPH_DEFAULT_LIMIT.

    Unset variables give ``default``; unparsable ones log a warning and give
    ``default``; values below ``min_val`` are raised to ``min_val``.
    """
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid {key}='{raw}', using default {default}")
        return default
    if value < min_val:
        logger.warning(f"{key}={value} is below minimum {min_val}, using {min_val}")
        return min_val
    return value


def _get_bool_env(key: str, default: bool) -> bool:
    """Parse a boolean flag; accepts 1/0, true/false, yes/no, on/off."""
    raw = os.environ.get(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    logger.warning(f"Invalid {key}='{raw}', using default {default}")
    return default


# Neo4j connection
NEO4J_URI = os.environ.get("NEO4J_URI", "bolt://localhost:7687")
NEO4J_USERNAME = os.environ.get("NEO4J_USERNAME", "neo4j")
NEO4J_PASSWORD = os.environ.get("NEO4J_PASSWORD", "neo4j")
NEO4J_DATABASE = os.environ.get("NEO4J_DATABASE") or None  # None = server default

# Listing defaults
DEFAULT_SORT = "title"
DEFAULT_ORDER = "ASC"
DEFAULT_LIMIT = _get_int_env("MOVIE_GRAPH_DEFAULT_LIMIT", 6, min_val=1)
MAX_LIMIT = _get_int_env("MOVIE_GRAPH_MAX_LIMIT", 100, min_val=1)

# Invalid sort params: False = fall back to defaults, True = raise InvalidSortSpec
STRICT_SORT = _get_bool_env("MOVIE_GRAPH_STRICT_SORT", False)
