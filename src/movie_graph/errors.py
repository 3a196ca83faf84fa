"""Exceptions raised by the movie graph query layer.

Driver errors (``neo4j.exceptions``) are not wrapped; they propagate as-is.
"""


class MovieGraphError(Exception):
    """Base class for errors raised by this package."""


class InvalidSortSpec(MovieGraphError, ValueError):
    """A caller-supplied sort field or direction failed the allow-list check."""

    def __init__(self, field, order, reason: str):
        self.field = field
        self.order = order
        super().__init__(f"Invalid sort spec ({field!r}, {order!r}): {reason}")


class InvalidPagination(MovieGraphError, ValueError):
    """Skip/limit were not non-negative integers."""


class NotFoundError(MovieGraphError, LookupError):
    """No movie node matched the requested id."""

    def __init__(self, movie_id):
        self.movie_id = movie_id
        super().__init__(f"Movie {movie_id!r} not found")
