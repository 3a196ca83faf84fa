"""
Sort and pagination validation for listing queries.

Cypher cannot bind identifiers as parameters, so the sort field and
direction are spliced into query text. Everything that reaches
``SortSpec.order_by`` has been checked against ``SORTABLE_FIELDS`` and
``SORT_ORDERS`` first; skip/limit are always bound as parameters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import InvalidPagination, InvalidSortSpec

if TYPE_CHECKING:
    from .query_config import QueryConfig

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = frozenset({
    "title",
    "released",
    "year",
    "imdbRating",
    "runtime",
    "budget",
    "revenue",
    "tmdbId",
})
SORT_ORDERS = ("ASC", "DESC")

# Secondary key so that pages are stable when the sort attribute ties
TIE_BREAK_FIELD = "tmdbId"


@dataclass(frozen=True)
class SortSpec:
    """
    A sort field and direction that are safe to splice into Cypher text.

    Construction fails unless the field is allow-listed and the order is
    exactly ASC or DESC, so every instance can be rendered verbatim.
    """

    field: str
    order: str

    def __post_init__(self) -> None:
        if not isinstance(self.field, str) or self.field not in SORTABLE_FIELDS:
            raise InvalidSortSpec(self.field, self.order, "field is not sortable")
        if self.order not in SORT_ORDERS:
            raise InvalidSortSpec(self.field, self.order, "order must be ASC or DESC")

    @classmethod
    def parse(cls, field: str, order: str) -> "SortSpec":
        """
        Build a SortSpec from caller-supplied values.

        The order is case-insensitive; surrounding whitespace is not accepted.

        Raises:
            InvalidSortSpec: if either value is not allow-listed
        """
        if isinstance(order, str):
            order = order.upper()
        return cls(field, order)

    def order_by(self, variable: str = "m") -> str:
        """Render the ORDER BY clause for a node bound to ``variable``."""
        clause = f"ORDER BY {variable}.`{self.field}` {self.order}"
        if self.field != TIE_BREAK_FIELD:
            clause += f", {variable}.`{TIE_BREAK_FIELD}` ASC"
        return clause


def resolve_sort(field: str | None, order: str | None, config: QueryConfig) -> SortSpec:
    """
    Turn optional caller sort params into a SortSpec.

    Missing values take the configured defaults. Invalid values fall back
    to the defaults with a warning, unless ``config.strict_sort`` is set,
    in which case InvalidSortSpec propagates.
    """
    field = config.default_sort if field is None else field
    order = config.default_order if order is None else order
    try:
        return SortSpec.parse(field, order)
    except InvalidSortSpec as e:
        if config.strict_sort:
            raise
        logger.warning(f"{e}; falling back to {config.default_sort} {config.default_order}")
        return SortSpec.parse(config.default_sort, config.default_order)


def _require_count(name: str, value) -> int:
    # Neo4j distinguishes Integer from Float on the wire; only real ints are accepted
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPagination(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidPagination(f"{name} must be non-negative, got {value}")
    return value


def validate_page(limit: int, skip: int, max_limit: int) -> tuple[int, int]:
    """
    Validate skip/limit for binding as Cypher Integer parameters.

    Returns:
        (limit, skip), with limit clamped to ``max_limit``

    Raises:
        InvalidPagination: on floats, bools, non-numbers or negative values
    """
    limit = _require_count("limit", limit)
    skip = _require_count("skip", skip)
    if limit > max_limit:
        logger.warning(f"limit={limit} exceeds maximum {max_limit}, using {max_limit}")
        limit = max_limit
    return limit, skip
