from dataclasses import dataclass

from . import config
from .sorting import SORT_ORDERS, SORTABLE_FIELDS


@dataclass
class QueryConfig:
    """
    Per-service query defaults.

    Field defaults are read from ``config`` at instantiation time so that
    environment overrides picked up by a config reload are honored.
    """

    default_sort: str | None = None
    default_order: str | None = None
    default_limit: int | None = None
    max_limit: int | None = None
    strict_sort: bool | None = None
    database: str | None = None

    def __post_init__(self) -> None:
        if self.default_sort is None:
            self.default_sort = config.DEFAULT_SORT
        if self.default_order is None:
            self.default_order = config.DEFAULT_ORDER
        if self.default_limit is None:
            self.default_limit = config.DEFAULT_LIMIT
        if self.max_limit is None:
            self.max_limit = config.MAX_LIMIT
        if self.strict_sort is None:
            self.strict_sort = config.STRICT_SORT
        if self.database is None:
            self.database = config.NEO4J_DATABASE
        self.default_order = str(self.default_order).upper()
        self.validate()

    def validate(self) -> None:
        if self.default_sort not in SORTABLE_FIELDS:
            raise ValueError(f"default_sort must be one of {sorted(SORTABLE_FIELDS)}")
        if self.default_order not in SORT_ORDERS:
            raise ValueError("default_order must be ASC or DESC")
        if self.max_limit <= 0:
            raise ValueError("max_limit must be positive")
        if not (0 < self.default_limit <= self.max_limit):
            raise ValueError("default_limit must be in (0, max_limit]")
