import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, TypeVar

from neo4j import Driver, GraphDatabase

from . import config

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Global driver instance
_driver: Driver | None = None
_driver_lock = threading.Lock()


def get_driver() -> Driver:
    """Get or create the process-wide Neo4j driver (it owns the connection pool)."""
    global _driver
    if _driver is None:
        with _driver_lock:
            if _driver is None:
                _driver = GraphDatabase.driver(
                    config.NEO4J_URI,
                    auth=(config.NEO4J_USERNAME, config.NEO4J_PASSWORD),
                )
                logger.info(f"Created Neo4j driver for {config.NEO4J_URI}")
    return _driver


def close_driver() -> None:
    """Close the global driver. Call on application shutdown."""
    global _driver
    with _driver_lock:
        if _driver is not None:
            _driver.close()
            _driver = None
            logger.info("Neo4j driver closed")


@contextmanager
def read_session(driver: Driver | None = None, database: str | None = None):
    """
    Open a session scoped to the ``with`` block.

    The session is closed on every exit path, including errors raised by
    the body or by the driver.
    """
    driver = driver or get_driver()
    db = database or config.NEO4J_DATABASE
    session = driver.session(database=db) if db else driver.session()
    logger.debug(f"Opened session (database={db or 'default'})")
    try:
        yield session
    finally:
        session.close()
        logger.debug("Closed session")


def run_read(
    work: Callable[..., T],
    *args: Any,
    driver: Driver | None = None,
    database: str | None = None,
) -> T:
    """
    Run ``work(tx, *args)`` inside a single managed read transaction.

    Driver errors propagate unchanged; transient-failure retries are left
    to the driver's own execute_read policy.
    """
    with read_session(driver, database) as session:
        return session.execute_read(work, *args)
