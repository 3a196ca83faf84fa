"""Convert values returned by the Neo4j driver into plain Python types."""

from collections.abc import Mapping

from neo4j.graph import Node, Relationship
from neo4j.spatial import Point
from neo4j.time import Date, DateTime, Duration, Time


def to_native(value):
    """
    Recursively convert a driver value into builtin Python types.

    - DateTime/Date/Time become datetime/date/time
    - Duration becomes its ISO-8601 string (months have no timedelta form)
    - Nodes and relationships become dicts of their properties
    - Mappings, lists and tuples are walked at every depth
    - ints, floats, strings, bools and None are returned untouched

    Anything else is passed through unchanged.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (DateTime, Date, Time)):
        return value.to_native()
    if isinstance(value, Duration):
        return value.iso_format()
    if isinstance(value, (Node, Relationship)):
        return {key: to_native(val) for key, val in value.items()}
    if isinstance(value, Mapping):
        return {key: to_native(val) for key, val in value.items()}
    # Points are tuple subclasses; keep them intact
    if isinstance(value, (list, tuple)) and not isinstance(value, Point):
        return [to_native(item) for item in value]
    return value
