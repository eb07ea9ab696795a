"""
Typed view over the raw TOML document.

tomllib returns plain dicts, lists and scalars. ValueKind classifies each
value into one tagged variant so field readers can branch on every case.
"""

import datetime
from enum import Enum
from typing import Any, Dict, List

TomlTable = Dict[str, Any]
TomlArray = List[Any]


class ValueKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOL = "boolean"
    ARRAY = "array"
    TABLE = "table"
    DATETIME = "datetime"


def kind_of(value: Any) -> ValueKind:
    """
    Classify a tomllib value.

    Args:
        value: Any value produced by tomllib

    Returns:
        The ValueKind of the value

    Raises:
        TypeError: If the value did not come from tomllib
    """
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.TABLE
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return ValueKind.DATETIME
    raise TypeError(f"Not a TOML value: {type(value).__name__}")


def is_table(value: Any) -> bool:
    return kind_of(value) is ValueKind.TABLE
