"""Field access helpers for backend records.

Records arrive as plain dicts and the backend is not consistent about field
names (``tenantName`` vs ``name``, ``phoneNumber`` vs ``phone``). These
helpers read the first populated alias and coerce it.
"""

from typing import Any, Mapping, Optional


def pick(record: Optional[Mapping[str, Any]], *keys: str, default: Any = None) -> Any:
    """
    Return the first non-None value among ``keys``.

    Dotted keys walk nested dicts, e.g. ``"tenantDetails.name"``.
    """
    if not record:
        return default
    for key in keys:
        value: Any = record
        for part in key.split("."):
            if not isinstance(value, Mapping):
                value = None
                break
            value = value.get(part)
        if value is not None:
            return value
    return default


def as_text(value: Any, default: str = "") -> str:
    """Coerce a field to text; None becomes ``default``."""
    return default if value is None else str(value)


def as_number(value: Any, default: float = 0) -> float:
    """
    Coerce a field to a number.

    Numeric strings are parsed; anything unparseable (and zero) falls back
    to ``default``.
    """
    if isinstance(value, bool):
        return int(value) or default
    if isinstance(value, int):
        return value or default
    if isinstance(value, float):
        if value != value:  # NaN
            return default
        if value.is_integer():
            return int(value) or default
        return value or default
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return default
    if number != number:  # NaN
        return default
    if number.is_integer():
        return int(number) or default
    return number or default
