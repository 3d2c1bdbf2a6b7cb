"""Typed accessors for loosely typed image property values.

The properties mapping produced by the decoder holds strings, numbers, byte
strings, sequences and nested mappings. Each accessor returns the value only
when it already has the requested type and ``None`` otherwise, so a mismatch
degrades to an absent field instead of an exception. Values are never
coerced across kinds (a string is never read as a number); the single
widening allowed is ``int`` to ``float``.
"""

from typing import Any, Dict, List, Optional


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid metadata number
    return isinstance(value, int) and not isinstance(value, bool)


def as_string(value: Any) -> Optional[str]:
    """Return value if it is a string."""
    return value if isinstance(value, str) else None


def as_int(value: Any) -> Optional[int]:
    """Return value if it is an integer (booleans excluded)."""
    return value if _is_int(value) else None


def as_float(value: Any) -> Optional[float]:
    """Return value as a float if it is a float or an integer.

    Args:
        value: Raw property value

    Returns:
        The numeric value as float, or None for any non-numeric value
    """
    if isinstance(value, float):
        return value
    if _is_int(value):
        return float(value)
    return None


def as_int_list(value: Any) -> Optional[List[int]]:
    """Return value as a list if it is a sequence made only of integers.

    An empty sequence is returned as an empty list, which callers must keep
    distinct from ``None``.
    """
    if not isinstance(value, (list, tuple)):
        return None
    if not all(_is_int(item) for item in value):
        return None
    return list(value)


def as_mapping(value: Any) -> Optional[Dict[str, Any]]:
    """Return value if it is a string-keyed dictionary."""
    if not isinstance(value, dict):
        return None
    if not all(isinstance(key, str) for key in value):
        return None
    return value
