"""
Typed field readers shared by the ``from_dict`` constructors.

Each reader either returns a value of the expected type or raises
DecodeError naming the offending field.
"""

import math
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ..errors import DecodeError

T = TypeVar("T")

_MISSING = object()


def require_object(data: Any, field: Optional[str] = None) -> Dict[str, Any]:
    """Check that ``data`` is a JSON object."""
    if not isinstance(data, dict):
        raise DecodeError(f"expected object, got {type(data).__name__}", field=field)
    return data


def _get(data: Dict[str, Any], key: str) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING:
        raise DecodeError("missing required field", field=key)
    return value


def as_float(value: Any, field: str) -> float:
    # bool is an int subclass but never a valid number on the wire
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"expected number, got {type(value).__name__}", field=field)
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise DecodeError(f"number out of range: {value!r}", field=field)
    return number


def as_str(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"expected string, got {type(value).__name__}", field=field)
    return value


def require_str(data: Dict[str, Any], key: str) -> str:
    return as_str(_get(data, key), key)


def require_float(data: Dict[str, Any], key: str) -> float:
    return as_float(_get(data, key), key)


def optional_float(data: Dict[str, Any], key: str, default: Optional[float]) -> Optional[float]:
    """Read a number, falling back to ``default`` when the key is absent."""
    if key not in data:
        return default
    return as_float(data[key], key)


def require_index(data: Dict[str, Any], key: str) -> int:
    """Read a non-negative integer."""
    value = _get(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"expected integer, got {type(value).__name__}", field=key)
    if value < 0:
        raise DecodeError(f"expected non-negative integer, got {value}", field=key)
    return value


def require_list(data: Dict[str, Any], key: str) -> List[Any]:
    value = _get(data, key)
    if not isinstance(value, list):
        raise DecodeError(f"expected array, got {type(value).__name__}", field=key)
    return value


def require_enum(data: Dict[str, Any], key: str, enum_cls: Callable[[str], T]) -> T:
    """Read an upper-case enum literal."""
    raw = require_str(data, key)
    try:
        return enum_cls(raw)
    except ValueError:
        raise DecodeError(f"unknown value {raw!r}", field=key) from None


def optional_enum(data: Dict[str, Any], key: str, enum_cls: Callable[[str], T], default: T) -> T:
    if key not in data:
        return default
    return require_enum(data, key, enum_cls)


def decode_items(items: List[Any], key: str, from_dict: Callable[[Dict[str, Any]], T]) -> List[T]:
    """Decode a list of objects, prefixing errors with ``key[i]``."""
    decoded = []
    for i, item in enumerate(items):
        path = f"{key}[{i}]"
        try:
            decoded.append(from_dict(require_object(item)))
        except DecodeError as e:
            raise e.within(path) from None
    return decoded


def is_neg_infinity(value: float) -> bool:
    return math.isinf(value) and value < 0


def is_pos_infinity(value: float) -> bool:
    return math.isinf(value) and value > 0
