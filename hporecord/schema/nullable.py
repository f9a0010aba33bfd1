"""
Nullable float sequence codec.

JSON has no NaN, so a NaN sentinel ("not assigned" / "not yet observed")
travels as ``null``:

    encode_nullable_floats([1.0, nan, 2.5]) -> [1.0, None, 2.5]
    decode_nullable_floats([None, None])    -> array([nan, nan])

Only EvalRecord.params and EvalRecord.values go through this codec.
"""

from typing import Any, List, Optional, Sequence

import numpy as np

from ..errors import DecodeError
from .fields import as_float


def as_float_array(values: Sequence[float]) -> np.ndarray:
    """Copy ``values`` into a read-only 1-d float64 array."""
    arr = np.array(values, dtype=np.float64).reshape(-1)
    arr.flags.writeable = False
    return arr


def encode_nullable_floats(values: Sequence[float]) -> List[Optional[float]]:
    """Map every non-finite entry to None and the rest to plain floats."""
    arr = np.asarray(values, dtype=np.float64)
    return [float(v) if np.isfinite(v) else None for v in arr]


def decode_nullable_floats(data: Any, field: Optional[str] = None) -> np.ndarray:
    """Inverse of encode_nullable_floats: None becomes NaN."""
    if not isinstance(data, list):
        raise DecodeError(f"expected array, got {type(data).__name__}", field=field)
    decoded = [
        np.nan if v is None else as_float(v, f"{field}[{i}]" if field else f"[{i}]")
        for i, v in enumerate(data)
    ]
    return as_float_array(decoded)
