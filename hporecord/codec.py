"""
Wire codec for records.

encode() produces one line of JSON text per record; decode() accepts
exactly one such unit. Framing, persistence and transport belong to the
caller (see hporecord.journal for the JSONL log).
"""

import json
import math
from typing import Union

from .errors import DecodeError
from .schema.record import Record, record_from_dict, record_to_dict


def encode(record: Record) -> str:
    """
    Encode a record as single-line JSON.

    Re-encoding a decoded record yields identical text.

    Raises:
        ValueError: an ordinary float field holds NaN or infinity.
    """
    return json.dumps(record_to_dict(record), allow_nan=False, ensure_ascii=False)


def decode(data: Union[str, bytes, bytearray]) -> Record:
    """
    Decode one record.

    Raises:
        DecodeError: the input is not valid JSON or not a valid record.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"invalid UTF-8: {e}") from e
    try:
        parsed = json.loads(
            data,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except DecodeError:
        raise
    except ValueError as e:
        # JSONDecodeError, or an integer literal over the digit limit
        raise DecodeError(f"invalid JSON: {e}") from e
    except RecursionError:
        raise DecodeError("invalid JSON: nesting too deep") from None
    return record_from_dict(parsed)


def _reject_constant(name: str):
    # json accepts NaN/Infinity literals by default; they are not JSON
    raise DecodeError(f"invalid JSON: non-standard constant {name}")


def _parse_finite_float(literal: str) -> float:
    # 1e400 parses to inf, which cannot be written back out
    value = float(literal)
    if not math.isfinite(value):
        raise DecodeError(f"invalid JSON: number out of range {literal}")
    return value
