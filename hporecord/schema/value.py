"""Objective value definitions."""

from dataclasses import dataclass, field
from typing import Any, Dict

from ..errors import DecodeError
from .enums import Direction
from .fields import (
    is_neg_infinity,
    is_pos_infinity,
    optional_float,
    require_enum,
    require_object,
    require_str,
)

_NEG_INF = float("-inf")
_POS_INF = float("inf")


@dataclass(frozen=True)
class ValueRange:
    """
    Expected range of an objective value.

    Defaults to the unbounded interval. Infinite bounds are left out of
    the encoded form and restored on decode.
    """

    min: float = _NEG_INF
    max: float = _POS_INF

    def __post_init__(self):
        object.__setattr__(self, "min", float(self.min))
        object.__setattr__(self, "max", float(self.max))

    def is_default(self) -> bool:
        return is_neg_infinity(self.min) and is_pos_infinity(self.max)

    def to_dict(self) -> Dict[str, Any]:
        d = {}
        if not is_neg_infinity(self.min):
            d["min"] = self.min
        if not is_pos_infinity(self.max):
            d["max"] = self.max
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValueRange':
        return cls(
            min=optional_float(data, "min", _NEG_INF),
            max=optional_float(data, "max", _POS_INF),
        )


@dataclass(frozen=True)
class ValueDef:
    """Named objective with an optimization direction."""

    name: str
    direction: Direction
    range: ValueRange = field(default_factory=ValueRange)

    @classmethod
    def new(cls, name: str, direction: Direction) -> 'ValueDef':
        """Objective over the unbounded range."""
        return cls(name=name, direction=direction)

    def to_dict(self) -> Dict[str, Any]:
        d = {"name": self.name}
        if not self.range.is_default():
            d["range"] = self.range.to_dict()
        d["direction"] = self.direction.value
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValueDef':
        if "range" in data:
            try:
                value_range = ValueRange.from_dict(require_object(data["range"]))
            except DecodeError as e:
                raise e.within("range") from None
        else:
            value_range = ValueRange()
        return cls(
            name=require_str(data, "name"),
            direction=require_enum(data, "direction", Direction),
            range=value_range,
        )
