"""
Parameter search-space definitions.

ParamRange has two variants, discriminated on the wire by a ``type``
field that is flattened into the enclosing ParamDef object:

    {"name": "lr", "type": "numerical", "min": 1e-05, "max": 1.0, "scale": "LOG"}
    {"name": "opt", "type": "categorical", "choices": ["adam", "sgd"]}
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple, Type

from ..errors import DecodeError
from .enums import Scale
from .fields import (
    as_str,
    optional_enum,
    optional_float,
    require_float,
    require_list,
    require_str,
)


@dataclass(frozen=True)
class ParamRange(ABC):
    """Base class for parameter ranges."""

    TYPE: ClassVar[str]

    @abstractmethod
    def min(self) -> float:
        """Lower bound of the numeric view."""

    @abstractmethod
    def max(self) -> float:
        """Upper bound of the numeric view."""

    @abstractmethod
    def scale(self) -> Scale:
        """Sampling scale of the numeric view."""

    @abstractmethod
    def _fields(self) -> Dict[str, Any]:
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the ``type`` discriminator first."""
        return {"type": self.TYPE, **self._fields()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParamRange':
        """Decode the variant named by ``data["type"]``."""
        if "type" not in data:
            raise DecodeError("missing range discriminator", field="type")
        tag = as_str(data["type"], "type")
        variant = PARAM_RANGE_TYPES.get(tag)
        if variant is None:
            raise DecodeError(f"unknown range type {tag!r}", field="type")
        return variant._from_fields(data)

    @classmethod
    @abstractmethod
    def _from_fields(cls, data: Dict[str, Any]) -> 'ParamRange':
        pass

    # Canonical shapes

    @staticmethod
    def continuous(min: float, max: float) -> 'Numerical':
        return Numerical(min=min, max=max)

    @staticmethod
    def log_continuous(min: float, max: float) -> 'Numerical':
        return Numerical(min=min, max=max, scale=Scale.LOG)

    @staticmethod
    def discrete(min: float, max: float, step: float) -> 'Numerical':
        return Numerical(min=min, max=max, step=step)

    @staticmethod
    def categorical(choices: Sequence[str]) -> 'Categorical':
        return Categorical(choices=choices)


@dataclass(frozen=True, repr=False)
class Numerical(ParamRange):
    """
    Numeric interval, optionally stepped and/or log scaled.

    Built with the wire names (``min``, ``max``, ``step``, ``scale``). The
    bounds and scale are stored as ``low``, ``high`` and ``sampling`` so
    that ``min()``, ``max()`` and ``scale()`` stay methods shared with
    Categorical; use ``with_changes`` rather than ``dataclasses.replace``.
    """

    TYPE: ClassVar[str] = "numerical"

    low: float
    high: float
    step: Optional[float] = None
    sampling: Scale = Scale.LINEAR

    def __init__(
        self,
        min: float,
        max: float,
        step: Optional[float] = None,
        scale: Scale = Scale.LINEAR,
    ):
        object.__setattr__(self, "low", float(min))
        object.__setattr__(self, "high", float(max))
        object.__setattr__(self, "step", None if step is None else float(step))
        object.__setattr__(self, "sampling", Scale(scale))

    def __repr__(self) -> str:
        return (
            f"Numerical(min={self.low!r}, max={self.high!r}, "
            f"step={self.step!r}, scale={self.sampling.value!r})"
        )

    def with_changes(self, **changes) -> 'Numerical':
        """Copy with some of ``min``, ``max``, ``step``, ``scale`` replaced."""
        fields = {"min": self.low, "max": self.high, "step": self.step, "scale": self.sampling}
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown Numerical field(s): {sorted(unknown)}")
        fields.update(changes)
        return Numerical(**fields)

    def min(self) -> float:
        return self.low

    def max(self) -> float:
        return self.high

    def scale(self) -> Scale:
        return self.sampling

    def _fields(self) -> Dict[str, Any]:
        d = {"min": self.low, "max": self.high}
        if self.step is not None:
            d["step"] = self.step
        if not self.sampling.is_default():
            d["scale"] = self.sampling.value
        return d

    @classmethod
    def _from_fields(cls, data: Dict[str, Any]) -> 'Numerical':
        return cls(
            min=require_float(data, "min"),
            max=require_float(data, "max"),
            step=optional_float(data, "step", None),
            scale=optional_enum(data, "scale", Scale, Scale.default()),
        )


@dataclass(frozen=True)
class Categorical(ParamRange):
    """
    Finite set of string choices.

    The numeric view is the index range ``[0, len(choices))``.
    """

    TYPE: ClassVar[str] = "categorical"

    choices: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "choices", tuple(self.choices))

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return float(len(self.choices))

    def scale(self) -> Scale:
        return Scale.LINEAR

    def _fields(self) -> Dict[str, Any]:
        return {"choices": list(self.choices)}

    @classmethod
    def _from_fields(cls, data: Dict[str, Any]) -> 'Categorical':
        choices = require_list(data, "choices")
        return cls(choices=[as_str(c, f"choices[{i}]") for i, c in enumerate(choices)])


PARAM_RANGE_TYPES: Dict[str, Type[ParamRange]] = {
    Numerical.TYPE: Numerical,
    Categorical.TYPE: Categorical,
}


@dataclass(frozen=True)
class ParamDef:
    """Named parameter with its search range."""

    name: str
    range: ParamRange

    @classmethod
    def continuous(cls, name: str, min: float, max: float) -> 'ParamDef':
        return cls(name=name, range=ParamRange.continuous(min, max))

    @classmethod
    def log_continuous(cls, name: str, min: float, max: float) -> 'ParamDef':
        return cls(name=name, range=ParamRange.log_continuous(min, max))

    @classmethod
    def discrete(cls, name: str, min: float, max: float, step: float) -> 'ParamDef':
        return cls(name=name, range=ParamRange.discrete(min, max, step))

    @classmethod
    def categorical(cls, name: str, choices: Sequence[str]) -> 'ParamDef':
        return cls(name=name, range=ParamRange.categorical(choices))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the range fields flattened into this object."""
        return {"name": self.name, **self.range.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParamDef':
        return cls(
            name=require_str(data, "name"),
            range=ParamRange.from_dict(data),
        )
