"""Time spans recorded for trial phases."""

from dataclasses import dataclass
from typing import Dict, Any

from .fields import require_float, require_str


@dataclass(frozen=True)
class Span:
    """Time interval in seconds. ``end >= start`` is expected, not enforced."""

    start: float
    end: float

    def __post_init__(self):
        object.__setattr__(self, "start", float(self.start))
        object.__setattr__(self, "end", float(self.end))

    @property
    def duration(self) -> float:
        """Elapsed seconds between start and end."""
        return self.end - self.start

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start, "end": self.end}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Span':
        return cls(
            start=require_float(data, "start"),
            end=require_float(data, "end"),
        )


@dataclass(frozen=True)
class SpanDef:
    """Study-level span label, referenced by position from EvalRecord.spans."""

    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SpanDef':
        return cls(name=require_str(data, "name"))
