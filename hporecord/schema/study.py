"""Study-level record: identity plus span/param/value definitions."""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Tuple

from .fields import (
    as_str,
    decode_items,
    require_list,
    require_object,
    require_str,
)
from .param import ParamDef
from .span import SpanDef
from .value import ValueDef


@dataclass(frozen=True)
class StudyRecord:
    """
    Declaration of a study, emitted once when the study begins.

    The order of ``spans``, ``params`` and ``values`` defines the positional
    indices used by every EvalRecord of this study.

    Example:
        >>> study = StudyRecord(
        ...     id="s1",
        ...     params=[ParamDef.log_continuous("lr", 1e-5, 1.0)],
        ...     values=[ValueDef.new("acc", Direction.MAXIMIZE)],
        ... )
    """

    TAG: ClassVar[str] = "study"

    id: str
    attrs: Dict[str, str] = field(default_factory=dict)
    spans: Tuple[SpanDef, ...] = ()
    params: Tuple[ParamDef, ...] = ()
    values: Tuple[ValueDef, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "attrs", dict(self.attrs))
        object.__setattr__(self, "spans", tuple(self.spans))
        object.__setattr__(self, "params", tuple(self.params))
        object.__setattr__(self, "values", tuple(self.values))

    def span_index(self, name: str) -> int:
        """Position of a span definition by name."""
        return _index_of(self.spans, name, "span")

    def param_index(self, name: str) -> int:
        """Position of a parameter definition by name."""
        return _index_of(self.params, name, "param")

    def value_index(self, name: str) -> int:
        """Position of a value definition by name."""
        return _index_of(self.values, name, "value")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "attrs": {k: self.attrs[k] for k in sorted(self.attrs)},
            "spans": [s.to_dict() for s in self.spans],
            "params": [p.to_dict() for p in self.params],
            "values": [v.to_dict() for v in self.values],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StudyRecord':
        """Deserialize from dictionary."""
        attrs = {}
        if "attrs" in data:
            raw = require_object(data["attrs"], "attrs")
            attrs = {k: as_str(v, f"attrs.{k}") for k, v in raw.items()}
        return cls(
            id=require_str(data, "id"),
            attrs=attrs,
            spans=decode_items(require_list(data, "spans"), "spans", SpanDef.from_dict),
            params=decode_items(require_list(data, "params"), "params", ParamDef.from_dict),
            values=decode_items(require_list(data, "values"), "values", ValueDef.from_dict),
        )


def _index_of(defs, name: str, kind: str) -> int:
    for i, d in enumerate(defs):
        if d.name == name:
            return i
    raise KeyError(f"Unknown {kind}: {name}")
