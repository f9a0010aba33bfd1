"""Per-trial evaluation record."""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple

import numpy as np

from ..errors import DecodeError
from .enums import EvalState
from .fields import decode_items, require_enum, require_index, require_list, require_str
from .nullable import as_float_array, decode_nullable_floats, encode_nullable_floats
from .span import Span


@dataclass(frozen=True, eq=False)
class EvalRecord:
    """
    Observed outcome of one trial.

    ``spans``, ``params`` and ``values`` are parallel to the owning study's
    definition lists. NaN in ``params`` means "not assigned" and NaN in
    ``values`` means "not yet observed". The study is referenced by id
    only; matching lengths against the study is left to
    hporecord.validation.
    """

    TAG: ClassVar[str] = "eval"

    study: str
    trial: int
    state: EvalState
    spans: Tuple[Span, ...] = ()
    params: np.ndarray = ()
    values: np.ndarray = ()

    def __post_init__(self):
        if isinstance(self.trial, bool) or not isinstance(self.trial, int) or self.trial < 0:
            raise ValueError(f"trial must be a non-negative integer, got {self.trial!r}")
        object.__setattr__(self, "state", EvalState(self.state))
        object.__setattr__(self, "spans", tuple(self.spans))
        object.__setattr__(self, "params", as_float_array(self.params))
        object.__setattr__(self, "values", as_float_array(self.values))

    def __eq__(self, other):
        if not isinstance(other, EvalRecord):
            return NotImplemented
        return (
            self.study == other.study
            and self.trial == other.trial
            and self.state is other.state
            and self.spans == other.spans
            and np.array_equal(self.params, other.params, equal_nan=True)
            and np.array_equal(self.values, other.values, equal_nan=True)
        )

    __hash__ = None

    def with_state(self, state: EvalState, values: Optional[Sequence[float]] = None) -> 'EvalRecord':
        """Copy of this record in a new state, optionally with new values."""
        return EvalRecord(
            study=self.study,
            trial=self.trial,
            state=state,
            spans=self.spans,
            params=self.params,
            values=self.values if values is None else values,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "study": self.study,
            "trial": self.trial,
            "state": self.state.value,
            "spans": [s.to_dict() for s in self.spans],
            "params": encode_nullable_floats(self.params),
            "values": encode_nullable_floats(self.values),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EvalRecord':
        """Deserialize from dictionary."""
        for key in ("params", "values"):
            if key not in data:
                raise DecodeError("missing required field", field=key)
        return cls(
            study=require_str(data, "study"),
            trial=require_index(data, "trial"),
            state=require_enum(data, "state", EvalState),
            spans=decode_items(require_list(data, "spans"), "spans", Span.from_dict),
            params=decode_nullable_floats(data["params"], "params"),
            values=decode_nullable_floats(data["values"], "values"),
        )
