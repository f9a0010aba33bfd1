"""
hporecord schema.

Leaves first:
- Scale, Direction, EvalState: closed enumerations
- Span, SpanDef: timed phases and their study-level labels
- ParamRange (Numerical | Categorical), ParamDef: parameter search space
- ValueRange, ValueDef: objectives
- StudyRecord, EvalRecord: the two record kinds
- Record: tagged union of the two, the unit written to a log

Nullable codec:
- encode_nullable_floats / decode_nullable_floats: NaN <-> null
"""

from .enums import Scale, Direction, EvalState
from .span import Span, SpanDef
from .param import ParamRange, Numerical, Categorical, ParamDef, PARAM_RANGE_TYPES
from .value import ValueRange, ValueDef
from .study import StudyRecord
from .evaluation import EvalRecord
from .nullable import encode_nullable_floats, decode_nullable_floats
from .record import (
    Record,
    RecordRegistry,
    RECORD_TYPES,
    TAG_FIELD,
    record_to_dict,
    record_from_dict,
)

__all__ = [
    # Enumerations
    "Scale",
    "Direction",
    "EvalState",
    # Definitions
    "Span",
    "SpanDef",
    "ParamRange",
    "Numerical",
    "Categorical",
    "ParamDef",
    "PARAM_RANGE_TYPES",
    "ValueRange",
    "ValueDef",
    # Records
    "StudyRecord",
    "EvalRecord",
    "Record",
    "RecordRegistry",
    "RECORD_TYPES",
    "TAG_FIELD",
    "record_to_dict",
    "record_from_dict",
    # Codec
    "encode_nullable_floats",
    "decode_nullable_floats",
]
