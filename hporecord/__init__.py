"""
hporecord - Records for hyperparameter-optimization studies

Usage:
    from hporecord import (
        StudyRecord, EvalRecord, ParamDef, ValueDef, Direction, EvalState,
        encode, decode, RecordJournal,
    )

    study = StudyRecord(
        id="s1",
        params=[ParamDef.log_continuous("lr", 1e-5, 1.0)],
        values=[ValueDef.new("acc", Direction.MAXIMIZE)],
    )
    line = encode(study)
    assert decode(line) == study

    journal = RecordJournal("study.jsonl")
    journal.append(study)
    journal.append(EvalRecord(
        study="s1", trial=0, state=EvalState.INTERIM,
        params=[1e-3], values=[float("nan")],
    ))
"""

__version__ = "0.1.0"

from .errors import RecordError, DecodeError
from .schema import (
    Scale,
    Direction,
    EvalState,
    Span,
    SpanDef,
    ParamRange,
    Numerical,
    Categorical,
    ParamDef,
    ValueRange,
    ValueDef,
    StudyRecord,
    EvalRecord,
    Record,
    RECORD_TYPES,
    record_to_dict,
    record_from_dict,
    encode_nullable_floats,
    decode_nullable_floats,
)
from .codec import encode, decode
from .config import JournalConfig
from .journal import RecordJournal
from .validation import validate_study, validate_eval, validate_records

__all__ = [
    # Errors
    "RecordError",
    "DecodeError",
    # Schema
    "Scale",
    "Direction",
    "EvalState",
    "Span",
    "SpanDef",
    "ParamRange",
    "Numerical",
    "Categorical",
    "ParamDef",
    "ValueRange",
    "ValueDef",
    "StudyRecord",
    "EvalRecord",
    "Record",
    "RECORD_TYPES",
    "record_to_dict",
    "record_from_dict",
    "encode_nullable_floats",
    "decode_nullable_floats",
    # Codec
    "encode",
    "decode",
    # Journal
    "JournalConfig",
    "RecordJournal",
    # Validation
    "validate_study",
    "validate_eval",
    "validate_records",
]
