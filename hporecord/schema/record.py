"""
Record tagged union.

A Record is either a StudyRecord or an EvalRecord. On the wire the
variant is named by a ``type`` field written first, with the variant's
own fields merged into the same object:

    {"type": "study", "id": "s1", "attrs": {}, "spans": [], ...}
    {"type": "eval", "study": "s1", "trial": 0, "state": "COMPLETE", ...}
"""

from typing import Any, Dict, List, Type, Union

from ..errors import DecodeError
from .evaluation import EvalRecord
from .fields import as_str, require_object
from .study import StudyRecord

Record = Union[StudyRecord, EvalRecord]

TAG_FIELD = "type"


class RecordRegistry:
    """Maps wire tags to record classes."""

    def __init__(self):
        self._types: Dict[str, Type] = {}

    def register(self, record_cls: Type) -> None:
        """Register a record class under its ``TAG``."""
        self._types[record_cls.TAG] = record_cls

    def get(self, tag: str) -> Type:
        record_cls = self._types.get(tag)
        if record_cls is None:
            raise DecodeError(f"unknown record type {tag!r}", field=TAG_FIELD)
        return record_cls

    def list_tags(self) -> List[str]:
        return list(self._types.keys())

    def tag_of(self, record: Any) -> str:
        for tag, record_cls in self._types.items():
            if type(record) is record_cls:
                return tag
        raise TypeError(f"Not a record: {type(record).__name__}")


RECORD_TYPES = RecordRegistry()
RECORD_TYPES.register(StudyRecord)
RECORD_TYPES.register(EvalRecord)


def record_to_dict(record: Record) -> Dict[str, Any]:
    """Serialize a record with its tag first."""
    tag = RECORD_TYPES.tag_of(record)
    return {TAG_FIELD: tag, **record.to_dict()}


def record_from_dict(data: Any) -> Record:
    """
    Deserialize a tagged record.

    Raises:
        DecodeError: payload is not an object, the tag is missing or
            unknown, or the fields do not match the tagged variant.
    """
    data = require_object(data)
    if TAG_FIELD not in data:
        raise DecodeError("missing record tag", field=TAG_FIELD)
    tag = as_str(data[TAG_FIELD], TAG_FIELD)
    return RECORD_TYPES.get(tag).from_dict(data)
