"""
Domain-consistency validation for records.

The schema only captures structure. This module is the optional pass a
consumer layers over decoded records to catch:
- Inconsistent definitions (min > max, non-positive step, duplicates)
- Evaluations that do not line up with their study
- Illegal trial state transitions
"""

import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .schema import (
    Categorical,
    EvalRecord,
    EvalState,
    Numerical,
    StudyRecord,
)

logger = logging.getLogger(__name__)


def _duplicates(names: Iterable[str]) -> List[str]:
    return [name for name, count in Counter(names).items() if count > 1]


def validate_study(study: StudyRecord) -> Dict[str, Any]:
    """
    Validate a study declaration.

    Checks:
    - Study id is non-empty
    - Span, parameter and value names are unique
    - Numerical ranges have min <= max and a positive step
    - Categorical choices are non-empty and unique
    - Value ranges have min <= max

    Args:
        study: StudyRecord to validate

    Returns:
        Dict with:
        - valid: bool
        - errors: List[str]
        - warnings: List[str]
    """
    errors = []
    warnings = []

    if not study.id:
        errors.append("Study id must be non-empty")

    for kind, defs in (("span", study.spans), ("param", study.params), ("value", study.values)):
        for name in _duplicates(d.name for d in defs):
            errors.append(f"Study {study.id}: duplicate {kind} name '{name}'")

    for param in study.params:
        r = param.range
        if isinstance(r, Numerical):
            if r.min() > r.max():
                errors.append(
                    f"Param {param.name}: min ({r.min()}) > max ({r.max()})"
                )
            if r.step is not None and not r.step > 0:
                errors.append(f"Param {param.name}: step ({r.step}) must be > 0")
        elif isinstance(r, Categorical):
            if not r.choices:
                errors.append(f"Param {param.name}: categorical choices are empty")
            for choice in _duplicates(r.choices):
                errors.append(f"Param {param.name}: duplicate choice '{choice}'")

    for value in study.values:
        if value.range.min > value.range.max:
            errors.append(
                f"Value {value.name}: min ({value.range.min}) > max ({value.range.max})"
            )

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def validate_eval(evaluation: EvalRecord, study: StudyRecord) -> Dict[str, Any]:
    """
    Validate an evaluation against its study.

    Checks array lengths against the study's definition lists and warns
    about spans that end before they start.
    """
    errors = []
    warnings = []
    where = f"Trial {evaluation.study}/{evaluation.trial}"

    for kind, got, expected in (
        ("spans", len(evaluation.spans), len(study.spans)),
        ("params", len(evaluation.params), len(study.params)),
        ("values", len(evaluation.values), len(study.values)),
    ):
        if got != expected:
            errors.append(f"{where}: {got} {kind}, study declares {expected}")

    for i, span in enumerate(evaluation.spans):
        if span.duration < 0:
            warnings.append(f"{where}: span {i} ends before it starts ({span.duration}s)")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def validate_records(records: Iterable[Any]) -> Dict[str, Any]:
    """
    Validate a record stream in log order.

    Every study is validated on its own, each evaluation against the most
    recent declaration of its study, and each (study, trial) pair against
    the state transition rule: once terminal, a trial keeps its state.

    Returns:
        Dict with valid, errors, warnings and n_records
    """
    errors = []
    warnings = []
    studies: Dict[str, StudyRecord] = {}
    states: Dict[Tuple[str, int], EvalState] = {}
    n_records = 0

    for record in records:
        n_records += 1

        if isinstance(record, StudyRecord):
            if record.id in studies:
                errors.append(f"Study {record.id}: declared more than once")
            studies[record.id] = record
            result = validate_study(record)

        elif isinstance(record, EvalRecord):
            study = studies.get(record.study)
            if study is None:
                errors.append(
                    f"Trial {record.study}/{record.trial}: unknown study '{record.study}'"
                )
                continue
            result = validate_eval(record, study)

            key = (record.study, record.trial)
            previous: Optional[EvalState] = states.get(key)
            if not record.state.can_follow(previous):
                errors.append(
                    f"Trial {record.study}/{record.trial}: "
                    f"{record.state.value} after terminal {previous.value}"
                )
            else:
                states[key] = record.state

        else:
            raise TypeError(f"Not a record: {type(record).__name__}")

        errors.extend(result["errors"])
        warnings.extend(result["warnings"])

    if errors:
        logger.info(f"Validation found {len(errors)} error(s) in {n_records} record(s)")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "n_records": n_records,
    }
