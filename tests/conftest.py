"""Shared fixtures for hporecord tests."""

import math

import pytest

from hporecord import (
    Direction,
    EvalRecord,
    EvalState,
    ParamDef,
    Span,
    SpanDef,
    StudyRecord,
    ValueDef,
    ValueRange,
)


@pytest.fixture
def study():
    """Study exercising every parameter shape and a bounded objective."""
    return StudyRecord(
        id="s1",
        attrs={"owner": "ml-team", "dataset": "cifar10"},
        spans=[SpanDef("train"), SpanDef("eval")],
        params=[
            ParamDef.continuous("dropout", 0.0, 0.5),
            ParamDef.log_continuous("lr", 1e-5, 1.0),
            ParamDef.discrete("layers", 1.0, 8.0, 1.0),
            ParamDef.categorical("optimizer", ["adam", "sgd", "rmsprop"]),
        ],
        values=[
            ValueDef.new("acc", Direction.MAXIMIZE),
            ValueDef("loss", Direction.MINIMIZE, ValueRange(min=0.0)),
        ],
    )


@pytest.fixture
def evaluation():
    """Interim evaluation with an unassigned param and an unobserved value."""
    return EvalRecord(
        study="s1",
        trial=3,
        state=EvalState.INTERIM,
        spans=[Span(0.0, 12.5), Span(12.5, 14.0)],
        params=[0.1, 1e-3, math.nan, 2.0],
        values=[0.87, math.nan],
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep journal settings from the developer's environment out of tests."""
    for name in ("HPORECORD_JOURNAL", "HPORECORD_LOCK", "HPORECORD_SKIP_MALFORMED"):
        monkeypatch.delenv(name, raising=False)
