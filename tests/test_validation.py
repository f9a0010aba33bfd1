"""
Tests for domain-consistency validation.

The schema accepts these inconsistencies; validation reports them.
"""

import math

from hporecord import (
    Direction,
    EvalRecord,
    EvalState,
    Numerical,
    ParamDef,
    Span,
    SpanDef,
    StudyRecord,
    ValueDef,
    ValueRange,
    validate_eval,
    validate_records,
    validate_study,
)


def _eval(trial=0, state=EvalState.COMPLETE, study="s1", **kwargs):
    fields = {
        "spans": [Span(0.0, 1.0), Span(1.0, 2.0)],
        "params": [0.1, 1e-3, 2.0, 0.0],
        "values": [0.9, 0.1],
    }
    fields.update(kwargs)
    return EvalRecord(study=study, trial=trial, state=state, **fields)


class TestValidateStudy:
    """Tests for validate_study()."""

    def test_valid_study(self, study):
        result = validate_study(study)
        assert result["valid"] is True
        assert result["errors"] == []

    def test_empty_id(self):
        result = validate_study(StudyRecord(id=""))
        assert not result["valid"]
        assert "non-empty" in result["errors"][0]

    def test_min_greater_than_max(self):
        """Representable in the schema, flagged here."""
        study = StudyRecord(id="s", params=[ParamDef.continuous("x", 1.0, 0.0)])
        result = validate_study(study)
        assert any("min (1.0) > max (0.0)" in e for e in result["errors"])

    def test_non_positive_step(self):
        study = StudyRecord(id="s", params=[ParamDef("x", Numerical(0.0, 1.0, step=0.0))])
        assert any("step" in e for e in validate_study(study)["errors"])

    def test_categorical_problems(self):
        study = StudyRecord(
            id="s",
            params=[
                ParamDef.categorical("empty", []),
                ParamDef.categorical("dup", ["a", "b", "a"]),
            ],
        )
        errors = validate_study(study)["errors"]
        assert any("empty" in e and "choices are empty" in e for e in errors)
        assert any("duplicate choice 'a'" in e for e in errors)

    def test_duplicate_names(self):
        study = StudyRecord(
            id="s",
            spans=[SpanDef("t"), SpanDef("t")],
            values=[ValueDef.new("v", Direction.MINIMIZE), ValueDef.new("v", Direction.MAXIMIZE)],
        )
        errors = validate_study(study)["errors"]
        assert any("duplicate span name 't'" in e for e in errors)
        assert any("duplicate value name 'v'" in e for e in errors)

    def test_inverted_value_range(self):
        study = StudyRecord(
            id="s",
            values=[ValueDef("loss", Direction.MINIMIZE, ValueRange(min=1.0, max=0.0))],
        )
        assert not validate_study(study)["valid"]


class TestValidateEval:
    """Tests for validate_eval()."""

    def test_matching_lengths(self, study):
        assert validate_eval(_eval(), study)["valid"]

    def test_length_mismatch(self, study):
        result = validate_eval(_eval(params=[0.1]), study)
        assert not result["valid"]
        assert "1 params, study declares 4" in result["errors"][0]

    def test_nan_entries_count_toward_length(self, study):
        evaluation = _eval(params=[math.nan] * 4, values=[math.nan, math.nan])
        assert validate_eval(evaluation, study)["valid"]

    def test_negative_span_warns(self, study):
        result = validate_eval(_eval(spans=[Span(2.0, 1.0), Span(1.0, 2.0)]), study)
        assert result["valid"]
        assert "ends before it starts" in result["warnings"][0]


class TestValidateRecords:
    """Tests for validate_records()."""

    def test_valid_stream(self, study):
        records = [
            study,
            _eval(trial=0, state=EvalState.INTERIM),
            _eval(trial=0, state=EvalState.INTERIM),
            _eval(trial=0, state=EvalState.COMPLETE),
            _eval(trial=1, state=EvalState.FAILED),
        ]
        result = validate_records(records)
        assert result["valid"], result["errors"]
        assert result["n_records"] == 5

    def test_unknown_study(self, study):
        result = validate_records([study, _eval(study="other")])
        assert not result["valid"]
        assert "unknown study 'other'" in result["errors"][0]

    def test_eval_before_study(self, study):
        assert not validate_records([_eval(), study])["valid"]

    def test_duplicate_study(self, study):
        result = validate_records([study, study])
        assert any("declared more than once" in e for e in result["errors"])

    def test_terminal_state_changed(self, study):
        records = [
            study,
            _eval(trial=0, state=EvalState.COMPLETE),
            _eval(trial=0, state=EvalState.FAILED),
        ]
        result = validate_records(records)
        assert not result["valid"]
        assert "FAILED after terminal COMPLETE" in result["errors"][0]

    def test_terminal_state_repeated(self, study):
        records = [study, _eval(state=EvalState.COMPLETE), _eval(state=EvalState.COMPLETE)]
        assert validate_records(records)["valid"]

    def test_back_to_interim(self, study):
        records = [study, _eval(state=EvalState.INFEASIBLE), _eval(state=EvalState.INTERIM)]
        assert not validate_records(records)["valid"]
