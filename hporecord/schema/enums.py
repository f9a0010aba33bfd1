"""
Closed enumerations used by study and evaluation records.

All three encode on the wire as the upper-case variant name.
"""

from enum import Enum
from typing import Optional

import numpy as np


class Scale(str, Enum):
    """
    Sampling scale of a numerical parameter.

    Informational only: a downstream sampler decides how to transform
    the range.
    """

    LINEAR = "LINEAR"
    LOG = "LOG"

    @classmethod
    def default(cls) -> 'Scale':
        return cls.LINEAR

    def is_default(self) -> bool:
        return self is Scale.LINEAR


class Direction(str, Enum):
    """Optimization direction of an objective value."""

    MINIMIZE = "MINIMIZE"
    MAXIMIZE = "MAXIMIZE"

    def better(self, x: float, y: float) -> float:
        """
        Return the preferred of two observed values.

        NaN follows fmin/fmax semantics: if exactly one operand is NaN
        the other one is returned.

        Example:
            >>> Direction.MINIMIZE.better(3.0, 5.0)
            3.0
        """
        if self is Direction.MINIMIZE:
            return float(np.fmin(x, y))
        return float(np.fmax(x, y))

    def is_minimize(self) -> bool:
        return self is Direction.MINIMIZE

    def is_maximize(self) -> bool:
        return self is Direction.MAXIMIZE


class EvalState(str, Enum):
    """
    State of a trial evaluation.

    INTERIM is the only non-terminal state. A trial may be emitted many
    times while INTERIM; once it reaches a terminal state it keeps it.
    """

    COMPLETE = "COMPLETE"
    INTERIM = "INTERIM"
    FAILED = "FAILED"
    INFEASIBLE = "INFEASIBLE"

    def is_complete(self) -> bool:
        return self is EvalState.COMPLETE

    def is_interim(self) -> bool:
        return self is EvalState.INTERIM

    def is_failed(self) -> bool:
        return self is EvalState.FAILED

    def is_infeasible(self) -> bool:
        return self is EvalState.INFEASIBLE

    def is_terminal(self) -> bool:
        return self is not EvalState.INTERIM

    def can_follow(self, previous: Optional['EvalState']) -> bool:
        """Check whether this state may be emitted after ``previous``."""
        if previous is None or previous is EvalState.INTERIM:
            return True
        return self is previous
