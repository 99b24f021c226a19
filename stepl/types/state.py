"""Reified evaluation states.

Each class below is one conceptual frame of a recursive evaluator turned into
data. States are immutable: a reduction step always builds a new state and
never edits the one it was given.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stepl import SExpression, LispValue
from stepl.types.environment import FrameChain
from stepl.types.function import Function


@dataclass(frozen=True)
class PendingForm:
    """A form that has not been looked at yet."""
    form: SExpression


@dataclass(frozen=True)
class Reduced:
    """Terminal state holding a fully evaluated value."""
    value: LispValue


@dataclass(frozen=True)
class Sequence:
    """Ordinary application in progress.

    Positions before `index` are always Reduced; `index` only moves forward.
    """
    states: tuple[EvaluationState, ...]
    index: int = 0


@dataclass(frozen=True)
class Applying:
    function: Function
    args: tuple[LispValue, ...]


@dataclass(frozen=True)
class InClosure:
    """A closure body running with `frames` pushed as the active chain.

    The chain is released exactly once, when `inner` has reduced and this
    node is replaced by the result.
    """
    inner: EvaluationState
    frames: FrameChain = field(repr=False)


@dataclass(frozen=True)
class SpecialForm:
    name: str
    states: tuple[EvaluationState, ...]


EvaluationState = PendingForm | Reduced | Sequence | Applying | InClosure | SpecialForm
