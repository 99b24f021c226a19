"""Core stepper and driver for the stepl interpreter.

Evaluation is a state machine rather than a recursive tree walk: every frame a
recursive evaluator would keep on the Python stack is a state object instead
(see stepl.types.state). `reduce_state` is the single reducer, `step` applies
it exactly once, and `Evaluation` drives a state to its value. Because no
step recurses on the Python stack, programs can nest as deeply as memory
allows, and an outside caller can pause between any two steps.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from stepl import LispValue
from stepl.config import trace_enabled
from stepl.errors import InternalInvariantViolation, NotAFunction, SteplError
from stepl.evaluation.apply import apply
from stepl.evaluation.descend import Descend
from stepl.evaluation.special_forms import SPECIAL_FORMS
from stepl.runtime_context import RuntimeContext
from stepl.types.environment import EMPTY_CHAIN, FrameChain, resolve
from stepl.types.function import is_function
from stepl.types.state import (
    Applying,
    EvaluationState,
    InClosure,
    PendingForm,
    Reduced,
    Sequence,
    SpecialForm,
)
from stepl.types.symbol import Symbol

logger = logging.getLogger(__name__)


def reduce_state(
    state: EvaluationState, frames: FrameChain, context: RuntimeContext
) -> EvaluationState | Descend:
    """
    One reduction of `state` with `frames` as the active lexical chain.
    Returns either the successor state or a Descend naming the sub-state
    that must be stepped instead.
    """
    match state:
        case Reduced():
            return state

        case Applying(function, args):
            return apply(function, args, context)

        # Leaving the body releases the chain the closure pushed.
        case InClosure(Reduced() as result, _):
            return result
        # TODO: collapse nested InClosure nodes when the body is in tail position.
        case InClosure(inner, chain):
            return Descend(inner, lambda s: InClosure(s, chain), chain)

        case PendingForm(Symbol(name)):
            return Reduced(resolve(name, frames, context.globals))
        case PendingForm([]):
            return Reduced([])
        case PendingForm([Symbol(name), *operands]) if name in SPECIAL_FORMS:
            return SpecialForm(name, tuple(PendingForm(f) for f in operands))
        case PendingForm([Symbol(name), *_]) if context.macros.is_macro(name):
            raise InternalInvariantViolation(
                f"macro call ({name} ...) reached the evaluator unexpanded"
            )
        case PendingForm(list() as elements):
            return Sequence(tuple(PendingForm(f) for f in elements), 0)
        case PendingForm(literal):
            return Reduced(literal)

        case Sequence(states, index) if index >= len(states):
            return _application(states)
        case Sequence(states, index) if isinstance(states[index], Reduced):
            return Sequence(states, index + 1)
        case Sequence(states, index):
            return Descend(
                states[index],
                lambda s: Sequence(states[:index] + (s,) + states[index + 1:], index),
            )

        case SpecialForm(name, operands):
            reducer = SPECIAL_FORMS.get(name)
            if reducer is None:
                raise InternalInvariantViolation(f"unknown special form {name}")
            return reducer(operands, frames, context)

    raise InternalInvariantViolation(f"not an evaluation state: {state!r}")


def _application(states: tuple[EvaluationState, ...]) -> Applying:
    # every position is Reduced once the index has run off the end
    match states:
        case (Reduced(function), *args) if is_function(function):
            return Applying(function, tuple(s.value for s in args))
        case (Reduced(head), *_):
            raise NotAFunction(f"function required in application position, got {head!r}")
    raise InternalInvariantViolation("empty application")


def _step(state: EvaluationState, context: RuntimeContext) -> tuple[EvaluationState, int]:
    """Step once; also report how many closure chains were active at the leaf.

    Walks from the root to the leaf and back on every call, so one step costs
    time proportional to the nesting depth. Evaluation keeps its place
    between steps instead.
    """
    frames = EMPTY_CHAIN
    depth = 0
    rebuilds = []
    node = state
    while True:
        result = reduce_state(node, frames, context)
        if not isinstance(result, Descend):
            break
        rebuilds.append(result.rebuild)
        if result.frames is not None:
            frames = result.frames
            depth += 1
        node = result.child
    for rebuild in reversed(rebuilds):
        result = rebuild(result)
    return result, depth


def step(state: EvaluationState, context: RuntimeContext) -> EvaluationState:
    """Perform exactly one reduction and return the new state."""
    return _step(state, context)[0]


class Evaluation:
    """
    Owns one active state and steps it to completion.

    Callers that want to time-slice, single-step or interleave several
    evaluations use `step()` or iterate `steps()`; everyone else calls `run()`.
    Abandoning an Evaluation part way is safe: closure frames live inside its
    state and go away with it.

    Between steps the state is held as a focus (the sub-state the next step
    starts from) plus the path of parents above it, each entry a
    (rebuild, active frames, depth) triple. A step only moves along that path
    near the focus, so `run()` costs the same per step at any depth. The
    whole state is rebuilt only when `state` is read.
    """

    __slots__ = ("context", "step_count", "depth", "_focus", "_path", "_trace")

    def __init__(self, context: RuntimeContext, state: EvaluationState):
        self.context = context
        self.step_count = 0
        # closure chains active at the most recent step
        self.depth = 0
        self._focus = state
        self._path: list[tuple[Callable, FrameChain, int]] = []
        self._trace = trace_enabled()

    @property
    def state(self) -> EvaluationState:
        state = self._focus
        for rebuild, _, _ in reversed(self._path):
            state = rebuild(state)
        return state

    @property
    def done(self) -> bool:
        return not self._path and isinstance(self._focus, Reduced)

    @property
    def value(self) -> LispValue:
        if not self.done:
            raise SteplError("evaluation has not finished")
        return self._focus.value

    def _advance(self) -> None:
        path = self._path
        focus = self._focus
        popped = []
        mark = None
        try:
            # a reduced focus hands its value back to the parent waiting on it
            while isinstance(focus, Reduced) and path:
                popped.append(path.pop())
                focus = popped[-1][0](focus)
            mark = len(path)
            frames, depth = (path[-1][1], path[-1][2]) if path else (EMPTY_CHAIN, 0)
            while True:
                result = reduce_state(focus, frames, self.context)
                if not isinstance(result, Descend):
                    break
                if result.frames is not None:
                    frames = result.frames
                    depth += 1
                path.append((result.rebuild, frames, depth))
                focus = result.child
        except Exception:
            # leave the evaluation exactly as it was before the failing step
            if mark is not None:
                del path[mark:]
            path.extend(reversed(popped))
            raise
        self._focus = result
        self.step_count += 1
        self.depth = 0 if self.done else depth
        if self._trace:
            logger.debug(
                "step %d depth %d -> %s", self.step_count, self.depth, type(result).__name__
            )

    def step(self) -> EvaluationState:
        self._advance()
        return self.state

    def steps(self) -> Iterator[EvaluationState]:
        """Yield every successive state until the evaluation is done."""
        while not self.done:
            yield self.step()

    def run(self) -> LispValue:
        while not self.done:
            self._advance()
        return self._focus.value


def run(state: EvaluationState, context: RuntimeContext) -> LispValue:
    """Drive `state` to completion and return its value. No step limit applies."""
    return Evaluation(context, state).run()
