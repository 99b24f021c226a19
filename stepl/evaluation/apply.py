"""Application rules for stepl.

Turns an `Applying(function, args)` state into its successor:
- Primitive: called with the argument list, result wrapped in Reduced.
- Action: called with the RuntimeContext and the argument list.
- Closure: a fresh frame is pushed onto the captured chain and the body is
  scheduled inside an InClosure node that owns that chain.
"""

import logging

from stepl import LispValue
from stepl.errors import NotAFunction
from stepl.runtime_context import RuntimeContext
from stepl.types.environment import bind_arguments, extend
from stepl.types.function import Action, Closure, Primitive
from stepl.types.state import EvaluationState, InClosure, PendingForm, Reduced

logger = logging.getLogger(__name__)


def apply(
    function: LispValue,
    args: tuple[LispValue, ...],
    context: RuntimeContext,
) -> EvaluationState:
    match function:
        case Primitive():
            return Reduced(function(list(args)))
        case Action():
            return Reduced(function(context, list(args)))
        case Closure():
            frame = bind_arguments(function, list(args))
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("enter %s with %d argument(s)", function.name, len(args))
            return InClosure(PendingForm(function.body), extend(frame, function.frames))
    raise NotAFunction(f"Cannot apply non-function {function!r}")
