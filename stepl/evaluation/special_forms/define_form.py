from stepl.errors import SpecialFormError
from stepl.evaluation.descend import Descend
from stepl.runtime_context import RuntimeContext
from stepl.types.environment import FrameChain
from stepl.types.state import EvaluationState, PendingForm, Reduced, SpecialForm
from stepl.types.symbol import Symbol


def define_form(
    states: tuple[EvaluationState, ...],
    frames: FrameChain,
    context: RuntimeContext,
) -> EvaluationState | Descend:
    """
    (def name form)
    Evaluates `form` and binds the value to `name` in globals, replacing any
    earlier binding. Always defines globally, even inside a closure body.
    """
    match states:
        case (PendingForm(Symbol(name)), Reduced(value)):
            context.define(name, value)
            return Reduced(True)
        case (PendingForm(Symbol()) as name_state, value_state):
            return Descend(value_state, lambda s: SpecialForm("def", (name_state, s)))
    raise SpecialFormError("def requires a name and one form")
