from stepl.errors import SpecialFormError
from stepl.evaluation.descend import Descend
from stepl.runtime_context import RuntimeContext
from stepl.types.environment import FrameChain
from stepl.types.state import EvaluationState, Reduced, SpecialForm


def if_form(
    states: tuple[EvaluationState, ...],
    frames: FrameChain,
    context: RuntimeContext,
) -> EvaluationState | Descend:
    # Only the boolean False is false; 0, "" and () are all true.
    match states:
        case (Reduced(False), _, else_state):
            return else_state
        case (Reduced(), then_state, _):
            return then_state
        case (cond_state, then_state, else_state):
            return Descend(
                cond_state, lambda s: SpecialForm("if", (s, then_state, else_state))
            )
    raise SpecialFormError("if requires 3 forms")
