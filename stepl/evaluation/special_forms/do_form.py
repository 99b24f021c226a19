from stepl.evaluation.descend import Descend
from stepl.runtime_context import RuntimeContext
from stepl.types.environment import FrameChain
from stepl.types.state import EvaluationState, Reduced, SpecialForm


def do_form(
    states: tuple[EvaluationState, ...],
    frames: FrameChain,
    context: RuntimeContext,
) -> EvaluationState | Descend:
    match states:
        case ():
            return Reduced(True)
        case (Reduced() as last,):
            return last
        case (Reduced(), *rest):
            # earlier values are dropped; their effects have already happened
            return SpecialForm("do", tuple(rest))
        case (first, *rest):
            tail = tuple(rest)
            return Descend(first, lambda s: SpecialForm("do", (s,) + tail))
