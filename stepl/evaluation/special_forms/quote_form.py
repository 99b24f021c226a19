from stepl.errors import SpecialFormError
from stepl.runtime_context import RuntimeContext
from stepl.types.environment import FrameChain
from stepl.types.state import EvaluationState, PendingForm, Reduced


def quote_form(
    states: tuple[EvaluationState, ...],
    frames: FrameChain,
    context: RuntimeContext,
) -> EvaluationState:
    """(quote form): the operand is returned as data, never evaluated."""
    match states:
        case (PendingForm(form),):
            return Reduced(form)
    raise SpecialFormError("quote requires one form")
