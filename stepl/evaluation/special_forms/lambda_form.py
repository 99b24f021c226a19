from stepl import SExpression
from stepl.errors import SpecialFormError
from stepl.runtime_context import RuntimeContext
from stepl.types.environment import FrameChain
from stepl.types.function import Closure
from stepl.types.state import EvaluationState, PendingForm, Reduced
from stepl.types.symbol import Symbol


def param_names(params: SExpression) -> tuple[str, ...]:
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise SpecialFormError(f"lambda parameters must be a list of symbols, got {params!r}")
    return tuple(p.name for p in params)


def lambda_form(
    states: tuple[EvaluationState, ...],
    frames: FrameChain,
    context: RuntimeContext,
) -> EvaluationState:
    """
    (lambda name (params...) body) or (lambda (params...) body)

    The closure captures the chain active where the lambda form is reduced.
    An anonymous lambda gets a fresh name from the context, so every closure
    can refer to itself by name from its own body.
    """
    match states:
        case (PendingForm(Symbol(name)), PendingForm(params), PendingForm(body)):
            return Reduced(Closure(name, frames, param_names(params), body))
        case (PendingForm(params), PendingForm(body)):
            return Reduced(Closure(context.fresh_name(), frames, param_names(params), body))
    raise SpecialFormError("lambda requires 2 or 3 forms")
