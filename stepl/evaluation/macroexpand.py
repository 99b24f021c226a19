"""Macro expansion for stepl.

A macro is an ordinary function bound in globals whose name is flagged in
the context's MacroRegistry. Expanding a call applies that function to the
*unevaluated* operand forms, running it on the same stepping evaluator, and
uses the returned value as the replacement form.

Expansion is leftmost-outermost: a form is expanded at its head until it is
no longer a macro call, then each element of the result is expanded in turn.
Nothing under a `quote` written in the input form is expanded.
"""

from __future__ import annotations

import logging

from stepl import SExpression
from stepl.errors import NotAFunction
from stepl.evaluation.evaluator import run
from stepl.runtime_context import RuntimeContext
from stepl.types.function import is_function
from stepl.types.state import Applying
from stepl.types.symbol import Symbol

logger = logging.getLogger(__name__)

QUOTE = Symbol("quote")


def is_macro_call(form: SExpression, context: RuntimeContext) -> bool:
    """True for a non-empty list headed by a symbol currently flagged as a macro."""
    match form:
        case [Symbol(name), *_]:
            return context.macros.is_macro(name)
    return False


def is_quote_form(form: SExpression) -> bool:
    return isinstance(form, list) and bool(form) and form[0] == QUOTE


def expand_1(form: SExpression, context: RuntimeContext) -> SExpression:
    """Expand only the head-position macro, if there is one."""
    if not is_macro_call(form, context):
        return form

    head, *operands = form
    transformer = context.lookup(head.name)
    if not is_function(transformer):
        raise NotAFunction(f"macro {head} is bound to a non-function: {transformer!r}")

    expansion = run(Applying(transformer, tuple(operands)), context)
    logger.debug("expanded (%s ...) -> %r", head, expansion)
    return expansion


def macro_expand(form: SExpression, context: RuntimeContext) -> SExpression:
    """Expand at the head until the form is no longer a macro call.

    A macro that always expands into another call of itself never returns.
    """
    while is_macro_call(form, context):
        form = expand_1(form, context)
    return form


def macro_expand_all(form: SExpression, context: RuntimeContext) -> SExpression:
    """Expand every macro call in `form`, outermost first, skipping quoted input."""
    if is_quote_form(form):
        return form

    expanded = macro_expand(form, context)
    # only a quote written in the input is skipped; elements of an expansion
    # are expanded even when the expansion is headed by quote
    if isinstance(expanded, list):
        return [macro_expand_all(x, context) for x in expanded]
    return expanded
