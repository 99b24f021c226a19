"""Top-level evaluation entry points.

`evaluate` is what a REPL or a test calls: the form is macro-expanded in full,
then run on the stepping evaluator. `start` does the same expansion but hands
back the Evaluation without running it, for callers that want to drive the
steps themselves.
"""

from __future__ import annotations

from stepl import SExpression, LispValue
from stepl.evaluation.evaluator import Evaluation
from stepl.evaluation.macroexpand import macro_expand_all
from stepl.runtime_context import RuntimeContext
from stepl.types.state import PendingForm


def start(form: SExpression, context: RuntimeContext) -> Evaluation:
    return Evaluation(context, PendingForm(macro_expand_all(form, context)))


def evaluate(form: SExpression, context: RuntimeContext) -> LispValue:
    return start(form, context).run()
