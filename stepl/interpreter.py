from __future__ import annotations

from typing import Optional

from stepl import SExpression, LispValue
from stepl.builtin.env_builtin import register
from stepl.builtin.macro_builtin import register as register_macros
from stepl.eval import evaluate, start
from stepl.evaluation.evaluator import Evaluation
from stepl.evaluation.macroexpand import macro_expand_all
from stepl.errors import LispSyntaxError
from stepl.reader.parser import read
from stepl.runtime_context import RuntimeContext


class Interpreter:
    """
    Evaluates stepl source text against one session context.
    Each top-level form is expanded and run before the next one is expanded, so
    a macro defined by one form is available to the forms after it.
    """
    def __init__(self, prelude: str | None = None, context: Optional[RuntimeContext] = None):
        self.context = context if context is not None else RuntimeContext()
        register(self.context)
        register_macros(self.context)

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of Lisp code for its definitions only."""
        for expr in read(code):
            evaluate(expr, self.context)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`.

        Returns None for empty input, the value for a single form, and the
        list of values when there are several.
        """
        results = [evaluate(expr, self.context) for expr in read(code)]
        if not results:
            return None
        if len(results) == 1:
            return results[0]
        return results

    def macroexpand(self, code: str) -> SExpression:
        return macro_expand_all(self._single_form(code), self.context)

    def start(self, code: str) -> Evaluation:
        """Expand one form and return its Evaluation without running it."""
        return start(self._single_form(code), self.context)

    @staticmethod
    def _single_form(code: str) -> SExpression:
        forms = read(code)
        if len(forms) != 1:
            raise LispSyntaxError(f"expected exactly one form, got {len(forms)}")
        return forms[0]
