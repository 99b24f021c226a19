"""Registry of special forms for the stepl evaluator.

Maps special-form names to reducers. Each reducer receives the operand
states, the active frame chain and the RuntimeContext, and returns either the
next state or a Descend instruction asking the stepper to step one operand.
The evaluator turns any list headed by one of these names into a SpecialForm
state before ordinary application is considered.
"""

from stepl.evaluation.special_forms.quote_form import quote_form
from stepl.evaluation.special_forms.if_form import if_form
from stepl.evaluation.special_forms.define_form import define_form
from stepl.evaluation.special_forms.do_form import do_form
from stepl.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "if": if_form,
    "def": define_form,
    "do": do_form,
    "lambda": lambda_form,
}
