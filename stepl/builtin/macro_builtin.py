"""Builtin macro transformers for stepl (implemented in Python), and the
facility that flags a global function as a macro.
"""

from stepl import SExpression, LispValue
from stepl.errors import ArityError, LispTypeError
from stepl.runtime_context import RuntimeContext
from stepl.types.function import Action, Primitive, is_function
from stepl.types.symbol import Symbol

DEF = Symbol("def")
DO = Symbol("do")
LAMBDA = Symbol("lambda")


def _body(forms: list[SExpression]) -> SExpression:
    # several body forms run in sequence, keeping the last value
    if len(forms) == 1:
        return forms[0]
    return [DO, *forms]


def let_macro(args: list[SExpression]) -> SExpression:
    """
    (let ((var1 val1) (var2 val2) ...) body...)
    => ((lambda (var1 var2 ...) body) val1 val2 ...)
    """
    if len(args) < 2:
        raise ArityError("let requires bindings and at least one body form")

    bindings = args[0]
    if not isinstance(bindings, list):
        raise LispTypeError("let bindings must be a list")

    vars_ = []
    vals_ = []
    for b in bindings:
        if not isinstance(b, list) or len(b) != 2 or not isinstance(b[0], Symbol):
            raise LispTypeError(f"let binding must be (name value), got {b!r}")
        var, val = b
        vars_.append(var)
        vals_.append(val)

    return [[LAMBDA, vars_, _body(list(args[1:]))], *vals_]


def let_star_macro(args: list[SExpression]) -> SExpression:
    """
    (let* ((v1 e1) (v2 e2) ...) body...)
    => (let ((v1 e1)) (let* ((v2 e2) ...) body...))
    """
    if len(args) < 2:
        raise ArityError("let* requires bindings and at least one body form")
    bindings = args[0]
    body = list(args[1:])
    if not isinstance(bindings, list):
        raise LispTypeError("let* bindings must be a list")
    if not bindings:
        return _body(body)
    first, rest = bindings[0], bindings[1:]
    return [Symbol("let"), [first], [Symbol("let*"), rest, *body]]


def defun_macro(args: list[SExpression]) -> SExpression:
    """
    (defun name (params...) body...)
    => (def name (lambda name (params...) body))
    """
    if len(args) < 3:
        raise ArityError("defun requires a name, a parameter list and a body")
    name, params, *body = args
    if not isinstance(name, Symbol):
        raise LispTypeError(f"defun name must be a symbol, got {name!r}")
    return [DEF, name, [LAMBDA, name, params, _body(body)]]


def defmacro(context: RuntimeContext, name: str, transformer: LispValue) -> None:
    """Bind `transformer` globally under `name` and flag `name` as a macro."""
    if not is_function(transformer):
        raise LispTypeError(f"macro transformer for {name} must be a function")
    context.define(name, transformer)
    context.macros.define_macro(name)


def defmacro_action(context: RuntimeContext, args: list[LispValue]) -> bool:
    """(defmacro 'name transformer): available to programs as an ordinary call."""
    if len(args) != 2:
        raise ArityError("defmacro requires a name and a transformer")
    name, transformer = args
    if not isinstance(name, Symbol):
        raise LispTypeError(f"defmacro name must be a symbol, got {name!r}")
    defmacro(context, name.name, transformer)
    return True


MACROS = {
    "let": let_macro,
    "let*": let_star_macro,
    "defun": defun_macro,
}


def register(context: RuntimeContext) -> None:
    """Register the builtin macros and the defmacro action."""
    for name, fn in MACROS.items():
        defmacro(context, name, Primitive(name, fn))
    context.define("defmacro", Action("defmacro", defmacro_action))
