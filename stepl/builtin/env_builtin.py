"""Built-in functions for the stepl runtime context.

This module defines core arithmetic, comparison, list processing and
predicates as Primitives, plus the few effectful Actions (print, gensym,
undef), and registers them into a RuntimeContext.
"""
from __future__ import annotations

import logging

from stepl import LispValue
from stepl.errors import ArityError, EvalError, LispTypeError
from stepl.runtime_context import RuntimeContext
from stepl.types.function import Action, Primitive
from stepl.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    if not all(_is_number(x) for x in args):
        raise LispTypeError(f"All arguments to {name} must be numbers")
    return args


def _exactly(name: str, n: int, args: list[LispValue]) -> None:
    if len(args) != n:
        raise ArityError(f"{name} requires exactly {n} argument(s), got {len(args)}")


def is_equal(a, b) -> bool:
    """Deep equality for Lisp values; numbers compare by value, lists element-wise."""
    if a is b:
        return True
    if _is_number(a) and _is_number(b):
        return a == b
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments."""
    return sum(_numbers("+", args))


def sub(args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise ArityError("- requires at least 1 argument")
    _numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(args: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    result = 1
    for x in _numbers("*", args):
        result *= x
    return result


def div(args: list[LispValue]) -> LispValue:
    """Divide left-to-right; exact integer quotients stay integers."""
    if len(args) < 2:
        raise ArityError("/ requires at least 2 arguments")
    _numbers("/", args)
    result = args[0]
    for x in args[1:]:
        if x == 0:
            raise EvalError("Division by zero")
        if isinstance(result, int) and isinstance(x, int) and result % x == 0:
            result //= x
        else:
            result /= x
    return result


def _chain(name: str, op):
    def compare(args: list[LispValue]) -> bool:
        _numbers(name, args)
        return all(op(a, b) for a, b in zip(args, args[1:]))
    compare.__doc__ = f"Chainable {name}: true if it holds for every adjacent pair."
    return compare


def equals(args: list[LispValue]) -> bool:
    """True if all arguments are equal (or there are fewer than two)."""
    return all(is_equal(args[0], other) for other in args[1:]) if args else True


def logical_not(args: list[LispValue]) -> bool:
    """Only the boolean false is falsey."""
    _exactly("not", 1, args)
    return args[0] is False


# -------------------------------
# Lists
# -------------------------------
def list_builtin(args: list[LispValue]) -> list[LispValue]:
    return list(args)


def cons(args: list[LispValue]) -> list[LispValue]:
    """Return a new list with head prepended to tail (non-destructive)."""
    _exactly("cons", 2, args)
    head, tail = args
    if not isinstance(tail, list):
        raise LispTypeError(f"cons requires a list as its second argument, got {tail!r}")
    return [head] + tail


def car(args: list[LispValue]) -> LispValue:
    """Return the first element of a non-empty list."""
    _exactly("car", 1, args)
    xs = args[0]
    if not isinstance(xs, list) or not xs:
        raise LispTypeError(f"car requires a non-empty list, got {xs!r}")
    return xs[0]


def cdr(args: list[LispValue]) -> list[LispValue]:
    """Return all but the first element of a non-empty list."""
    _exactly("cdr", 1, args)
    xs = args[0]
    if not isinstance(xs, list) or not xs:
        raise LispTypeError(f"cdr requires a non-empty list, got {xs!r}")
    return xs[1:]


def null(args: list[LispValue]) -> bool:
    _exactly("null?", 1, args)
    return args[0] == []


def is_symbol(args: list[LispValue]) -> bool:
    _exactly("symbol?", 1, args)
    return isinstance(args[0], Symbol)


# -------------------------------
# Actions
# -------------------------------
def print_builtin(context: RuntimeContext, args: list[LispValue]) -> bool:
    print(*(str(a) for a in args))
    return True


def gensym(context: RuntimeContext, args: list[LispValue]) -> Symbol:
    """(gensym) or (gensym prefix): a symbol no earlier call has produced."""
    if len(args) > 1:
        raise ArityError("gensym takes at most 1 argument: (gensym [prefix])")
    prefix = "G"
    if args:
        p = args[0]
        if isinstance(p, Symbol):
            prefix = p.name
        elif isinstance(p, str):
            prefix = p
        else:
            raise LispTypeError("gensym prefix must be a Symbol or string")
    return Symbol(context.fresh_name(prefix))


def undef(context: RuntimeContext, args: list[LispValue]) -> bool:
    """(undef 'name): remove a global binding; true if there was one."""
    _exactly("undef", 1, args)
    name = args[0]
    if not isinstance(name, Symbol):
        raise LispTypeError(f"undef requires a symbol, got {name!r}")
    return context.undefine(name.name)


PRIMITIVES = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "eq?": equals,
    "<": _chain("<", lambda a, b: a < b),
    "<=": _chain("<=", lambda a, b: a <= b),
    ">": _chain(">", lambda a, b: a > b),
    ">=": _chain(">=", lambda a, b: a >= b),
    "not": logical_not,
    "list": list_builtin,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "null?": null,
    "symbol?": is_symbol,
}

ACTIONS = {
    "print": print_builtin,
    "gensym": gensym,
    "undef": undef,
}


def register(context: RuntimeContext) -> None:
    """Register all builtin functions into the given context's globals."""
    table = {name: Primitive(name, fn) for name, fn in PRIMITIVES.items()}
    table.update({name: Action(name, fn) for name, fn in ACTIONS.items()})
    context.update(table)
    logger.debug("registered %d builtins", len(table))
