"""Function values for stepl: primitives, effectful actions and closures."""

from __future__ import annotations

from io import StringIO
from typing import Callable, TYPE_CHECKING

from stepl import SExpression, LispValue

if TYPE_CHECKING:
    from stepl.runtime_context import RuntimeContext
    from stepl.types.environment import FrameChain


class Primitive:
    """A pure built-in: `fn(args)` returns a value or raises an EvalError."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<primitive {self.name}>"


class Action:
    """An effectful built-in, run against the session's RuntimeContext."""

    __slots__ = ("name", "fn")

    def __init__(
        self, name: str, fn: Callable[[RuntimeContext, list[LispValue]], LispValue]
    ):
        self.name = name
        self.fn = fn

    def __call__(self, context: RuntimeContext, args: list[LispValue]) -> LispValue:
        return self.fn(context, args)

    def __repr__(self) -> str:
        return f"<action {self.name}>"


class Closure:
    """A user function: parameters and a body closed over a frame chain.

    `frames` is the snapshot of the lexical chain taken when the lambda form
    was reduced. Applying the closure never mutates it, it only prepends a
    fresh frame.
    """

    __slots__ = ("name", "frames", "params", "body")

    def __init__(
        self,
        name: str,
        frames: FrameChain,
        params: tuple[str, ...],
        body: SExpression,
    ):
        self.name = name
        self.frames = frames
        self.params = params
        self.body = body

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda ")
            buffer.write(self.name)
            buffer.write(" (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<closure {self.name}>"


Function = Primitive | Action | Closure


def is_function(value: LispValue) -> bool:
    return isinstance(value, (Primitive, Action, Closure))
