"""Lexical environments for stepl.

A Frame maps names to evaluated values. A FrameChain is an immutable tuple of
frames, innermost first, owned by the closure (or the evaluation state) that
holds it. Globals is the single mutable frame shared by a RuntimeContext and
is searched only after the whole chain has missed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stepl import LispValue
from stepl.errors import UnresolvedSymbol

if TYPE_CHECKING:
    from stepl.types.function import Closure

Frame = dict[str, LispValue]
FrameChain = tuple[Frame, ...]

EMPTY_CHAIN: FrameChain = ()

REST_MARKER = "&"


def resolve(name: str, frames: FrameChain, globals_: Frame) -> LispValue:
    """Look up `name` innermost-first through `frames`, then in `globals_`.

    Raises UnresolvedSymbol if not found.
    """
    for frame in frames:
        if name in frame:
            return frame[name]
    if name in globals_:
        return globals_[name]
    raise UnresolvedSymbol(f"Can't resolve symbol: {name}")


def is_rest_param(name: str) -> bool:
    return name.startswith(REST_MARKER) and len(name) > len(REST_MARKER)


def bind_arguments(closure: Closure, args: list[LispValue]) -> Frame:
    """Build the frame for one invocation of `closure`.

    The closure's own name is bound first, to the closure itself, so the
    body can call itself without a global binding. Parameters are bound
    after it and shadow it on a name clash. A final `&name` parameter
    collects every trailing argument into a list bound to `name`.

    Binding is positional, pair by pair: surplus arguments are ignored and a
    parameter with no argument stays unbound, failing only if referenced.
    """
    params = closure.params
    frame: Frame = {closure.name: closure}

    if params and is_rest_param(params[-1]):
        positional = params[:-1]
        frame.update(zip(positional, args))
        frame[params[-1][len(REST_MARKER):]] = list(args[len(positional):])
        return frame

    frame.update(zip(params, args))
    return frame


def extend(frame: Frame, frames: FrameChain) -> FrameChain:
    """Return a new chain with `frame` pushed innermost onto `frames`."""
    return (frame,) + frames
