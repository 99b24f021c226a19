from __future__ import annotations

from typing import Callable, Optional

from stepl.types.environment import FrameChain


class Descend:
    """Reducer instruction: step `child` once, then `rebuild` its parent.

    Returned instead of a new state by every rule whose whole effect is
    "step this sub-state once and keep the shape". The stepper follows these
    instructions down to the single reducible leaf without recursing, then
    applies the rebuilds bottom-up. `frames`, when set, becomes the active
    chain for everything below the parent.
    """

    __slots__ = ("child", "rebuild", "frames")

    def __init__(self, child, rebuild: Callable, frames: Optional[FrameChain] = None):
        self.child = child
        self.rebuild = rebuild
        self.frames = frames
