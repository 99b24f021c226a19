"""Session-scoped state shared by every evaluation in one stepl session.

A RuntimeContext is passed explicitly to every operation that needs it, so
several sessions can live side by side in one process without sharing
globals, macro flags or generated names.
"""

from __future__ import annotations

import logging
from itertools import count
from typing import Mapping, Optional

from stepl import LispValue
from stepl.config import get_lambda_prefix
from stepl.types.environment import Frame, EMPTY_CHAIN, resolve
from stepl.types.macro_registry import MacroRegistry

logger = logging.getLogger(__name__)


class RuntimeContext:
    """Globals, macro registry and fresh-name supply for one session."""

    __slots__ = ("globals", "macros", "lambda_prefix", "_name_counter")

    def __init__(
        self,
        bindings: Optional[Mapping[str, LispValue]] = None,
        macros: Optional[MacroRegistry] = None,
        lambda_prefix: Optional[str] = None,
    ):
        self.globals: Frame = {}
        self.macros: MacroRegistry = macros if macros is not None else MacroRegistry()
        self.lambda_prefix: str = (
            lambda_prefix if lambda_prefix is not None else get_lambda_prefix()
        )
        self._name_counter = count(1)
        if bindings:
            self.update(bindings)

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` in globals, replacing any previous binding."""
        logger.debug("define %s", name)
        self.globals[name] = value

    def undefine(self, name: str) -> bool:
        """Remove a global binding; returns whether one existed."""
        if name not in self.globals:
            return False
        logger.debug("undefine %s", name)
        del self.globals[name]
        return True

    def update(self, mapping: Mapping[str, LispValue]) -> None:
        """Merge a pre-populated table (usually primitives) into globals."""
        for name, value in mapping.items():
            self.globals[name] = value

    def lookup(self, name: str) -> LispValue:
        """Resolve `name` as the evaluator does at top level (globals only)."""
        return resolve(name, EMPTY_CHAIN, self.globals)

    def is_defined(self, name: str) -> bool:
        return name in self.globals

    def fresh_name(self, prefix: Optional[str] = None) -> str:
        """Return a name no earlier call on this context has returned."""
        p = self.lambda_prefix if prefix is None else prefix
        return f"{p}{next(self._name_counter)}"

    def __repr__(self) -> str:
        return f"<RuntimeContext globals={len(self.globals)} macros={len(self.macros)}>"
