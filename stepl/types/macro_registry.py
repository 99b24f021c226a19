from __future__ import annotations

from typing import Iterable, Iterator


class MacroRegistry:
    """
    Names of globals currently flagged as macros.

    The registry only records *which* global names are macros; the transformer
    itself is the function bound to that name in the context's globals. The
    evaluator and the expander query it on every call and never cache the
    answer, so flags added or removed between evaluations take effect at once.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._names: set[str] = set(names)

    def define_macro(self, name: str) -> None:
        self._names.add(name)

    def undefine_macro(self, name: str) -> None:
        self._names.discard(name)

    def is_macro(self, name: str) -> bool:
        return name in self._names

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"MacroRegistry({sorted(self._names)!r})"
