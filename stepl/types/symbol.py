from __future__ import annotations
import sys
import weakref


class Symbol:
    """A Lisp symbol. One live instance exists per name, so equal symbols are identical.

    The table holds its symbols weakly: a name nothing refers to any more,
    such as an abandoned gensym, drops out of it.
    """

    __slots__ = ("name", "__weakref__")
    __match_args__ = ("name",)

    _table: weakref.WeakValueDictionary[str, Symbol] = weakref.WeakValueDictionary()

    def __new__(cls, name: str) -> Symbol:
        symbol = cls._table.get(name)
        if symbol is None:
            symbol = super().__new__(cls)
            symbol.name = sys.intern(name)
            cls._table[symbol.name] = symbol
        return symbol

    def __reduce__(self):
        return Symbol, (self.name,)

    def __eq__(self, other: object) -> bool:
        return self is other or (isinstance(other, Symbol) and self.name == other.name)

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
