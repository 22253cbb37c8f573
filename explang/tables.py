"""Name tables used while compiling: labels, interned strings and symbols."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .function_body import FunctionBody
from .log import PanicError
from .operand import U16_MAX, Operand, label
from .types import Type


class Labels:
    """Global labels, each addressed by a 16-bit index."""

    def __init__(self) -> None:
        self._names: list[str] = []
        self._indices: dict[str, int] = {}

    def insert(self, name: str) -> Operand:
        """Add ``name`` unless already present; return its label operand."""
        index = self._indices.get(name)
        if index is None:
            index = len(self._names)
            if index > U16_MAX:
                raise PanicError("label index out of bounds")
            self._names.append(name)
            self._indices[name] = index
        return label(index)

    def at(self, index: int) -> str:
        if not 0 <= index < len(self._names):
            raise IndexError(f"label index {index} out of range")
        return self._names[index]

    def __len__(self) -> int:
        return len(self._names)


class StringInterner:
    """Keeps one shared copy of each distinct string."""

    def __init__(self) -> None:
        self._strings: dict[str, str] = {}

    def insert(self, text: str) -> str:
        """Return the stored copy equal to ``text``, storing it first if new.

        The empty string is never stored.
        """
        if not text:
            return ""
        return self._strings.setdefault(text, text)

    def __len__(self) -> int:
        return len(self._strings)


@dataclass(eq=False)
class Symbol:
    """A global symbol: its name, its type once known, and its function body."""

    name: str
    type: Type | None = None
    function_body: FunctionBody = field(default_factory=FunctionBody)


class SymbolTable:
    """Global symbols by name; looking up a new name creates its symbol."""

    def __init__(self) -> None:
        self._symbols: dict[str, Symbol] = {}

    def at(self, name: str) -> Symbol:
        """Return the symbol called ``name``, creating an empty one if needed."""
        symbol = self._symbols.get(name)
        if symbol is None:
            symbol = Symbol(name)
            self._symbols[name] = symbol
        return symbol

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def __len__(self) -> int:
        return len(self._symbols)