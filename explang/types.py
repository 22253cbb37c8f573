"""Types of the intermediate representation and their layout."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto


class TypeKind(Enum):
    NIL = auto()
    BOOLEAN = auto()
    I64 = auto()
    TUPLE = auto()
    FUNCTION = auto()


_SCALAR_NAMES = {
    TypeKind.NIL: "nil",
    TypeKind.BOOLEAN: "bool",
    TypeKind.I64: "i64",
}


@dataclass(frozen=True)
class Type:
    """A type; equality is structural.

    For tuples ``elements`` holds the element types; for functions it holds
    the argument types and ``return_type`` the result.
    """

    kind: TypeKind
    elements: tuple[Type, ...] = field(default=())
    return_type: Type | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def is_scalar(self) -> bool:
        return self.kind in _SCALAR_NAMES

    def _format_elements(self) -> str:
        return "(" + ", ".join(str(t) for t in self.elements) + ")"

    def __str__(self) -> str:
        if self.kind in _SCALAR_NAMES:
            return _SCALAR_NAMES[self.kind]
        if self.kind is TypeKind.TUPLE:
            return self._format_elements()
        return f"fn {self._format_elements()} -> {self.return_type}"


def nil_type() -> Type:
    return Type(TypeKind.NIL)


def boolean_type() -> Type:
    return Type(TypeKind.BOOLEAN)


def i64_type() -> Type:
    return Type(TypeKind.I64)


def tuple_type(elements: Iterable[Type]) -> Type:
    return Type(TypeKind.TUPLE, tuple(elements))


def function_type(return_type: Type, argument_types: Iterable[Type]) -> Type:
    return Type(TypeKind.FUNCTION, tuple(argument_types), return_type)


def size_of(type_: Type) -> int:
    """Size in bytes of a value of ``type_``."""
    if type_.is_scalar():
        return 8
    if type_.kind is TypeKind.TUPLE:
        return sum(size_of(element) for element in type_.elements)
    raise ValueError(f"size of {type_} is not defined")


def align_of(type_: Type) -> int:
    """Alignment in bytes of a value of ``type_``."""
    if type_.is_scalar() or type_.kind is TypeKind.TUPLE:
        return 8
    raise ValueError(f"alignment of {type_} is not defined")