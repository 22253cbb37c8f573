"""Interning of types so equal types share one instance."""

from __future__ import annotations

from collections.abc import Iterable

from . import types
from .types import Type


class TypeInterner:
    """Hands out a single shared instance for each distinct type."""

    def __init__(self) -> None:
        self._nil = types.nil_type()
        self._boolean = types.boolean_type()
        self._i64 = types.i64_type()
        self._tuples: dict[Type, Type] = {}
        self._functions: dict[Type, Type] = {}

    def nil_type(self) -> Type:
        return self._nil

    def boolean_type(self) -> Type:
        return self._boolean

    def i64_type(self) -> Type:
        return self._i64

    def tuple_type(self, elements: Iterable[Type]) -> Type:
        candidate = types.tuple_type(elements)
        return self._tuples.setdefault(candidate, candidate)

    def function_type(self, return_type: Type, argument_types: Iterable[Type]) -> Type:
        candidate = types.function_type(return_type, argument_types)
        return self._functions.setdefault(candidate, candidate)