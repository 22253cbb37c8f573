"""Front-end building blocks for the exp language: types, operands, constants, tables, options and a compilation context."""

__version__ = "0.1.0"