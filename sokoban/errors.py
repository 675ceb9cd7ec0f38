"""Exception hierarchy for level loading and catalog construction."""

from __future__ import annotations


class SokobanError(Exception):
    """Base class for every engine error."""


class InvalidSymbol(SokobanError):
    """A level row contains a character outside the symbol table.

    Scoped to the single level being parsed: the parser discards that level
    and keeps going.
    """

    def __init__(self, symbol: str, row: int, column: int) -> None:
        self.symbol = symbol
        self.row = row
        self.column = column
        super().__init__(f'invalid symbol "{symbol}" at row {row}, column {column}')


class MalformedLevel(SokobanError):
    """A level violates a load-time invariant (e.g. player spawn count)."""

    def __init__(self, level_name: str, reason: str) -> None:
        self.level_name = level_name
        self.reason = reason
        super().__init__(f'level "{level_name}": {reason}')


class EmptyCatalog(SokobanError):
    """No playable level is left after parsing and validation."""
