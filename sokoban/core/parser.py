"""Level text parser.

Format (one file, many levels)::

    #####
    #@$.#
    #####
    ; Level name

Rows of symbols form a block; the ``;`` header line that *follows* a block
closes and names it. Lines after the last header are ignored. Files that open
with a header and end with rows are read the other way round: each header
names the rows below it. A block with an unknown symbol is skipped and
reported; the rest of the file still loads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from sokoban.core.enums import Occupant, Terrain
from sokoban.core.level import Level
from sokoban.core.models import SPACE_CELL, Cell
from sokoban.errors import InvalidSymbol, SokobanError

logger = logging.getLogger(__name__)

# Text symbol -> cell
SYMBOL_TABLE: dict[str, Cell] = {
    " ": Cell(Terrain.FLOOR),
    "$": Cell(Terrain.FLOOR, Occupant.CRATE),
    "@": Cell(Terrain.FLOOR, Occupant.PLAYER),
    ".": Cell(Terrain.TARGET),
    "*": Cell(Terrain.TARGET, Occupant.CRATE),
    "+": Cell(Terrain.TARGET, Occupant.PLAYER),
    "#": Cell(Terrain.WALL),
}

CELL_SYMBOLS: dict[Cell, str] = {cell: symbol for symbol, cell in SYMBOL_TABLE.items()}
CELL_SYMBOLS[SPACE_CELL] = " "

HEADER_PREFIX = ";"

SkipCallback = Callable[[str, str], None]


@dataclass(frozen=True, slots=True)
class LevelResult:
    """Outcome of building one level: exactly one of *level* / *error* is set."""

    name: str
    level: Level | None = None
    error: SokobanError | None = None

    @property
    def ok(self) -> bool:
        return self.level is not None


def is_header(line: str) -> bool:
    return line.lstrip().startswith(HEADER_PREFIX)


def header_name(line: str) -> str:
    return line.strip("; ")


def transform_row(line: str, row: int = 0) -> list[Cell]:
    """Map one text row to cells.

    Everything left of the first non-space character is outside the world
    (``SPACE``); from there on a space is in-bounds floor.

    Raises:
        InvalidSymbol: on a character not in ``SYMBOL_TABLE``.
    """
    offset = len(line) - len(line.lstrip(" "))
    cells: list[Cell] = [SPACE_CELL] * offset
    for column in range(offset, len(line)):
        symbol = line[column]
        cell = SYMBOL_TABLE.get(symbol)
        if cell is None:
            raise InvalidSymbol(symbol, row, column)
        cells.append(cell)
    return cells


def _trim_blank(lines: list[str]) -> list[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def build_level(name: str, lines: list[str]) -> LevelResult:
    """Build a Level from a block of rows, reporting failure as a result."""
    rows = _trim_blank(lines)
    if not rows:
        return LevelResult(name, error=SokobanError("no level data"))

    data: list[list[Cell]] = []
    for index, line in enumerate(rows):
        try:
            data.append(transform_row(line, index))
        except InvalidSymbol as exc:
            return LevelResult(name, error=exc)

    width = max(len(row) for row in data)
    padded = tuple(tuple(row) + (SPACE_CELL,) * (width - len(row)) for row in data)
    return LevelResult(name, level=Level(name=name, width=width, height=len(padded), data=padded))


def headers_lead(lines: list[str]) -> bool:
    """True when names come *before* their rows.

    That is the case when the text opens with a header and does not end with
    one. Otherwise every header names the rows above it. A leading-header
    file that closes with a comment line such as "; end" is therefore read
    as trailer style: each name shifts one block down and the first header
    names nothing.
    """
    content = [line for line in lines if line.strip()]
    return bool(content) and is_header(content[0]) and not is_header(content[-1])


def parse_results(text: str) -> list[LevelResult]:
    """Split *text* into blocks and build every one of them."""
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    results: list[LevelResult] = []
    start = 0

    if headers_lead(lines):
        name: str | None = None
        for end, line in enumerate(lines):
            if not is_header(line):
                continue
            if name is not None:
                results.append(build_level(name, lines[start:end]))
            name = header_name(line)
            start = end + 1
        if name is not None:
            results.append(build_level(name, lines[start:]))
        return results

    for end, line in enumerate(lines):
        if not is_header(line):
            continue
        results.append(build_level(header_name(line), lines[start:end]))
        start = end + 1
    # Rows after the last header have no name and are dropped
    return results


def parse_levels(text: str, on_skip: SkipCallback | None = None) -> list[Level]:
    """Parse a multi-level text blob into levels, in source order.

    Broken levels are dropped; each drop is logged and passed to *on_skip*
    as ``(level_name, reason)``.
    """
    levels: list[Level] = []
    for result in parse_results(text):
        if result.ok:
            levels.append(result.level)
            continue
        logger.warning('Skipping level "%s", because: %s', result.name, result.error)
        if on_skip is not None:
            on_skip(result.name, str(result.error))
    logger.debug("Parsed %d level(s)", len(levels))
    return levels


def load_levels(path: str | Path, on_skip: SkipCallback | None = None) -> list[Level]:
    """Read and parse a level file."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    levels = parse_levels(text, on_skip=on_skip)
    logger.info("Loaded %d level(s) from %s", len(levels), path)
    return levels


def level_to_text(level: Level) -> list[str]:
    """Render a level back to its symbol rows (trailing padding dropped)."""
    lines: list[str] = []
    for row in level.data:
        end = len(row)
        while end > 0 and row[end - 1] == SPACE_CELL:
            end -= 1
        lines.append("".join(CELL_SYMBOLS[cell] for cell in row[:end]))
    return lines
