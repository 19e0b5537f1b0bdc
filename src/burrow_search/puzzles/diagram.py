"""Reading and drawing burrow diagrams.

A diagram looks like::

    #############
    #...........#
    ###B#C#B#D###
      #A#D#C#A#
      #########

The second line is the hallway (offsets 0..10 at columns 1..11). Every
following line up to the bottom wall is one row of room cells, room ``k`` at
column ``3 + 2k``. ``.`` marks an empty cell.
"""

from __future__ import annotations

from burrow_search.burrow.state import BurrowState
from burrow_search.burrow.topology import HALLWAY_LENGTH, Amphipod, Location
from burrow_search.errors import BurrowParseError

# Rows hidden in the folded diagram, inserted below its first room row.
HIDDEN_ROWS = ("  #D#C#B#A#", "  #D#B#A#C#")

_EMPTY = "."
_WALL = "#"


def parse_diagram(text: str) -> BurrowState:
    """Return the burrow state drawn in ``text``."""

    lines = _content_lines(text)
    if len(lines) < 3:
        msg = "Diagram needs a top wall, a hallway and at least one room row"
        raise BurrowParseError(msg)
    if set(lines[0].strip()) != {_WALL}:
        msg = f"Line 1 should be the top wall, got {lines[0]!r}"
        raise BurrowParseError(msg)

    occupancy: dict[Location, Amphipod] = {}
    hallway = lines[1]
    if (
        len(hallway) < HALLWAY_LENGTH + 2
        or hallway[0] != _WALL
        or hallway[HALLWAY_LENGTH + 1] != _WALL
    ):
        msg = f"Line 2 should be the hallway '#...........#', got {hallway!r}"
        raise BurrowParseError(msg)
    for offset in range(HALLWAY_LENGTH):
        glyph = hallway[1 + offset]
        if glyph != _EMPTY:
            occupancy[Location.in_hallway(offset)] = Amphipod.from_letter(glyph)

    rows = _room_rows(lines)
    if not rows:
        msg = "Diagram has no room rows"
        raise BurrowParseError(msg)

    for depth, cells in enumerate(rows):
        for kind, glyph in zip(Amphipod, cells):
            if glyph != _EMPTY:
                occupancy[Location.in_room(kind, depth)] = Amphipod.from_letter(glyph)
    return BurrowState.from_occupancy(len(rows), occupancy)


def unfold(text: str) -> str:
    """Insert the two hidden rows, turning 2-deep rooms into 4-deep ones."""

    lines = _content_lines(text)
    if len(lines) < 4:
        msg = "Diagram is too short to unfold"
        raise BurrowParseError(msg)
    depth = len(_room_rows(lines))
    if depth != 2:
        msg = f"Only 2-deep diagrams can be unfolded, this one is {depth} deep"
        raise BurrowParseError(msg)
    return "\n".join([*lines[:3], *HIDDEN_ROWS, *lines[3:]]) + "\n"


def render_diagram(state: BurrowState) -> str:
    """Draw ``state`` in the same layout :func:`parse_diagram` reads."""

    occupancy = state.occupancy()

    def glyph(location: Location) -> str:
        kind = occupancy.get(location)
        return _EMPTY if kind is None else kind.letter

    hallway = "".join(glyph(Location.in_hallway(offset)) for offset in range(HALLWAY_LENGTH))
    lines = [_WALL * (HALLWAY_LENGTH + 2), f"#{hallway}#"]
    for depth in range(state.room_size):
        cells = _WALL.join(glyph(Location.in_room(kind, depth)) for kind in Amphipod)
        lines.append(f"###{cells}###" if depth == 0 else f"  #{cells}#")
    lines.append("  " + _WALL * 9)
    return "\n".join(lines)


def _content_lines(text: str) -> list[str]:
    return [line.rstrip() for line in text.splitlines() if line.strip()]


def _room_rows(lines: list[str]) -> list[list[str]]:
    rows: list[list[str]] = []
    for lineno, line in enumerate(lines[2:], start=3):
        cells = [_room_glyph(line, kind, lineno) for kind in Amphipod]
        if all(glyph == _WALL for glyph in cells):
            if lineno < len(lines):
                extra = lines[lineno]
                msg = f"Unexpected text after the bottom wall on line {lineno + 1}: {extra!r}"
                raise BurrowParseError(msg)
            break
        rows.append(cells)
    return rows


def _room_glyph(line: str, kind: Amphipod, lineno: int) -> str:
    column = 3 + 2 * int(kind)
    if column >= len(line):
        msg = f"Line {lineno} is too short to hold room {kind.letter}: {line!r}"
        raise BurrowParseError(msg)
    return line[column]


__all__ = ["HIDDEN_ROWS", "parse_diagram", "render_diagram", "unfold"]
