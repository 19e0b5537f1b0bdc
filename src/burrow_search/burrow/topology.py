"""Burrow layout: amphipod kinds, cell locations and step distances.

The burrow is one hallway of eleven cells (offsets 0..10) with four rooms
hanging below offsets 2, 4, 6 and 8::

    #############
    #...........#
    ###B#C#B#D###
      #A#D#C#A#
      #########

Room depth 0 is the cell next to the hallway; depth ``room_size - 1`` is the
back wall.
"""

from __future__ import annotations

from enum import IntEnum
from functools import lru_cache
from typing import NamedTuple

import networkx as nx

from burrow_search.errors import BurrowParseError

HALLWAY_LENGTH = 11
HALLWAY_STOPS = (0, 1, 3, 5, 7, 9, 10)

ROOM = 0
HALLWAY = 1

_LETTERS = "ABCD"


class Amphipod(IntEnum):
    """Token kinds, in home-room order from left to right."""

    AMBER = 0
    BRONZE = 1
    COPPER = 2
    DESERT = 3

    @property
    def energy(self) -> int:
        """Energy spent per step."""
        return 10 ** int(self)

    @property
    def mouth(self) -> int:
        """Hallway offset directly above the home room."""
        return 2 + 2 * int(self)

    @property
    def letter(self) -> str:
        return _LETTERS[int(self)]

    @classmethod
    def from_letter(cls, letter: str) -> Amphipod:
        if len(letter) != 1 or letter not in _LETTERS:
            msg = f"Unknown amphipod code {letter!r}"
            raise BurrowParseError(msg)
        return cls(_LETTERS.index(letter))


ROOM_MOUTHS = frozenset(kind.mouth for kind in Amphipod)


class Location(NamedTuple):
    """A burrow cell, either in the hallway or inside a room.

    Stored as ``(section, kind, index)`` so that plain tuple ordering gives
    the canonical order: room cells before hallway cells, rooms by kind, then
    by depth; hallway cells by offset. ``kind`` is ``-1`` for hallway cells.
    """

    section: int
    kind: int
    index: int

    @classmethod
    def in_hallway(cls, offset: int) -> Location:
        return cls(HALLWAY, -1, offset)

    @classmethod
    def in_room(cls, kind: int, depth: int) -> Location:
        return cls(ROOM, int(kind), depth)

    @property
    def is_room(self) -> bool:
        return self.section == ROOM

    @property
    def is_hallway(self) -> bool:
        return self.section == HALLWAY

    @property
    def room(self) -> Amphipod:
        """Kind whose home room contains this cell."""
        if self.section != ROOM:
            msg = f"{self!r} is not a room cell"
            raise ValueError(msg)
        return Amphipod(self.kind)

    @property
    def depth(self) -> int:
        if self.section != ROOM:
            msg = f"{self!r} is not a room cell"
            raise ValueError(msg)
        return self.index

    @property
    def hallway_offset(self) -> int:
        """Offset of this cell, or of the room mouth for room cells."""
        if self.section == HALLWAY:
            return self.index
        return 2 + 2 * self.kind

    def __repr__(self) -> str:
        if self.section == HALLWAY:
            return f"H{self.index}"
        return f"{_LETTERS[self.kind]}{self.index}"


HALLWAY_STOP_CELLS = tuple(Location.in_hallway(offset) for offset in HALLWAY_STOPS)


def steps_between(a: Location, b: Location) -> int:
    """Return the number of single-cell steps from ``a`` to ``b``.

    Room cells pay ``depth + 1`` to reach the hallway; the rest is the
    distance along the hallway between the two offsets (room mouths for room
    cells). Two cells of the same room are priced as leaving and re-entering,
    which no legal move does.
    """

    if a.section == HALLWAY and b.section == HALLWAY:
        return abs(a.index - b.index)
    steps = abs(a.hallway_offset - b.hallway_offset)
    if a.section == ROOM:
        steps += a.index + 1
    if b.section == ROOM:
        steps += b.index + 1
    return steps


class BurrowTopology:
    """Cell graph of a burrow with cached walks between cells."""

    def __init__(self, room_size: int) -> None:
        if room_size < 1:
            msg = f"room_size must be positive, got {room_size}"
            raise ValueError(msg)
        self.room_size = room_size
        self.graph = _build_graph(room_size)
        self._walks: dict[tuple[Location, Location], tuple[Location, ...]] = {}

    # ------------------------------------------------------------------ API --
    @property
    def locations(self) -> list[Location]:
        return sorted(self.graph.nodes())

    def room_cells(self, kind: Amphipod) -> tuple[Location, ...]:
        return tuple(Location.in_room(kind, depth) for depth in range(self.room_size))

    def contains(self, location: Location) -> bool:
        return location in self.graph

    def walk(self, start: Location, end: Location) -> tuple[Location, ...]:
        """Return every cell from ``start`` to ``end``, both included."""

        key = (start, end)
        cells = self._walks.get(key)
        if cells is None:
            try:
                cells = tuple(nx.shortest_path(self.graph, start, end))
            except nx.NodeNotFound as exc:
                msg = f"No walk from {start!r} to {end!r} in a {self.room_size}-deep burrow"
                raise ValueError(msg) from exc
            self._walks[key] = cells
        return cells

    def between(self, start: Location, end: Location) -> tuple[Location, ...]:
        """Cells strictly between ``start`` and ``end``."""
        return self.walk(start, end)[1:-1]


@lru_cache(maxsize=None)
def topology_for(room_size: int) -> BurrowTopology:
    """Return the shared topology for a room size."""
    return BurrowTopology(room_size)


# --------------------------------------------------------------------------- #
# Helpers


def _build_graph(room_size: int) -> nx.Graph:
    graph = nx.Graph()
    hallway = [Location.in_hallway(offset) for offset in range(HALLWAY_LENGTH)]
    nx.add_path(graph, hallway)
    for kind in Amphipod:
        shaft = [Location.in_hallway(kind.mouth)]
        shaft.extend(Location.in_room(kind, depth) for depth in range(room_size))
        nx.add_path(graph, shaft)
    return graph


__all__ = [
    "Amphipod",
    "BurrowTopology",
    "HALLWAY_LENGTH",
    "HALLWAY_STOPS",
    "HALLWAY_STOP_CELLS",
    "Location",
    "ROOM_MOUTHS",
    "steps_between",
    "topology_for",
]
