"""Immutable burrow snapshots and single-token transitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from burrow_search.burrow.path import Path
from burrow_search.burrow.topology import (
    ROOM,
    ROOM_MOUTHS,
    Amphipod,
    Location,
    steps_between,
    topology_for,
)
from burrow_search.errors import BurrowParseError, InvalidMove

Occupancy = Mapping[Location, Amphipod]

_KINDS = tuple(Amphipod)


@dataclass(frozen=True)
class BurrowState:
    """Where every token stands.

    ``positions`` holds ``4 * room_size`` cells; the slice
    ``kind * room_size : (kind + 1) * room_size`` belongs to ``kind`` and is
    kept sorted, so two states with the same tokens in the same cells compare
    and hash equal.
    """

    room_size: int
    positions: tuple[Location, ...]

    # --------------------------------------------------------- construction --
    @classmethod
    def from_occupancy(cls, room_size: int, occupancy: Occupancy) -> BurrowState:
        """Build a validated state from ``{cell: kind}``."""

        topology = topology_for(room_size)
        groups: list[list[Location]] = [[] for _ in _KINDS]
        for location, kind in occupancy.items():
            if not topology.contains(location):
                msg = f"{location!r} is not a cell of a {room_size}-deep burrow"
                raise BurrowParseError(msg)
            if location.is_hallway and location.index in ROOM_MOUTHS:
                msg = f"Token {kind.letter} stands on room mouth {location!r}"
                raise BurrowParseError(msg)
            groups[int(kind)].append(location)
        for kind, group in zip(_KINDS, groups):
            if len(group) != room_size:
                msg = f"Expected {room_size} {kind.letter} tokens, found {len(group)}"
                raise BurrowParseError(msg)
        positions = tuple(location for group in groups for location in sorted(group))
        return cls(room_size, positions)

    @classmethod
    def goal(cls, room_size: int) -> BurrowState:
        positions = tuple(
            Location.in_room(kind, depth) for kind in _KINDS for depth in range(room_size)
        )
        return cls(room_size, positions)

    # -------------------------------------------------------------- queries --
    def positions_of(self, kind: Amphipod) -> tuple[Location, ...]:
        start = int(kind) * self.room_size
        return self.positions[start : start + self.room_size]

    def occupancy(self) -> dict[Location, Amphipod]:
        size = self.room_size
        return {location: _KINDS[idx // size] for idx, location in enumerate(self.positions)}

    def occupant(self, location: Location) -> Amphipod | None:
        try:
            idx = self.positions.index(location)
        except ValueError:
            return None
        return _KINDS[idx // self.room_size]

    def is_occupied(self, location: Location) -> bool:
        return location in self.positions

    def is_goal(self) -> bool:
        return all(
            location.section == ROOM and location.kind == kind
            for kind in _KINDS
            for location in self.positions_of(kind)
        )

    def can_enter_home_room(self, kind: Amphipod, occupancy: Occupancy | None = None) -> bool:
        """True when the home room holds nothing but ``kind`` tokens."""

        occupancy = self.occupancy() if occupancy is None else occupancy
        for depth in range(self.room_size):
            occupant = occupancy.get(Location.in_room(kind, depth))
            if occupant is not None and occupant != kind:
                return False
        return True

    def deepest_open_slot(
        self, kind: Amphipod, occupancy: Occupancy | None = None
    ) -> Location | None:
        occupancy = self.occupancy() if occupancy is None else occupancy
        for depth in reversed(range(self.room_size)):
            cell = Location.in_room(kind, depth)
            if cell not in occupancy:
                return cell
        return None

    def is_settled(self, location: Location, occupancy: Occupancy | None = None) -> bool:
        """True for a token at home with only its own kind behind it."""

        if location.section != ROOM:
            return False
        occupancy = self.occupancy() if occupancy is None else occupancy
        kind = occupancy.get(location)
        if kind is None or int(kind) != location.kind:
            return False
        return all(
            occupancy.get(Location.in_room(kind, depth)) == kind
            for depth in range(location.index + 1, self.room_size)
        )

    def heuristic_lower_bound(self) -> int:
        """Energy needed if nothing ever stood in anyone's way.

        Tokens outside their home room must each take a distinct home cell;
        they are given depths ``0 .. k - 1``. Every token of a kind pays the
        same energy per step, so any ordering of that assignment costs the
        same and it is the cheapest one.
        """

        total = 0
        for kind in _KINDS:
            away = [
                location
                for location in self.positions_of(kind)
                if location.section != ROOM or location.kind != kind
            ]
            steps = sum(
                steps_between(location, Location.in_room(kind, depth))
                for depth, location in enumerate(away)
            )
            total += steps * kind.energy
        return total

    # ----------------------------------------------------------- transitions --
    def apply_move(self, kind: Amphipod, path: Path) -> BurrowState:
        """Return the state after moving the ``kind`` token at ``path.start``."""

        size = self.room_size
        start = int(kind) * size
        group = list(self.positions[start : start + size])
        try:
            idx = group.index(path.start)
        except ValueError:
            msg = f"No {kind.letter} token at {path.start!r} for move {path!r}"
            raise InvalidMove(msg) from None
        if path.end != path.start and path.end in self.positions:
            msg = f"Move {path!r} ends on an occupied cell"
            raise InvalidMove(msg)
        group[idx] = path.end
        group.sort()
        positions = self.positions[:start] + tuple(group) + self.positions[start + size :]
        return BurrowState(size, positions)


@dataclass(frozen=True)
class StateTransition:
    """One legal move of one token out of ``source``."""

    source: BurrowState
    kind: Amphipod
    path: Path

    @property
    def cost(self) -> int:
        return self.path.cost(self.kind)

    def target(self) -> BurrowState:
        return self.source.apply_move(self.kind, self.path)

    def describe(self) -> str:
        return f"{self.kind.letter} {self.path!r} ({self.cost} energy)"


__all__ = ["BurrowState", "Occupancy", "StateTransition"]
