"""Single-token moves between two burrow cells."""

from __future__ import annotations

from typing import NamedTuple

from burrow_search.burrow.topology import Amphipod, BurrowTopology, Location, steps_between


class Path(NamedTuple):
    """Direct move of one token from ``start`` to ``end``."""

    start: Location
    end: Location

    @property
    def steps(self) -> int:
        return steps_between(self.start, self.end)

    def cost(self, kind: Amphipod) -> int:
        return self.steps * kind.energy

    def reversed(self) -> Path:
        return Path(self.end, self.start)

    def walk(self, topology: BurrowTopology) -> tuple[Location, ...]:
        return topology.walk(self.start, self.end)

    def intermediate(self, topology: BurrowTopology) -> tuple[Location, ...]:
        return topology.between(self.start, self.end)

    def __repr__(self) -> str:
        return f"{self.start!r}->{self.end!r}"


__all__ = ["Path"]
