"""Legal single-token moves out of a burrow state.

Rules:

* a token in the hallway may only walk into its home room;
* a token may enter its home room only when no other kind is inside, and
  then always walks to the deepest free cell;
* a token in a room may walk out to any hallway cell that is not a room
  mouth;
* nothing may pass through an occupied cell.
"""

from __future__ import annotations

from burrow_search.burrow.path import Path
from burrow_search.burrow.state import BurrowState, Occupancy, StateTransition
from burrow_search.burrow.topology import (
    HALLWAY_STOP_CELLS,
    ROOM,
    Amphipod,
    BurrowTopology,
    Location,
    topology_for,
)


def legal_transitions(state: BurrowState, *, prune_settled: bool = True) -> list[StateTransition]:
    """Return every legal move out of ``state``.

    With ``prune_settled`` tokens that never have to move again (home, with
    only their own kind behind them) are skipped. Turning it off changes the
    running time, not the answer.
    """

    topology = topology_for(state.room_size)
    occupancy = state.occupancy()
    transitions: list[StateTransition] = []
    for kind in Amphipod:
        home_slot = None
        if state.can_enter_home_room(kind, occupancy):
            home_slot = state.deepest_open_slot(kind, occupancy)
        for location in state.positions_of(kind):
            if prune_settled and state.is_settled(location, occupancy):
                continue
            for end in _candidate_ends(kind, location, home_slot):
                path = Path(location, end)
                if _is_clear(topology, occupancy, path):
                    transitions.append(StateTransition(state, kind, path))
    return transitions


def transition_between(source: BurrowState, target: BurrowState) -> StateTransition | None:
    """Cheapest legal move turning ``source`` into ``target``, if any."""

    best: StateTransition | None = None
    for transition in legal_transitions(source, prune_settled=False):
        if best is not None and transition.cost >= best.cost:
            continue
        if transition.target() == target:
            best = transition
    return best


# --------------------------------------------------------------------------- #
# Helpers


def _candidate_ends(
    kind: Amphipod, location: Location, home_slot: Location | None
) -> list[Location]:
    at_home = location.section == ROOM and location.kind == kind
    ends: list[Location] = []
    if home_slot is not None and not at_home:
        ends.append(home_slot)
    if location.section == ROOM:
        ends.extend(HALLWAY_STOP_CELLS)
    return ends


def _is_clear(topology: BurrowTopology, occupancy: Occupancy, path: Path) -> bool:
    return not any(cell in occupancy for cell in topology.walk(path.start, path.end)[1:])


__all__ = ["legal_transitions", "transition_between"]
