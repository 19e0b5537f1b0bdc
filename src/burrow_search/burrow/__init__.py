"""Burrow model: topology, states and legal moves."""

from burrow_search.burrow.moves import legal_transitions, transition_between
from burrow_search.burrow.path import Path
from burrow_search.burrow.state import BurrowState, StateTransition
from burrow_search.burrow.topology import (
    HALLWAY_STOPS,
    Amphipod,
    BurrowTopology,
    Location,
    steps_between,
    topology_for,
)

__all__ = [
    "Amphipod",
    "BurrowState",
    "BurrowTopology",
    "HALLWAY_STOPS",
    "Location",
    "Path",
    "StateTransition",
    "legal_transitions",
    "steps_between",
    "topology_for",
    "transition_between",
]
