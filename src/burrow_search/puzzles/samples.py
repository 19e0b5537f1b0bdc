"""Documented burrows with known answers."""

from __future__ import annotations

SAMPLE_DIAGRAM = """\
#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""
SAMPLE_FOLDED_ENERGY = 12521
SAMPLE_UNFOLDED_ENERGY = 44169

# Three moves from done: D to the back of its room, then the other D, then A.
ALMOST_SOLVED_DIAGRAM = """\
#############
#.....D.D.A.#
###.#B#C#.###
  #A#B#C#.#
  #########
"""
ALMOST_SOLVED_ENERGY = 7008

__all__ = [
    "ALMOST_SOLVED_DIAGRAM",
    "ALMOST_SOLVED_ENERGY",
    "SAMPLE_DIAGRAM",
    "SAMPLE_FOLDED_ENERGY",
    "SAMPLE_UNFOLDED_ENERGY",
]
