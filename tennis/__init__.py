"""Scoring core for a single tennis round.

`tennis.engine` holds the score tracks, players, rule sets and the round
state machine; `tennis.cli` is the text demo (`python -m tennis`).
"""

__all__ = ["engine", "cli"]
