"""Model adapter package for the tennis round scorekeeper.

This package provides thin adapters over the existing `tennis.engine`
so that other front-ends can consume point-by-point outcomes and the
current scoreboard without re-implementing the scoring rules.
"""

__all__ = ["adapter"]
