from __future__ import annotations

"""Thin adapter over `tennis.engine` to feed other front-ends.

Exposes `PointStream`, an iterator that yields one structured record per
awarded point: who scored, the scoreboard labels after the award, and which
notifications the round fired for it. The front-end should not re-decide
scores; every record carries what the round itself reported.
"""

from dataclasses import dataclass
from typing import Iterator, Literal, Optional, Sequence, Tuple

from tennis.engine import MatchRound, Player, RoundObserver, RuleSet


PlayerKey = Literal["A", "B"]


@dataclass
class PointOutcome:
    """Simple record for one awarded point.

    This carries the scorer, live labels and the notifications fired.
    """

    index: int
    scorer: PlayerKey
    scorer_name: str

    # Live scoreboard after applying this point
    labels: Tuple[str, str]

    # False when the point was a no-op on an already won player
    score_changed: bool = False
    deuce_reached: bool = False
    in_deuce: bool = False
    # True only on the award that fired the win notification
    won_on_point: bool = False

    # Winner of the round so far, carried on every later record too
    winner_name: Optional[str] = None


class _Recorder(RoundObserver):
    """Collect the notifications fired during a single award."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.score_changed = False
        self.deuce_reached = False
        self.won = False

    def on_score_changed(self, player1_label: str, player2_label: str) -> None:
        self.score_changed = True

    def on_player_won(self, player_name: str) -> None:
        self.won = True

    def on_deuce_reached(self) -> None:
        self.deuce_reached = True


def PointStream(name_a: str, name_b: str, points: Sequence[str]) -> Iterator[PointOutcome]:
    """Yield a structured outcome for each point code.

    The round is built here and driven only through award_point. Codes are
    case insensitive; an unknown code raises ValueError when it is reached.
    """
    player_a = Player(name_a)
    player_b = Player(name_b)
    recorder = _Recorder()
    round_ = MatchRound(player_a, player_b, recorder)

    for index, code in enumerate(points):
        player = round_.player_for(code)
        recorder.reset()
        round_.award_point(player)
        winner = round_.winner()
        yield PointOutcome(
            index=index,
            scorer="A" if player is player_a else "B",
            scorer_name=player.name,
            labels=round_.scoreboard(),
            score_changed=recorder.score_changed,
            deuce_reached=recorder.deuce_reached,
            in_deuce=round_.rule_set is RuleSet.DEUCE,
            won_on_point=recorder.won,
            winner_name=winner.name if winner is not None else None,
        )


__all__ = ["PointOutcome", "PointStream"]
