from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple
import logging
import random


logger = logging.getLogger(__name__)


class TrackKind(Enum):
    REGULAR = "regular"
    DEUCE = "deuce"


TRACK_LABELS: Dict[TrackKind, Tuple[str, ...]] = {
    TrackKind.REGULAR: ("Love", "Fifteen", "Thirty", "Fourty", "Point"),
    TrackKind.DEUCE: ("Deuce", "Advantage", "Point"),
}

# Only used to detect the deuce entry condition.
FOURTY = TRACK_LABELS[TrackKind.REGULAR][3]
DEUCE = TRACK_LABELS[TrackKind.DEUCE][0]
ADVANTAGE = TRACK_LABELS[TrackKind.DEUCE][1]


class ScoreTrackError(RuntimeError):
    """Raised when a track is stepped outside its label sequence."""


class ScoreTrack:
    """Progression of one player through a fixed sequence of score labels.

    The track never clamps: stepping past either end is a caller bug.
    """

    def __init__(self, kind: TrackKind = TrackKind.REGULAR):
        self.kind = kind
        self.index = 0

    @property
    def labels(self) -> Tuple[str, ...]:
        """Return the label sequence for this track kind."""
        return TRACK_LABELS[self.kind]

    def current(self) -> str:
        """Return the label at the current position."""
        return self.labels[self.index]

    def increment(self) -> None:
        """Move one label forward.

        Raises ScoreTrackError when the track already holds its last label.
        """
        if self.index >= len(self.labels) - 1:
            raise ScoreTrackError(f"Cannot increment {self.kind.value} track past {self.current()!r}")
        self.index += 1

    def decrement(self) -> None:
        """Move one label back.

        Raises ScoreTrackError when the track is at its first label.
        """
        if self.index <= 0:
            raise ScoreTrackError(f"Cannot decrement {self.kind.value} track below {self.current()!r}")
        self.index -= 1

    def has_won(self) -> bool:
        """Return True if the track holds its final label."""
        return self.index == len(self.labels) - 1

    def __repr__(self) -> str:
        return f"ScoreTrack({self.kind.value}, {self.current()!r})"


class Player:
    """A named player owning one replaceable score track."""

    def __init__(self, name: str):
        self._name = name
        self.score = ScoreTrack()

    @property
    def name(self) -> str:
        """Return the player name, fixed at construction."""
        return self._name

    def replace_score(self, track: ScoreTrack) -> None:
        """Swap in a new track.

        The round does this once, when both players enter deuce.
        """
        self.score = track

    def has_won(self) -> bool:
        """Return True if the current track holds its final label."""
        return self.score.has_won()

    def __repr__(self) -> str:
        return f"Player({self._name!r}, {self.score.current()!r})"


class RoundObserver:
    """Receives round notifications. The base class ignores all of them."""

    def on_score_changed(self, player1_label: str, player2_label: str) -> None:
        """Called after every award that moved a track."""

    def on_player_won(self, player_name: str) -> None:
        """Called when an award leaves the scorer on a final label."""

    def on_deuce_reached(self) -> None:
        """Called once per round when both players enter deuce."""


class RuleSet(Enum):
    REGULAR = "regular"
    DEUCE = "deuce"


def award_regular(round_: MatchRound, player: Player) -> None:
    """Advance the scorer one label unless they already hold the final one.

    A point to a player who has already won changes nothing and notifies nobody.
    """
    if player.has_won():
        return
    player.score.increment()
    round_.observer.on_score_changed(*round_.scoreboard())
    if player.has_won():
        round_.observer.on_player_won(player.name)


def award_deuce(round_: MatchRound, player: Player) -> None:
    """Apply a point under deuce rules.

    A point against an opponent holding Advantage cancels it back to Deuce.
    Otherwise the scorer moves forward. There is no already-won guard here.
    """
    other = round_.other(player)
    if other.score.current() == ADVANTAGE:
        other.score.decrement()
    else:
        player.score.increment()
    round_.observer.on_score_changed(*round_.scoreboard())
    if player.has_won():
        round_.observer.on_player_won(player.name)


RULES: Dict[RuleSet, Callable[["MatchRound", Player], None]] = {
    RuleSet.REGULAR: award_regular,
    RuleSet.DEUCE: award_deuce,
}


class MatchRound:
    """Scoring state machine for one round between two players.

    The round starts under regular rules and latches into deuce rules once
    both players reach Fourty. It is not thread safe: an embedding program
    must hold one lock per round around every award_point call.
    """

    def __init__(self, player1: Player, player2: Player, observer: Optional[RoundObserver] = None):
        self.player1 = player1
        self.player2 = player2
        self.observer = observer if observer is not None else RoundObserver()
        self.rule_set = RuleSet.REGULAR
        self.deuce_entered = False

    def other(self, player: Player) -> Player:
        """Return the opponent of a player in this round.

        Players are matched by identity, so equal names do not collide.
        """
        if player is self.player1:
            return self.player2
        if player is self.player2:
            return self.player1
        raise ValueError(f"{player.name} is not playing this round")

    def player_for(self, code: str) -> Player:
        """Return player one for code A and player two for code B.

        Codes are case insensitive; anything else raises ValueError.
        """
        players = {"A": self.player1, "B": self.player2}
        try:
            return players[code.upper()]
        except KeyError:
            raise ValueError(f"Invalid point code: {code!r}") from None

    def scoreboard(self) -> Tuple[str, str]:
        """Return both current labels, player one first."""
        return self.player1.score.current(), self.player2.score.current()

    def winner(self) -> Optional[Player]:
        """Return the player holding a final label, or None."""
        for player in (self.player1, self.player2):
            if player.has_won():
                return player
        return None

    def award_point(self, player: Player) -> None:
        """Award one point and apply the deuce transition if it is due."""
        logger.debug("Point to %s under %s rules", player.name, self.rule_set.value)
        RULES[self.rule_set](self, player)
        if self.rule_set is RuleSet.REGULAR:
            self._check_deuce()

    def _check_deuce(self) -> None:
        if self.deuce_entered:
            return
        if self.scoreboard() != (FOURTY, FOURTY):
            return
        self.player1.replace_score(ScoreTrack(TrackKind.DEUCE))
        self.player2.replace_score(ScoreTrack(TrackKind.DEUCE))
        self.rule_set = RuleSet.DEUCE
        self.deuce_entered = True
        logger.debug("Deuce reached between %s and %s", self.player1.name, self.player2.name)
        self.observer.on_deuce_reached()


@dataclass
class RoundConfig:
    player_a: str
    player_b: str
    # String of "A"/"B" codes; empty means a random sequence is generated.
    points: str = ""
    random_points: int = 0
    seed: Optional[int] = None
    bias: int = 50  # 0..100, probability percent that B wins a point
    log_level: str = "WARNING"


def clamp_bias(value: int) -> int:
    """Clamp a bias value into the zero to one hundred range."""
    return max(0, min(100, value))


def random_point(bias: int, rng: random.Random) -> str:
    """Return A or B for one random point with a given bias.

    Probability of B equals bias percent.
    """
    return "B" if rng.randint(0, 99) < clamp_bias(bias) else "A"


def random_points(count: int, bias: int = 50, seed: Optional[int] = None) -> str:
    """Return a reproducible string of point codes."""
    rng = random.Random(seed)
    return "".join(random_point(bias, rng) for _ in range(count))
