from __future__ import annotations

import argparse
import logging
import sys
import re
from typing import Callable

from .engine import MatchRound, Player, RoundConfig, RoundObserver, ScoreTrackError, random_points


# Default demo: Bob takes the first point, Jim takes the next four.
DEMO_POINTS = "ABBBB"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def prompt_with_retries(prompt: str, validate: Callable[[str], bool], transform: Callable[[str], object] = lambda x: x, max_attempts: int = 10):
    """Ask for input with validation and a small retry budget.

    Returns the transformed value or exits on repeated invalid entries.
    """
    attempts = 0
    while attempts < max_attempts:
        try:
            raw = input(prompt).strip()
        except EOFError:
            print("Error: no input provided.")
            sys.exit(1)
        if validate(raw):
            return transform(raw)
        print("Invalid input. Please try again.")
        attempts += 1
    print("Multiple invalid attempts. Exiting.")
    sys.exit(1)


def is_valid_name(s: str) -> bool:
    """Return True if a player name has only letters and spaces."""
    s = s.strip()
    return bool(s) and re.fullmatch(r"[A-Za-z ]+", s) is not None


def is_valid_points(s: str) -> bool:
    """Return True for a non empty string of A and B point codes."""
    return re.fullmatch(r"[AB]+", s) is not None


def is_valid_bias(v: int) -> bool:
    """Return True if bias is within zero to one hundred inclusive."""
    return 0 <= v <= 100


class ConsoleObserver(RoundObserver):
    """Print round notifications as plain text lines."""

    def __init__(self, name_1: str, name_2: str):
        self.name_1 = name_1
        self.name_2 = name_2

    def on_score_changed(self, player1_label: str, player2_label: str) -> None:
        print(f"{self.name_1}: {player1_label} | {self.name_2}: {player2_label}")

    def on_player_won(self, player_name: str) -> None:
        print(f"{player_name} has won!")

    def on_deuce_reached(self) -> None:
        print("Players reach Deuce")


def play(cfg: RoundConfig) -> int:
    """Play the configured point sequence and print each event as text.

    Point codes are checked before play starts; an unknown code returns 2.
    """
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger(__package__).setLevel(cfg.log_level)

    player_a = Player(cfg.player_a)
    player_b = Player(cfg.player_b)
    round_ = MatchRound(player_a, player_b, ConsoleObserver(player_a.name, player_b.name))

    points = cfg.points or random_points(cfg.random_points, cfg.bias, cfg.seed)
    try:
        players = [round_.player_for(code) for code in points]
    except ValueError as exc:
        print(f"Invalid input. {exc}")
        return 2

    print(f"Start of play - {player_a.name} vs {player_b.name}")
    for player in players:
        print(f"{player.name} scores!")
        try:
            round_.award_point(player)
        except ScoreTrackError as exc:
            print(f"Error: {exc}")
            return 1

    winner = round_.winner()
    if winner is not None:
        print(f"Winner: {winner.name}")
    else:
        print("No winner yet")
    return 0


def main(argv=None) -> int:
    """Run the text mode demo for a single tennis round.

    This accepts flags or asks for player names and prints each event as text.
    """
    parser = argparse.ArgumentParser(description="Tennis round scorekeeper (CLI)")
    parser.add_argument("--player-a", dest="player_a", type=str, help="Player A name", default=None)
    parser.add_argument("--player-b", dest="player_b", type=str, help="Player B name", default=None)
    parser.add_argument("--points", dest="points", type=str, help="Point winners as A/B codes, e.g. ABBBB", default=None)
    parser.add_argument("--random", dest="random_points", type=int, help="Play this many random points instead", default=0)
    parser.add_argument("--seed", dest="seed", type=int, help="Random seed for reproducibility", default=None)
    parser.add_argument("--bias", dest="bias", type=int, default=50, help="Chance in percent that B wins a random point (default 50)")
    parser.add_argument("--log-level", dest="log_level", type=str.upper, choices=LOG_LEVELS, default="WARNING", help="Logging level (default WARNING)")

    args = parser.parse_args(argv)

    if args.player_a is None:
        player_a = prompt_with_retries("Player A name: ", is_valid_name, str)
    else:
        player_a = args.player_a.strip()
        if not is_valid_name(player_a):
            print("Invalid input. Please try again.")
            return 2

    if args.player_b is None:
        player_b = prompt_with_retries("Player B name: ", is_valid_name, str)
    else:
        player_b = args.player_b.strip()
        if not is_valid_name(player_b):
            print("Invalid input. Please try again.")
            return 2

    if args.points is not None:
        points = args.points.strip().upper()
        if not is_valid_points(points):
            print("Invalid input. Please try again.")
            return 2
    elif args.random_points > 0:
        points = ""
    else:
        points = DEMO_POINTS

    if args.random_points < 0 or not is_valid_bias(args.bias):
        print("Invalid input. Please try again.")
        return 2

    cfg = RoundConfig(
        player_a=player_a,
        player_b=player_b,
        points=points,
        random_points=args.random_points,
        seed=args.seed,
        bias=args.bias,
        log_level=args.log_level,
    )
    return play(cfg)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
