from collections import Counter
import os, sys

# Ensure project root is on sys.path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import random

from tennis.engine import MatchRound, Player, random_point


def run(seed: int, bias: int = 50):
    """Play one random round to a winner and return a short summary.

    This returns the winner key, point count and whether deuce was reached.
    """
    rng = random.Random(seed)
    a, b = Player('A'), Player('B')
    round_ = MatchRound(a, b)
    played = 0
    while round_.winner() is None:
        round_.award_point(a if random_point(bias, rng) == 'A' else b)
        played += 1
    return round_.winner().name, played, round_.deuce_entered


def probe(label, bias):
    """Try many seeds and print simple distribution info.

    This is a rough way to eyeball how often rounds go to deuce.
    """
    winners = Counter()
    deuces = 0
    total_points = 0
    n = 200
    for s in range(n):
        winner, played, deuce = run(s, bias)
        winners[winner] += 1
        total_points += played
        if deuce:
            deuces += 1
    print(f"\n[{label}] rounds: {n}  deuce rate: {round(deuces/n,3)}  avg points: {round(total_points/n,2)}")
    for k,v in winners.most_common():
        print(v, k)


def main():
    """Run a few probes with different point biases."""
    probe('even bias=50', bias=50)
    probe('slight edge to B bias=60', bias=60)
    probe('heavy edge to B bias=80', bias=80)


if __name__ == '__main__':
    main()
