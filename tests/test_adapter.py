"""
Tests for the point stream adapter.
"""

import pytest

from model.adapter import PointOutcome, PointStream


def test_one_outcome_per_point():
    outcomes = list(PointStream("Bob", "Jim", "ABBBB"))

    assert [o.index for o in outcomes] == [0, 1, 2, 3, 4]
    assert [o.scorer_name for o in outcomes] == ["Bob", "Jim", "Jim", "Jim", "Jim"]
    assert outcomes[0].labels == ("Fifteen", "Love")
    assert outcomes[-1] == PointOutcome(
        index=4,
        scorer="B",
        scorer_name="Jim",
        labels=("Fifteen", "Point"),
        score_changed=True,
        won_on_point=True,
        winner_name="Jim",
    )
    assert all(o.winner_name is None for o in outcomes[:-1])


def test_deuce_flagged_on_the_point_that_reaches_it():
    outcomes = list(PointStream("Bob", "Jim", "AAABBBA"))

    assert [o.deuce_reached for o in outcomes] == [False] * 5 + [True, False]
    assert [o.in_deuce for o in outcomes] == [False] * 5 + [True, True]
    assert outcomes[5].labels == ("Deuce", "Deuce")
    assert outcomes[6].labels == ("Advantage", "Deuce")


def test_noop_point_reports_no_change():
    outcomes = list(PointStream("Bob", "Jim", "AAAAA"))

    assert outcomes[3].won_on_point is True
    assert outcomes[4].score_changed is False
    assert outcomes[4].won_on_point is False
    assert outcomes[4].labels == ("Point", "Love")


def test_winner_stays_on_later_records():
    outcomes = list(PointStream("Bob", "Jim", "AAAAB"))

    assert [o.winner_name for o in outcomes] == [None, None, None, "Bob", "Bob"]
    assert [o.won_on_point for o in outcomes] == [False, False, False, True, False]
    assert outcomes[4].labels == ("Point", "Fifteen")


def test_lowercase_codes_go_to_the_right_player():
    outcomes = list(PointStream("Bob", "Jim", "aab"))

    assert [o.scorer for o in outcomes] == ["A", "A", "B"]
    assert [o.scorer_name for o in outcomes] == ["Bob", "Bob", "Jim"]
    assert outcomes[-1].labels == ("Thirty", "Fifteen")


def test_unknown_code_raises():
    stream = PointStream("Bob", "Jim", "AX")

    assert next(stream).labels == ("Fifteen", "Love")
    with pytest.raises(ValueError, match="Invalid point code: 'X'"):
        next(stream)
