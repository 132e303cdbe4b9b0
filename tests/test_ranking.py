"""Tests for ordering athletes and selecting the podium."""

from __future__ import annotations

import numpy as np
import pytest

from standings.errors import ValidationError
from standings.ranking.selector import rank_athletes, select_top, top_three
from standings.records.athlete import Athlete
from standings.records.parser import parse_records


def _athlete(number: int, ski: float, penalty: int = 0) -> Athlete:
    return Athlete(
        athlete_number=number,
        athlete_name=f"Athlete {number}",
        country_code="DE",
        ski_time_minutes=ski,
        total_shooting_penalty=penalty,
    )


def test_top_three_orders_by_final_time() -> None:
    athletes = parse_records(
        "12,Luca White,UK,21:27,xx,xx,xx\n"
        "2,Ion Stoica,RO,20:15,xx,xx,xx\n"
        "27,Piotr Lark,CZ,40:15,xx,xx,xx\n"
    )

    podium = top_three(athletes)

    assert [a.final_time_minutes for a in podium] == pytest.approx([20.25, 21.45, 40.25])
    assert [a.athlete_number for a in podium] == [2, 12, 27]


def test_top_three_does_not_mutate_input() -> None:
    athletes = [_athlete(1, 30.0), _athlete(2, 25.0), _athlete(3, 20.0), _athlete(4, 22.0)]
    snapshot = list(athletes)

    top_three(athletes)

    assert athletes == snapshot


def test_top_three_elements_beat_every_other_athlete() -> None:
    rng = np.random.default_rng(7)
    athletes = [
        _athlete(i, float(rng.uniform(20.0, 40.0)), 10 * int(rng.integers(0, 15)))
        for i in range(25)
    ]

    podium = top_three(athletes)
    rest = [a for a in athletes if a not in podium]

    assert len(podium) == 3
    assert podium == sorted(podium)
    worst_on_podium = max(a.final_time_minutes for a in podium)
    assert all(worst_on_podium <= a.final_time_minutes for a in rest)


def test_ties_keep_input_order() -> None:
    a = _athlete(1, 21.0)
    b = _athlete(2, 20.0, 60)
    c = _athlete(3, 19.0)

    assert rank_athletes([a, b, c]) == [c, a, b]
    assert rank_athletes([b, a, c]) == [c, b, a]


def test_top_three_requires_three_athletes() -> None:
    with pytest.raises(ValidationError, match="Not enough athletes"):
        top_three([_athlete(1, 20.0), _athlete(2, 21.0)])

    with pytest.raises(ValidationError):
        top_three([])


def test_select_top_validates_count() -> None:
    athletes = [_athlete(1, 22.0), _athlete(2, 21.0)]
    assert select_top(athletes, 1) == [athletes[1]]
    assert rank_athletes([]) == []

    with pytest.raises(ValueError):
        select_top(athletes, 0)
