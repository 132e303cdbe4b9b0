"""Order athletes by final time and select the podium."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from standings.constants import PODIUM_SIZE
from standings.errors import ValidationError
from standings.records.athlete import Athlete


_logger = logging.getLogger(__name__)


def rank_athletes(athletes: Sequence[Athlete]) -> list[Athlete]:
    """Return a new list sorted ascending by final time.

    The sort is stable: athletes with equal final times keep their input order.
    The caller's sequence is never modified.
    """

    if not athletes:
        return []
    final_times = np.fromiter(
        (athlete.final_time_minutes for athlete in athletes),
        dtype=np.float64,
        count=len(athletes),
    )
    order = np.argsort(final_times, kind="stable")
    return [athletes[int(idx)] for idx in order]


def select_top(athletes: Sequence[Athlete], count: int) -> list[Athlete]:
    """Return the `count` athletes with the smallest final times, ascending."""

    if count <= 0:
        raise ValueError("count must be positive.")
    if len(athletes) < count:
        raise ValidationError(
            f"Not enough athletes: need at least {count}, got {len(athletes)}."
        )

    top = rank_athletes(athletes)[:count]
    _logger.debug(
        "selected top %d of %d athletes: %s",
        count,
        len(athletes),
        [athlete.athlete_number for athlete in top],
    )
    return top


def top_three(athletes: Sequence[Athlete]) -> list[Athlete]:
    """Return the podium (three fastest final times)."""

    return select_top(athletes, PODIUM_SIZE)
