"""Ranking of parsed athletes by final time."""

from standings.ranking.podium import Outcome, compute_podium
from standings.ranking.selector import rank_athletes, select_top, top_three

__all__ = [
    "Outcome",
    "compute_podium",
    "rank_athletes",
    "select_top",
    "top_three",
]
