"""Athlete result entity."""

from __future__ import annotations

from dataclasses import dataclass
import math

from standings.constants import PENALTY_PER_MISS, SECONDS_PER_MINUTE
from standings.errors import ValidationError


@dataclass(frozen=True)
class Athlete:
    """One athlete's parsed race result.

    Equality is field-wise. Ordering compares `final_time_minutes` only, so two
    different athletes with the same final time are neither less nor greater
    than each other.
    """

    athlete_number: int
    athlete_name: str
    country_code: str
    ski_time_minutes: float
    total_shooting_penalty: int

    def __post_init__(self) -> None:
        if not self.athlete_name:
            raise ValidationError("athlete_name must be non-empty.")
        if self.ski_time_minutes < 0 or not math.isfinite(self.ski_time_minutes):
            raise ValidationError("ski_time_minutes must be a finite, non-negative value.")
        if self.total_shooting_penalty < 0:
            raise ValidationError("total_shooting_penalty must be non-negative.")
        if self.total_shooting_penalty % PENALTY_PER_MISS != 0:
            raise ValidationError(
                f"total_shooting_penalty must be a multiple of {PENALTY_PER_MISS}."
            )

    @property
    def final_time_minutes(self) -> float:
        return self.ski_time_minutes + self.total_shooting_penalty / SECONDS_PER_MINUTE

    def __lt__(self, other: Athlete) -> bool:
        if not isinstance(other, Athlete):
            return NotImplemented
        return self.final_time_minutes < other.final_time_minutes

    def __le__(self, other: Athlete) -> bool:
        if not isinstance(other, Athlete):
            return NotImplemented
        return self.final_time_minutes <= other.final_time_minutes

    def __gt__(self, other: Athlete) -> bool:
        if not isinstance(other, Athlete):
            return NotImplemented
        return self.final_time_minutes > other.final_time_minutes

    def __ge__(self, other: Athlete) -> bool:
        if not isinstance(other, Athlete):
            return NotImplemented
        return self.final_time_minutes >= other.final_time_minutes
