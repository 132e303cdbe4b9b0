"""End-to-end podium computation returning an explicit result.

`parse_records` and `top_three` raise on bad input. `compute_podium` wraps the
whole text-to-podium flow and returns an `Outcome` instead, so callers check
`ok` (or call `unwrap()`) rather than relying on exceptions for control flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from standings.errors import StandingsError
from standings.ranking.selector import top_three
from standings.records.athlete import Athlete
from standings.records.parser import parse_records


T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or the error that prevented producing it."""

    value: T | None = None
    error: StandingsError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome requires exactly one of value or error.")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def compute_podium(text: str, *, strict_shots: bool = False) -> Outcome[list[Athlete]]:
    """Parse `text` and select the top three athletes."""

    try:
        athletes = parse_records(text, strict_shots=strict_shots)
        return Outcome(value=top_three(athletes))
    except StandingsError as exc:
        return Outcome(error=exc)
