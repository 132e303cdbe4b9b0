"""Result record parsing: time tokens, shooting bouts and athlete rows."""

from standings.records.athlete import Athlete
from standings.records.parser import parse_record, parse_records
from standings.records.shooting import ShotOutcome, calculate_penalty, count_misses
from standings.records.timing import format_minutes, parse_time

__all__ = [
    "Athlete",
    "ShotOutcome",
    "calculate_penalty",
    "count_misses",
    "format_minutes",
    "parse_record",
    "parse_records",
    "parse_time",
]
