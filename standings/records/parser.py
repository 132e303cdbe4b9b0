"""Parse comma-separated biathlon result records into `Athlete` entities.

Record layout, one athlete per line:

    athleteNumber,athleteName,countryCode,skiTime,bout1,bout2,bout3

Parsing is all-or-nothing: the first malformed line aborts the whole block and
no partial result is returned. Blank lines are skipped; an empty bout field
makes the line invalid.
"""

from __future__ import annotations

import logging

from standings.constants import BOUTS_PER_RECORD, EXPECTED_FIELD_COUNT, FIELD_SEPARATOR
from standings.errors import ParseError, ValidationError
from standings.records.athlete import Athlete
from standings.records.shooting import calculate_penalty
from standings.records.timing import parse_time


_logger = logging.getLogger(__name__)


def _parse_athlete_number(token: str, *, line: str, line_number: int) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise ParseError(
            f"Invalid athlete number: {token}",
            raw=line,
            line_number=line_number,
        ) from exc


def parse_record(line: str, *, line_number: int = 1, strict_shots: bool = False) -> Athlete:
    """Parse a single stripped, non-empty record line."""

    fields = [field.strip() for field in line.split(FIELD_SEPARATOR)]
    if len(fields) != EXPECTED_FIELD_COUNT or not all(fields[-BOUTS_PER_RECORD:]):
        raise ParseError(f"Invalid CSV format: {line}", raw=line, line_number=line_number)

    number_token, name, country_code, time_token, *bouts = fields
    athlete_number = _parse_athlete_number(number_token, line=line, line_number=line_number)

    # Errors from the field parsers are re-raised against the whole line,
    # chained to their underlying cause.
    try:
        ski_time = parse_time(time_token)
        total_penalty = sum(calculate_penalty(bout, strict=strict_shots) for bout in bouts)
    except ParseError as exc:
        raise ParseError(exc.args[0], raw=line, line_number=line_number) from (
            exc.__cause__ or exc
        )

    try:
        return Athlete(
            athlete_number=athlete_number,
            athlete_name=name,
            country_code=country_code,
            ski_time_minutes=ski_time,
            total_shooting_penalty=total_penalty,
        )
    except ValidationError as exc:
        raise ValidationError(exc.args[0], raw=line, line_number=line_number) from exc


def parse_records(text: str, *, strict_shots: bool = False) -> list[Athlete]:
    """Parse every non-blank line of `text`, preserving input order."""

    athletes: list[Athlete] = []
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue

        athlete = parse_record(line, line_number=line_number, strict_shots=strict_shots)
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(
                "line %d: athlete=%d ski=%.4f penalty=%d final=%.4f",
                line_number,
                athlete.athlete_number,
                athlete.ski_time_minutes,
                athlete.total_shooting_penalty,
                athlete.final_time_minutes,
            )
        athletes.append(athlete)

    _logger.debug("parsed %d athlete records", len(athletes))
    return athletes
