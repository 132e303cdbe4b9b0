"""Tests for per-bout shooting penalties."""

from __future__ import annotations

import pytest

from standings.errors import ParseError
from standings.records.shooting import ShotOutcome, calculate_penalty, count_misses


def test_penalty_is_ten_seconds_per_miss() -> None:
    assert calculate_penalty("oo") == 20
    assert calculate_penalty("xx") == 0
    assert calculate_penalty("xoxox") == 20
    assert calculate_penalty("ooooo") == 50
    assert calculate_penalty("") == 0


def test_unknown_symbols_count_as_hits_by_default() -> None:
    assert calculate_penalty("o?-O") == 10
    assert count_misses("o?-O") == 1


def test_strict_mode_rejects_unknown_symbols() -> None:
    assert calculate_penalty("xoxxo", strict=True) == 20

    with pytest.raises(ParseError) as excinfo:
        calculate_penalty("xxO", strict=True)
    assert excinfo.value.raw == "xxO"
    assert "'O'" in str(excinfo.value)


def test_shot_outcome_symbols() -> None:
    assert ShotOutcome("o") is ShotOutcome.MISS
    assert ShotOutcome("x") is ShotOutcome.HIT
