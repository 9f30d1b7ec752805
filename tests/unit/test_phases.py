from __future__ import annotations

import pytest

from tariffcalc.phases import check_phases, normalize_twists, phase_count, total_twist
from tariffcalc.skill import Skill


@pytest.mark.parametrize(
    ("rotation", "expected"),
    [(0, 1), (4, 1), (6, 1), (7, 2), (8, 2), (10, 2), (11, 3), (12, 3), (14, 3), (15, 4), (16, 4), (20, 4)],
)
def test_phase_count_bands(rotation: int, expected: int) -> None:
    assert phase_count(rotation) == expected


def test_phase_count_uses_magnitude() -> None:
    assert phase_count(-8) == 2
    assert phase_count(-16) == 4


def test_normalize_twists_pads_with_zero() -> None:
    assert normalize_twists([1], 12) == (1, 0, 0)
    assert normalize_twists([], 4) == (0,)


def test_normalize_twists_truncates_extra_phases() -> None:
    assert normalize_twists([1, 2, 3, 4], 8) == (1, 2)


def test_total_twist_sums_phases() -> None:
    assert total_twist(Skill(rotation=8, twist_distribution=(2, 3))) == 5


def test_check_phases_reports_mismatch() -> None:
    assert check_phases([0, 0], 8) is None
    problem = check_phases([0], 8)
    assert problem is not None
    assert "requires 2 twist phase(s)" in problem
