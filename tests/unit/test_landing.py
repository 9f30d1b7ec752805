from __future__ import annotations

import pytest

from tariffcalc.constants import BACK, FEET, FRONT, INVALID, SEAT, STRAIGHT, TUCK
from tariffcalc.landing import landing_position, stance_for_angle, takeoff_angle
from tariffcalc.skill import Skill


def _skill(
    rotation: int,
    twists: tuple[int, ...] = (0,),
    *,
    takeoff: str = FEET,
    backward: bool = False,
    seat_landing: bool = False,
) -> Skill:
    return Skill(
        rotation=rotation,
        twist_distribution=twists,
        takeoff_position=takeoff,  # type: ignore[arg-type]
        shape=TUCK,
        backward=backward,
        seat_landing=seat_landing,
    )


def test_takeoff_angles() -> None:
    assert takeoff_angle(FEET) == 0
    assert takeoff_angle(SEAT) == 0
    assert takeoff_angle(FRONT) == 1
    assert takeoff_angle(BACK) == 3
    assert takeoff_angle(INVALID) == -1


@pytest.mark.parametrize(
    ("angle", "expected"),
    [(0, FEET), (1, FRONT), (-1, BACK), (3, BACK), (-3, FRONT), (7, BACK), (-5, BACK), (8, FEET), (2, INVALID), (-6, INVALID)],
)
def test_stance_for_angle_uses_truncating_remainder(angle: int, expected: str) -> None:
    assert stance_for_angle(angle) == expected


def test_back_drop_lands_on_back() -> None:
    assert landing_position(_skill(1, backward=True)) == BACK


def test_front_drop_lands_on_front() -> None:
    assert landing_position(_skill(1)) == FRONT


def test_back_somersault_lands_on_feet() -> None:
    assert landing_position(_skill(4, backward=True)) == FEET


def test_odd_twist_mirrors_orientation() -> None:
    # Crash dive lands on the back; with a half twist it lands on the front.
    assert landing_position(_skill(3)) == BACK
    assert landing_position(_skill(3, (1,))) == FRONT


def test_lazy_back_lands_on_front() -> None:
    assert landing_position(_skill(3, backward=True)) == FRONT


def test_ball_out_and_cody_return_to_feet() -> None:
    assert landing_position(_skill(5, takeoff=BACK)) == FEET
    assert landing_position(_skill(5, takeoff=FRONT, backward=True)) == FEET


def test_seat_half_twist_to_front() -> None:
    assert landing_position(_skill(1, (1,), takeoff=SEAT, backward=True)) == FRONT


def test_seat_landing_from_feet_equivalent_rotation() -> None:
    assert landing_position(_skill(0, seat_landing=True)) == SEAT
    assert landing_position(_skill(4, seat_landing=True)) == SEAT


def test_seat_landing_from_non_feet_rotation_is_invalid() -> None:
    assert landing_position(_skill(1, backward=True, seat_landing=True)) == INVALID


def test_half_somersault_is_invalid() -> None:
    assert landing_position(_skill(2)) == INVALID


def test_landing_normalizes_twist_length_first() -> None:
    # The trailing half twist is outside the single phase of a 4/4 rotation.
    skill = Skill(rotation=4, twist_distribution=(0, 1), shape=STRAIGHT, backward=True)
    assert landing_position(skill) == FEET
