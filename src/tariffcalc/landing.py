from __future__ import annotations

from tariffcalc.constants import BACK, FEET, FRONT, INVALID, SEAT, Stance
from tariffcalc.skill import Skill, normalize_skill

# Takeoff orientation in quarter turns.
_TAKEOFF_ANGLES: dict[Stance, int] = {
    FEET: 0,
    SEAT: 0,
    FRONT: 1,
    BACK: 3,
}
_INVALID_ANGLE = -1

_STANCE_BY_ANGLE: dict[int, Stance] = {
    -3: FRONT,
    -1: BACK,
    0: FEET,
    1: FRONT,
    3: BACK,
}


def takeoff_angle(stance: Stance) -> int:
    return _TAKEOFF_ANGLES.get(stance, _INVALID_ANGLE)


def stance_for_angle(angle: int) -> Stance:
    # Truncating remainder keeps the sign of ``angle``: -5 -> -1, 7 -> 3.
    remainder = angle - int(angle / 4) * 4
    return _STANCE_BY_ANGLE.get(remainder, INVALID)


def landing_position(skill: Skill) -> Stance:
    skill = normalize_skill(skill)
    start = takeoff_angle(skill.takeoff_position)
    signed_rotation = start - skill.rotation if skill.backward else start + skill.rotation
    # An odd number of half twists mirrors the body, so front and back swap.
    raw_angle = signed_rotation if skill.total_twist % 2 == 0 else -signed_rotation
    stance = stance_for_angle(raw_angle)
    if skill.seat_landing:
        return SEAT if stance == FEET else INVALID
    return stance


__all__ = ["landing_position", "stance_for_angle", "takeoff_angle"]
