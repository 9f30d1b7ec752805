"""Tariff (difficulty) formulas.

Points are accumulated as integer tenths and divided by ten at the end, one
formula per rotation band:

* no somersault (rotation 0)
* single somersault class (1-7 quarter turns)
* double (8-11), triple (12-15) and quad+ (16 and up)
"""
from __future__ import annotations

from dataclasses import dataclass

from tariffcalc.constants import (
    DOUBLE_BAND_START,
    OPEN_SHAPES,
    QUAD_BAND_START,
    SEAT,
    STRAIGHT,
    TRIPLE_BAND_START,
)
from tariffcalc.skill import Skill, normalize_skill


@dataclass(slots=True, frozen=True)
class TariffedSkill:
    skill: Skill
    tariff: float


def _no_somersault_points(skill: Skill) -> int:
    twist = skill.total_twist
    if twist != 0:
        return twist
    if skill.shape != STRAIGHT:
        return 1
    into_seat = skill.takeoff_position != SEAT and skill.seat_landing
    out_of_seat = skill.takeoff_position == SEAT and not skill.seat_landing
    if into_seat or out_of_seat:
        return 1
    return 0


def _single_somersault_points(skill: Skill) -> int:
    points = 0
    if skill.rotation > 3:
        points += 1
        if skill.total_twist == 0 and skill.shape in OPEN_SHAPES:
            points += 1
    return points + skill.rotation + skill.total_twist


def _double_somersault_points(skill: Skill) -> int:
    twist = skill.total_twist
    points = 2
    if skill.backward:
        points += 1
    if skill.shape in OPEN_SHAPES:
        points += 2
    if twist > 4:
        points += twist - 4
    return points + skill.rotation + twist


def _triple_somersault_points(skill: Skill) -> int:
    twist = skill.total_twist
    points = 4
    if skill.backward:
        points += 2
    if skill.shape in OPEN_SHAPES:
        points += 3
    if twist > 2:
        points += (twist - 2) * 2
    return points + skill.rotation + twist


def _quad_somersault_points(skill: Skill) -> int:
    points = 6
    if skill.backward:
        points += 3
    if skill.shape in OPEN_SHAPES:
        points += 4
    return points + skill.rotation + skill.total_twist * 3


def tariff_points(skill: Skill) -> int:
    """Tariff in tenths of a point."""
    skill = normalize_skill(skill)
    rotation = skill.rotation
    if rotation == 0:
        return _no_somersault_points(skill)
    if rotation < DOUBLE_BAND_START:
        return _single_somersault_points(skill)
    if rotation < TRIPLE_BAND_START:
        return _double_somersault_points(skill)
    if rotation < QUAD_BAND_START:
        return _triple_somersault_points(skill)
    return _quad_somersault_points(skill)


def compute_tariff(skill: Skill) -> float:
    return tariff_points(skill) / 10


def with_tariff(skill: Skill) -> TariffedSkill:
    normalized = normalize_skill(skill)
    return TariffedSkill(skill=normalized, tariff=compute_tariff(normalized))


def sum_tariffs(tariffs: list[float]) -> float:
    # Tariffs are whole tenths; sum in tenths to keep one decimal place exact.
    return sum(round(value * 10) for value in tariffs) / 10


__all__ = [
    "TariffedSkill",
    "compute_tariff",
    "sum_tariffs",
    "tariff_points",
    "with_tariff",
]
