"""Reference catalog of common trampoline skills.

The catalog is a module-level, read-only table keyed by a stable identifier.
It is consulted for display names and listings and is never mutated.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType

from tariffcalc.constants import (
    BACK,
    DEFAULT_SORT_ORDER,
    FEET,
    FRONT,
    GENERIC_SKILL_NAME,
    SEAT,
    SORT_ORDERS,
    STRAIGHT,
    TUCK,
    ShapeName,
    Stance,
)
from tariffcalc.equivalence import is_basic_jump, shape_matters, skills_equal
from tariffcalc.notation import fig_notation
from tariffcalc.skill import Skill, normalize_skill
from tariffcalc.tariff import compute_tariff


def _skill(
    name: str,
    rotation: int,
    twists: tuple[int, ...],
    *,
    takeoff: Stance = FEET,
    shape: ShapeName = STRAIGHT,
    backward: bool = False,
    seat_landing: bool = False,
) -> Skill:
    return normalize_skill(
        Skill(
            name=name,
            rotation=rotation,
            twist_distribution=twists,
            takeoff_position=takeoff,
            shape=shape,
            backward=backward,
            seat_landing=seat_landing,
        )
    )


_COMMON_SKILLS: dict[str, Skill] = {
    "shapeJump": _skill("Shape Jump", 0, (0,), shape=TUCK),
    "halfTwist": _skill("Half Twist", 0, (1,)),
    "fullTwist": _skill("Full Twist", 0, (2,)),
    "seatDrop": _skill("Seat Drop", 0, (0,), seat_landing=True),
    "seatToFeet": _skill("Seat To Feet", 0, (0,), takeoff=SEAT),
    "frontToSeat": _skill("Front To Seat", 4, (0,), shape=TUCK, seat_landing=True),
    "backToSeat": _skill("Back To Seat", 4, (0,), shape=TUCK, backward=True, seat_landing=True),
    "baraniToFront": _skill("Barani To Front", 3, (1,), shape=TUCK),
    "backDrop": _skill("Back Drop", 1, (0,), backward=True),
    "frontDrop": _skill("Front Drop", 1, (0,)),
    "backHalfToFeet": _skill("Back Half Twist To Feet", 1, (1,), takeoff=BACK),
    "backToFeet": _skill("Back To Feet", 1, (0,), takeoff=BACK),
    "frontToFeet": _skill("Front To Feet", 1, (0,), takeoff=FRONT, backward=True),
    "front": _skill("Front", 4, (0,), shape=TUCK),
    "straightFront": _skill("Straight Front", 4, (0,)),
    "ballOut": _skill("Ball-Out", 5, (0,), takeoff=BACK, shape=TUCK),
    "baraniBallOut": _skill("Barani Ball-Out", 5, (1,), takeoff=BACK, shape=TUCK),
    "rudiBallOut": _skill("Rudi Ball-Out", 5, (3,), takeoff=BACK),
    "crashDive": _skill("Crash Dive", 3, (0,)),
    "lazyBack": _skill("Lazy Back", 3, (0,), backward=True),
    "seatHalfToFeet": _skill("Seat Half Twist To Feet", 0, (1,), takeoff=SEAT),
    "seatHalfToSeat": _skill("Seat Half Twist To Seat", 0, (1,), takeoff=SEAT, seat_landing=True),
    "seatHalfToFront": _skill("Seat Half Twist To Front", 1, (1,), takeoff=SEAT, backward=True),
    "barani": _skill("Barani", 4, (1,), shape=TUCK),
    "rudi": _skill("Rudi", 4, (3,)),
    "randi": _skill("Randi", 4, (5,)),
    "fullBack": _skill("Full Back", 4, (2,), backward=True),
    "doubleFullBack": _skill("Double Full Back", 4, (4,), backward=True),
    "backSomersault": _skill("Back", 4, (0,), shape=TUCK, backward=True),
    "fullCody": _skill("Full Cody", 5, (2,), takeoff=FRONT, backward=True),
    "cody": _skill("Cody", 5, (0,), takeoff=FRONT, shape=TUCK, backward=True),
    "doubleBack": _skill("Double Back", 8, (0, 0), shape=TUCK, backward=True),
    "tripleBack": _skill("Triple Back", 12, (0, 0, 0), shape=TUCK, backward=True),
    "halfOut": _skill("Half-Out", 8, (0, 1), shape=TUCK),
    "halfhalf": _skill("Half Half", 8, (1, 1), shape=TUCK, backward=True),
    "trifHalfOut": _skill("Trif Half-Out", 12, (0, 0, 1), shape=TUCK),
    "fullFull": _skill("Full Full", 8, (2, 2), backward=True),
    "fullRudi": _skill("Full Rudi", 8, (2, 3)),
    "miller": _skill("Miller", 8, (3, 3), backward=True),
}

COMMON_SKILLS: Mapping[str, Skill] = MappingProxyType(_COMMON_SKILLS)


@dataclass(slots=True, frozen=True)
class CatalogEntry:
    key: str
    name: str
    tariff: float
    fig_notation: str
    skill: Skill


def get_common_skill(key: str) -> Skill | None:
    return COMMON_SKILLS.get(key)


def _same_apart_from_shape(a: Skill, b: Skill) -> bool:
    return (
        a.rotation == b.rotation
        and a.takeoff_position == b.takeoff_position
        and a.backward == b.backward
        and a.seat_landing == b.seat_landing
        and a.twist_distribution == b.twist_distribution
    )


def find_skill_name(skill: Skill) -> str:
    """Canonical display name for ``skill``, or ``"Custom Skill"`` when uncatalogued.

    Basic jumps are named after their shape. A catalogued skill performed in
    another shape keeps the catalog name with the shape appended, provided
    shape distinguishes skills of that size.
    """
    skill = normalize_skill(skill)
    if is_basic_jump(skill):
        return "Straight Jump" if skill.shape == STRAIGHT else f"{skill.shape} Jump"

    for reference in COMMON_SKILLS.values():
        if skills_equal(skill, reference):
            return reference.name

    if shape_matters(skill.rotation, skill.total_twist):
        for reference in COMMON_SKILLS.values():
            if _same_apart_from_shape(skill, reference):
                return f"{reference.name} {skill.shape}"
    return GENERIC_SKILL_NAME


def with_catalog_name(skill: Skill) -> Skill:
    return replace(normalize_skill(skill), name=find_skill_name(skill))


def _sorted_entries(entries: list[CatalogEntry], order: str) -> list[CatalogEntry]:
    if order == "tariff-asc":
        return sorted(entries, key=lambda entry: (entry.tariff, entry.name))
    if order == "alpha-asc":
        return sorted(entries, key=lambda entry: (entry.name, -entry.tariff))
    if order == "alpha-desc":
        # Name descending, tariff descending on ties.
        by_tariff = sorted(entries, key=lambda entry: -entry.tariff)
        return sorted(by_tariff, key=lambda entry: entry.name, reverse=True)
    return sorted(entries, key=lambda entry: (-entry.tariff, entry.name))


def list_common_skills(sort_by: str = DEFAULT_SORT_ORDER) -> list[CatalogEntry]:
    order = sort_by if sort_by in SORT_ORDERS else DEFAULT_SORT_ORDER
    entries = [
        CatalogEntry(
            key=key,
            name=skill.name,
            tariff=compute_tariff(skill),
            fig_notation=fig_notation(skill),
            skill=skill,
        )
        for key, skill in COMMON_SKILLS.items()
    ]
    return _sorted_entries(entries, order)


__all__ = [
    "COMMON_SKILLS",
    "CatalogEntry",
    "find_skill_name",
    "get_common_skill",
    "list_common_skills",
    "with_catalog_name",
]
