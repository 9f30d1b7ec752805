"""Skill equivalence: when two skills count as the same skill.

Shape and phase-by-phase twist placement only distinguish skills above
certain rotation thresholds. The same thresholds decide whether the FIG
notation shows a shape symbol and whether a catalog name gets a shape suffix.
"""
from __future__ import annotations

from tariffcalc.constants import SEAT
from tariffcalc.landing import landing_position
from tariffcalc.skill import Skill, normalize_skill


def is_basic_jump(skill: Skill) -> bool:
    """No somersault, no twist, and no seat at either end."""
    return (
        skill.rotation == 0
        and skill.total_twist == 0
        and skill.takeoff_position != SEAT
        and landing_position(skill) != SEAT
    )


def shape_matters(rotation: int, total_twist: int) -> bool:
    """Whether shape distinguishes a somersault of this size.

    Below three quarter turns shape is irrelevant; single somersaults keep
    their shape until they reach a full twist; doubles and up always do.
    Basic jumps are handled separately by :func:`is_basic_jump`.
    """
    if rotation == 0 and total_twist > 0:
        return False
    if rotation < 3:
        return False
    if rotation < 6 and total_twist >= 2:
        return False
    return True


def _core_fields_match(a: Skill, b: Skill) -> bool:
    return (
        a.total_twist == b.total_twist
        and a.rotation == b.rotation
        and a.backward == b.backward
        and a.seat_landing == b.seat_landing
        and a.takeoff_position == b.takeoff_position
    )


def skills_equal(a: Skill, b: Skill) -> bool:
    a = normalize_skill(a)
    b = normalize_skill(b)
    if not _core_fields_match(a, b):
        return False
    # Core fields match, so both skills share the same landing and seat involvement.
    if is_basic_jump(a):
        return a.shape == b.shape
    if a.rotation < 6:
        return not shape_matters(a.rotation, a.total_twist) or a.shape == b.shape
    return a.shape == b.shape and a.twist_distribution == b.twist_distribution


__all__ = ["is_basic_jump", "shape_matters", "skills_equal"]
