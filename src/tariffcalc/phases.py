"""Twist phase model: how many twist phases a rotation is described over."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from tariffcalc.constants import MAX_PHASES, PHASE_BOUNDS

if TYPE_CHECKING:
    from tariffcalc.skill import Skill


def phase_count(rotation: int) -> int:
    magnitude = abs(rotation)
    for phases, upper in enumerate(PHASE_BOUNDS, start=1):
        if magnitude <= upper:
            return phases
    return MAX_PHASES


def total_twist(skill: Skill) -> int:
    return sum(skill.twist_distribution)


def normalize_twists(twists: Sequence[int], rotation: int) -> tuple[int, ...]:
    """Zero-pad or truncate ``twists`` to exactly ``phase_count(rotation)`` entries."""
    expected = phase_count(rotation)
    trimmed = tuple(int(value) for value in twists[:expected])
    return trimmed + (0,) * (expected - len(trimmed))


def check_phases(twists: Sequence[int], rotation: int) -> str | None:
    expected = phase_count(rotation)
    if len(twists) != expected:
        return f"requires {expected} twist phase(s) for {rotation}/4 rotation, got {len(twists)}"
    return None


__all__ = ["check_phases", "normalize_twists", "phase_count", "total_twist"]
