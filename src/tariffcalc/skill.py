from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from tariffcalc.constants import (
    FEET,
    GENERIC_SKILL_NAME,
    INVALID,
    SHAPES,
    STANCES,
    STRAIGHT,
    ShapeName,
    Stance,
)
from tariffcalc.phases import normalize_twists

logger = logging.getLogger(__name__)

_STANCE_BY_KEY: dict[str, Stance] = {stance.lower(): stance for stance in STANCES if stance != INVALID}
_SHAPE_BY_KEY: dict[str, ShapeName] = {shape.lower(): shape for shape in SHAPES}


@dataclass(slots=True, frozen=True)
class Skill:
    rotation: int = 0
    twist_distribution: tuple[int, ...] = (0,)
    takeoff_position: Stance = FEET
    shape: ShapeName = STRAIGHT
    backward: bool = False
    seat_landing: bool = False
    name: str = GENERIC_SKILL_NAME

    def __post_init__(self) -> None:
        if not isinstance(self.twist_distribution, tuple):
            object.__setattr__(self, "twist_distribution", tuple(self.twist_distribution))

    @property
    def total_twist(self) -> int:
        return sum(self.twist_distribution)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "rotation": self.rotation,
            "twist_distribution": list(self.twist_distribution),
            "takeoff_position": self.takeoff_position,
            "shape": self.shape,
            "backward": self.backward,
            "seat_landing": self.seat_landing,
        }


def parse_stance(text: str | None) -> Stance:
    if text is None:
        return INVALID
    return _STANCE_BY_KEY.get(str(text).strip().lower(), INVALID)


def parse_shape(text: str | None) -> ShapeName:
    shape = _SHAPE_BY_KEY.get(str(text or "").strip().lower())
    if shape is None:
        logger.warning("Invalid shape string %r received, using default %s", text, STRAIGHT)
        return STRAIGHT
    return shape


def normalize_skill(skill: Skill) -> Skill:
    """Return ``skill`` with non-negative rotation and a phase-aligned twist distribution.

    A negative rotation is read as a somersault in the opposite direction: the
    sign is folded into ``backward`` before any other computation.
    """
    rotation = skill.rotation
    backward = skill.backward
    if rotation < 0:
        logger.warning("Negative rotation %d folded into direction (backward=%s)", rotation, not backward)
        rotation = -rotation
        backward = not backward
    twists = normalize_twists(skill.twist_distribution, rotation)
    if twists != skill.twist_distribution:
        logger.debug(
            "Twist distribution %s normalized to %s for rotation %d",
            list(skill.twist_distribution),
            list(twists),
            rotation,
        )
    if rotation == skill.rotation and twists == skill.twist_distribution:
        return skill
    return replace(skill, rotation=rotation, backward=backward, twist_distribution=twists)


def skill_key(skill: Skill) -> str:
    twists = "_".join(str(value) for value in skill.twist_distribution) or "0"
    return (
        f"R{skill.rotation}_T{twists}_S{skill.shape}_B{str(skill.backward).lower()}"
        f"_SL{str(skill.seat_landing).lower()}_TP{skill.takeoff_position}"
    )


__all__ = ["Skill", "normalize_skill", "parse_shape", "parse_stance", "skill_key"]
