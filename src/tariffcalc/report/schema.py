from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tariffcalc.constants import MESSAGE_SEPARATOR, REPORT_SCHEMA_VERSION, Stance
from tariffcalc.skill import Skill


@dataclass(slots=True)
class ValidatedSkill:
    skill: Skill
    tariff: float
    landing_position: Stance
    fig_notation: str
    is_duplicate: bool = False
    invalid_transition: bool = False
    invalid_landing: bool = False
    messages: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return MESSAGE_SEPARATOR.join(self.messages)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.skill.to_dict(),
            "tariff": self.tariff,
            "landing_position": self.landing_position,
            "fig_notation": self.fig_notation,
            "is_duplicate": self.is_duplicate,
            "invalid_transition": self.invalid_transition,
            "invalid_landing": self.invalid_landing,
            "message": self.message,
        }


@dataclass(slots=True)
class RoutineReport:
    skills: list[ValidatedSkill] = field(default_factory=list)
    total_tariff: float = 0.0
    raw_tariff: float = 0.0
    has_duplicates: bool = False
    has_invalid_transitions: bool = False
    has_invalid_landings: bool = False
    tenth_skill_warning: bool = False
    routine_too_long: bool = False
    name: str | None = None
    schema_version: str = REPORT_SCHEMA_VERSION

    @property
    def messages(self) -> list[str]:
        return [entry.message for entry in self.skills]

    @property
    def has_problems(self) -> bool:
        return (
            self.has_duplicates
            or self.has_invalid_transitions
            or self.has_invalid_landings
            or self.tenth_skill_warning
            or self.routine_too_long
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "schema_version": self.schema_version,
            "skills": [entry.to_dict() for entry in self.skills],
            "total_tariff": self.total_tariff,
            "raw_tariff": self.raw_tariff,
            "has_duplicates": self.has_duplicates,
            "has_invalid_transitions": self.has_invalid_transitions,
            "has_invalid_landings": self.has_invalid_landings,
            "tenth_skill_warning": self.tenth_skill_warning,
            "routine_too_long": self.routine_too_long,
            "messages": self.messages,
        }
        if self.name is not None:
            payload["name"] = self.name
        return payload


@dataclass(slots=True, frozen=True)
class SkillEvaluation:
    skill: Skill
    tariff: float
    landing_position: Stance
    fig_notation: str

    @property
    def name(self) -> str:
        return self.skill.name

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.skill.to_dict(),
            "tariff": self.tariff,
            "landing_position": self.landing_position,
            "fig_notation": self.fig_notation,
        }


__all__ = ["RoutineReport", "SkillEvaluation", "ValidatedSkill"]
