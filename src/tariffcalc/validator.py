"""Routine validation: one ordered pass over a routine's skills.

Order matters. Duplicate tagging and the stance transition check both look
back at positions already processed, so skills are visited by ascending
index.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from tariffcalc.catalog import with_catalog_name
from tariffcalc.constants import (
    FEET,
    INVALID,
    MESSAGE_DUPLICATE,
    MESSAGE_DUPLICATE_FIRST,
    MESSAGE_INVALID_LANDING,
    MESSAGE_OVER_LIMIT,
    MESSAGE_TENTH_SKILL,
    SCORED_SKILL_LIMIT,
)
from tariffcalc.equivalence import skills_equal
from tariffcalc.landing import landing_position
from tariffcalc.notation import fig_notation
from tariffcalc.report.schema import RoutineReport, SkillEvaluation, ValidatedSkill
from tariffcalc.skill import Skill
from tariffcalc.tariff import compute_tariff, sum_tariffs

logger = logging.getLogger(__name__)


def evaluate_skill(skill: Skill) -> SkillEvaluation:
    named = with_catalog_name(skill)
    return SkillEvaluation(
        skill=named,
        tariff=compute_tariff(named),
        landing_position=landing_position(named),
        fig_notation=fig_notation(named),
    )


def _annotate(skill: Skill) -> ValidatedSkill:
    evaluation = evaluate_skill(skill)
    return ValidatedSkill(
        skill=evaluation.skill,
        tariff=evaluation.tariff,
        landing_position=evaluation.landing_position,
        fig_notation=evaluation.fig_notation,
    )


def _first_match(entries: list[ValidatedSkill], current: ValidatedSkill) -> int | None:
    for index, earlier in enumerate(entries):
        if skills_equal(current.skill, earlier.skill):
            return index
    return None


def bad_transition_message(previous_landing: str, takeoff: str) -> str:
    return f"Bad Transition: {previous_landing} -> {takeoff}"


def validate_routine(skills: Sequence[Skill], *, name: str | None = None) -> RoutineReport:
    report = RoutineReport(name=name, routine_too_long=len(skills) > SCORED_SKILL_LIMIT)
    raw_tariffs: list[float] = []
    counted_tariffs: list[float] = []

    for index, skill in enumerate(skills):
        current = _annotate(skill)
        raw_tariffs.append(current.tariff)

        match = _first_match(report.skills, current)
        if match is not None:
            earlier = report.skills[match]
            if not earlier.is_duplicate:
                earlier.is_duplicate = True
                earlier.messages.append(MESSAGE_DUPLICATE_FIRST)
            current.is_duplicate = True
            current.messages.append(MESSAGE_DUPLICATE)
            report.has_duplicates = True
        elif len(counted_tariffs) < SCORED_SKILL_LIMIT:
            counted_tariffs.append(current.tariff)

        if index > 0:
            previous_landing = report.skills[index - 1].landing_position
            takeoff = current.skill.takeoff_position
            if previous_landing != INVALID and previous_landing != takeoff:
                current.invalid_transition = True
                current.messages.append(bad_transition_message(previous_landing, takeoff))
                report.has_invalid_transitions = True

        if current.landing_position == INVALID:
            current.invalid_landing = True
            current.messages.append(MESSAGE_INVALID_LANDING)
            report.has_invalid_landings = True

        if index == SCORED_SKILL_LIMIT - 1 and current.landing_position != FEET:
            report.tenth_skill_warning = True
            current.messages.append(MESSAGE_TENTH_SKILL)

        if index >= SCORED_SKILL_LIMIT:
            current.messages.append(MESSAGE_OVER_LIMIT)

        report.skills.append(current)

    report.raw_tariff = sum_tariffs(raw_tariffs)
    report.total_tariff = sum_tariffs(counted_tariffs)
    logger.debug(
        "Validated routine of %d skill(s): total=%.1f raw=%.1f problems=%s",
        len(report.skills),
        report.total_tariff,
        report.raw_tariff,
        report.has_problems,
    )
    return report


__all__ = ["bad_transition_message", "evaluate_skill", "validate_routine"]
