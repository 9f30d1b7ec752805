"""Trampoline skill tariff calculator and routine validator."""
from __future__ import annotations

from tariffcalc.catalog import COMMON_SKILLS, find_skill_name, get_common_skill, list_common_skills
from tariffcalc.equivalence import skills_equal
from tariffcalc.landing import landing_position
from tariffcalc.notation import fig_notation
from tariffcalc.phases import phase_count, total_twist
from tariffcalc.skill import Skill, normalize_skill
from tariffcalc.tariff import compute_tariff, with_tariff
from tariffcalc.validator import evaluate_skill, validate_routine

__version__ = "0.1.0"

__all__ = [
    "COMMON_SKILLS",
    "Skill",
    "__version__",
    "compute_tariff",
    "evaluate_skill",
    "fig_notation",
    "find_skill_name",
    "get_common_skill",
    "landing_position",
    "list_common_skills",
    "normalize_skill",
    "phase_count",
    "skills_equal",
    "total_twist",
    "validate_routine",
    "with_tariff",
]
