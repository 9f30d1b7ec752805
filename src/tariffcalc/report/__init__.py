from tariffcalc.report.renderers import render_evaluation, render_markdown, write_reports
from tariffcalc.report.schema import RoutineReport, SkillEvaluation, ValidatedSkill

__all__ = [
    "RoutineReport",
    "SkillEvaluation",
    "ValidatedSkill",
    "render_evaluation",
    "render_markdown",
    "write_reports",
]
