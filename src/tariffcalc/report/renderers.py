from __future__ import annotations

import json
from pathlib import Path

from tariffcalc.report.schema import RoutineReport, SkillEvaluation


def _flag(value: bool) -> str:
    return "yes" if value else "no"


def _twists(values: tuple[int, ...]) -> str:
    return ", ".join(str(value) for value in values)


def render_markdown(report: RoutineReport) -> str:
    lines: list[str] = []
    title = report.name or "routine"
    lines.append(f"## Routine Report: {title}")
    lines.append("")
    status = "Problems found" if report.has_problems else "Valid routine"
    lines.append(f"- Status: **{status}**")
    lines.append(f"- Skills: **{len(report.skills)}**")
    lines.append(f"- Total tariff: **{report.total_tariff:.1f}**")
    lines.append(f"- Raw tariff: **{report.raw_tariff:.1f}**")

    lines.append("")
    lines.append("### Skills")
    lines.append("")
    if not report.skills:
        lines.append("No skills.")
    else:
        lines.append("| # | Skill | FIG | Takeoff | Landing | Tariff | Notes |")
        lines.append("|---:|---|---|---|---|---:|---|")
        for index, entry in enumerate(report.skills, start=1):
            notation = f"`{entry.fig_notation}`" if entry.fig_notation else ""
            lines.append(
                f"| {index} | {entry.skill.name} | {notation} | {entry.skill.takeoff_position} "
                f"| {entry.landing_position} | {entry.tariff:.1f} | {entry.message} |"
            )

    lines.append("")
    lines.append("### Checks")
    lines.append("")
    lines.append(f"- Duplicates: {_flag(report.has_duplicates)}")
    lines.append(f"- Invalid transitions: {_flag(report.has_invalid_transitions)}")
    lines.append(f"- Invalid landings: {_flag(report.has_invalid_landings)}")
    lines.append(f"- Tenth skill off feet: {_flag(report.tenth_skill_warning)}")
    lines.append(f"- Too long: {_flag(report.routine_too_long)}")
    lines.append("")
    return "\n".join(lines)


def render_evaluation(evaluation: SkillEvaluation) -> str:
    skill = evaluation.skill
    lines = [
        f"Skill: {evaluation.name}",
        f"Rotation: {skill.rotation}/4 {'backward' if skill.backward else 'forward'}",
        f"Twists: {_twists(skill.twist_distribution)}",
        f"Shape: {skill.shape}",
        f"Takeoff: {skill.takeoff_position}",
        f"Landing: {evaluation.landing_position}",
        f"Tariff: {evaluation.tariff:.1f}",
    ]
    if evaluation.fig_notation:
        lines.append(f"FIG: {evaluation.fig_notation}")
    return "\n".join(lines)


def write_reports(report: RoutineReport, json_path: Path | None = None, md_path: Path | None = None) -> None:
    if json_path is not None:
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(json.dumps(report.to_dict(), indent=2, sort_keys=True), encoding="utf-8")
    if md_path is not None:
        md_path.parent.mkdir(parents=True, exist_ok=True)
        md_path.write_text(render_markdown(report), encoding="utf-8")


__all__ = ["render_evaluation", "render_markdown", "write_reports"]
