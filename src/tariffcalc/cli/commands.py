from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn

import typer

from tariffcalc.catalog import get_common_skill, list_common_skills
from tariffcalc.codec import load_routine, skill_from_dict
from tariffcalc.constants import (
    DEFAULT_SORT_ORDER,
    ENV_LOG_LEVEL,
    ENV_STRICT_PHASES,
    EXIT_INTERNAL_ERROR,
    EXIT_ROUTINE_INVALID,
    EXIT_SUCCESS,
    SORT_ORDERS,
)
from tariffcalc.errors import (
    ERROR_CODE_ROUTINE_FILE_UNREADABLE,
    ERROR_CODE_UNKNOWN_CATALOG_KEY,
    SkillDecodeError,
    TariffcalcError,
)
from tariffcalc.report import render_evaluation, render_markdown, write_reports
from tariffcalc.skill import skill_key
from tariffcalc.validator import evaluate_skill, validate_routine


def _version_callback(value: bool) -> None:
    if value:
        from tariffcalc import __version__

        typer.echo(f"tariffcalc {__version__}")
        raise typer.Exit()


class _EchoHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        typer.echo(self.format(record), err=True)


def _configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    package_logger = logging.getLogger("tariffcalc")
    package_logger.setLevel(numeric)
    if not any(isinstance(handler, _EchoHandler) for handler in package_logger.handlers):
        handler = _EchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)


app = typer.Typer(add_completion=False, help="Trampoline skill tariffs and routine validation")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
    log_level: str = typer.Option("WARNING", "--log-level", envvar=ENV_LOG_LEVEL, help="Logging level."),
) -> None:
    _configure_logging(log_level)


def _fail(error: TariffcalcError) -> NoReturn:
    typer.echo(f"ERROR: {error.message}", err=True)
    raise typer.Exit(EXIT_INTERNAL_ERROR)


@app.command()
def evaluate(
    rotation: int = typer.Option(4, "--rotation", "-r", help="Somersault rotation in quarter turns"),
    twist: list[int] | None = typer.Option(None, "--twist", "-t", help="Half twists per phase (repeatable)"),
    takeoff: str = typer.Option("Feet", "--takeoff", help="Feet | Front | Back | Seat"),
    shape: str = typer.Option("Straight", "--shape", help="Straight | Tuck | Pike | Straddle"),
    backward: bool = typer.Option(False, "--backward/--forward", help="Rotation direction"),
    seat_landing: bool = typer.Option(False, "--seat-landing", help="Skill lands in a seated position"),
    catalog_key: str | None = typer.Option(None, "--catalog", "-c", help="Evaluate a catalog skill by key"),
    as_json: bool = typer.Option(False, "--json", help="Print the evaluation as JSON"),
) -> None:
    """Compute tariff, landing position and FIG notation for one skill."""
    if catalog_key is not None:
        skill = get_common_skill(catalog_key)
        if skill is None:
            _fail(
                TariffcalcError(
                    code=ERROR_CODE_UNKNOWN_CATALOG_KEY,
                    message=f"Unknown catalog skill: {catalog_key}",
                    details={"key": catalog_key},
                )
            )
    else:
        try:
            skill = skill_from_dict(
                {
                    "rotation": rotation,
                    "twist_distribution": list(twist or []),
                    "takeoff_position": takeoff,
                    "shape": shape,
                    "backward": backward,
                    "seat_landing": seat_landing,
                }
            )
        except SkillDecodeError as exc:
            _fail(TariffcalcError.from_exception(exc))

    evaluation = evaluate_skill(skill)
    if as_json:
        typer.echo(json.dumps(evaluation.to_dict(), indent=2, sort_keys=True))
    else:
        typer.echo(render_evaluation(evaluation))
    raise typer.Exit(EXIT_SUCCESS)


@app.command()
def validate(
    routine_file: Path = typer.Argument(..., help="Routine file (.yaml, .yml or .json)"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    out_json: Path | None = typer.Option(None, "--out-json", help="Also write the JSON report here"),
    out_md: Path | None = typer.Option(None, "--out-md", help="Also write the Markdown report here"),
    strict_phases: bool = typer.Option(
        False,
        "--strict-phases",
        envvar=ENV_STRICT_PHASES,
        help="Reject twist distributions whose length does not match the rotation.",
    ),
) -> None:
    """Validate a routine and report tariff totals, duplicates and bad transitions."""
    try:
        routine = load_routine(routine_file, strict_phases=strict_phases)
    except SkillDecodeError as exc:
        _fail(TariffcalcError.from_exception(exc))
    except OSError as exc:
        _fail(
            TariffcalcError(
                code=ERROR_CODE_ROUTINE_FILE_UNREADABLE,
                message=f"Cannot read routine file {routine_file}: {exc}",
            )
        )

    report = validate_routine(routine.skills, name=routine.name)
    write_reports(report, json_path=out_json, md_path=out_md)
    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2, sort_keys=True))
    else:
        typer.echo(render_markdown(report))
    raise typer.Exit(EXIT_ROUTINE_INVALID if report.has_problems else EXIT_SUCCESS)


@app.command()
def catalog(
    sort: str = typer.Option(DEFAULT_SORT_ORDER, "--sort", help=" | ".join(SORT_ORDERS)),
    as_json: bool = typer.Option(False, "--json", help="Print the catalog as JSON"),
) -> None:
    """List the common skills catalog."""
    entries = list_common_skills(sort)
    if as_json:
        payload = [
            {
                "key": entry.key,
                "name": entry.name,
                "tariff": entry.tariff,
                "fig_notation": entry.fig_notation,
                "skill_key": skill_key(entry.skill),
                "skill": entry.skill.to_dict(),
            }
            for entry in entries
        ]
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        raise typer.Exit(EXIT_SUCCESS)

    for entry in entries:
        notation = f"  {entry.fig_notation}" if entry.fig_notation else ""
        typer.echo(f"{entry.key:<16} {entry.tariff:>4.1f}  {entry.name}{notation}")
    raise typer.Exit(EXIT_SUCCESS)


__all__ = ["app"]
