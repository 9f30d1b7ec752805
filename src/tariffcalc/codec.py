"""Decoding of skill and routine payloads (JSON/YAML mappings) into skills."""
from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

import yaml

from tariffcalc.constants import FEET, STRAIGHT
from tariffcalc.errors import ERROR_CODE_PHASE_MISMATCH, SkillDecodeError
from tariffcalc.phases import check_phases
from tariffcalc.skill import Skill, normalize_skill, parse_shape, parse_stance

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRUE_FLAGS = {"1", "true", "on", "yes"}
_FALSE_FLAGS = {"", "0", "false", "off", "no"}
_TWIST_VALUE_ERROR = "twist_distribution values must be non-negative integers"


@dataclass(slots=True)
class RoutineSpec:
    skills: list[Skill]
    name: str | None = None
    source_path: Path | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


def _parse_rotation(raw: Any, *, index: int | None) -> int:
    if isinstance(raw, bool):
        raise SkillDecodeError("rotation must be an integer", skill_index=index)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise SkillDecodeError(f"rotation must be an integer; got {raw!r}", skill_index=index)


def _parse_twists(raw: Any, *, index: int | None) -> tuple[int, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list | tuple):
        raise SkillDecodeError("twist_distribution must be a list", skill_index=index)
    twists: list[int] = []
    for phase, value in enumerate(raw):
        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            raise SkillDecodeError(
                f"{_TWIST_VALUE_ERROR}; got {value!r}", skill_index=index
            )
        try:
            count = int(value)
        except (TypeError, ValueError):
            logger.warning("Invalid twist value %r at phase %d, using 0", value, phase + 1)
            count = 0
        if count < 0:
            raise SkillDecodeError(
                f"{_TWIST_VALUE_ERROR}; got {value!r}", skill_index=index
            )
        twists.append(count)
    return tuple(twists)


def _parse_flag(raw: Any, *, field_name: str, index: int | None) -> bool:
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    normalized = str(raw).strip().lower()
    if normalized in _TRUE_FLAGS:
        return True
    if normalized in _FALSE_FLAGS:
        return False
    raise SkillDecodeError(f"{field_name} must be a boolean; got {raw!r}", skill_index=index)


def _parse_optional(data: dict[str, Any], key: str, parser: Callable[[Any], T], default: T) -> T:
    raw = data.get(key)
    if raw is None:
        return default
    return parser(raw)


def skill_from_dict(data: Any, *, index: int | None = None, strict_phases: bool = False) -> Skill:
    """Decode one skill record.

    ``name`` and ``tariff`` in the payload are ignored; both are derived.
    With ``strict_phases`` a twist distribution whose length does not match
    the rotation is rejected instead of being padded or truncated.
    """
    if not isinstance(data, dict):
        raise SkillDecodeError("skill must be an object", skill_index=index)

    rotation = _parse_rotation(data.get("rotation", 0), index=index)
    twists = _parse_twists(data.get("twist_distribution"), index=index)
    if strict_phases:
        problem = check_phases(twists, rotation)
        if problem is not None:
            raise SkillDecodeError(problem, skill_index=index, code=ERROR_CODE_PHASE_MISMATCH)

    skill = Skill(
        rotation=rotation,
        twist_distribution=twists,
        takeoff_position=_parse_optional(data, "takeoff_position", parse_stance, FEET),
        shape=_parse_optional(data, "shape", parse_shape, STRAIGHT),
        backward=_parse_flag(data.get("backward"), field_name="backward", index=index),
        seat_landing=_parse_flag(data.get("seat_landing"), field_name="seat_landing", index=index),
    )
    return normalize_skill(skill)


def routine_from_payload(payload: Any, *, strict_phases: bool = False) -> RoutineSpec:
    name: str | None = None
    metadata: dict[str, Any] = {}
    if isinstance(payload, dict):
        name = str(payload["name"]) if payload.get("name") is not None else None
        metadata = {key: value for key, value in payload.items() if key not in {"name", "skills"}}
        payload = payload.get("skills")
    if payload is None:
        return RoutineSpec(skills=[], name=name, metadata=metadata)
    if not isinstance(payload, list):
        raise SkillDecodeError("routine must be a list of skills or a mapping with `skills`")
    skills = [
        skill_from_dict(entry, index=index, strict_phases=strict_phases) for index, entry in enumerate(payload)
    ]
    return RoutineSpec(skills=skills, name=name, metadata=metadata)


def _load_payload(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SkillDecodeError(f"cannot decode {path}: {exc}") from exc
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise SkillDecodeError(f"invalid JSON in {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SkillDecodeError(f"invalid YAML in {path}: {exc}") from exc


def load_routine(path: Path, *, strict_phases: bool = False) -> RoutineSpec:
    routine = routine_from_payload(_load_payload(path), strict_phases=strict_phases)
    routine.source_path = path.resolve()
    if routine.name is None:
        routine.name = path.stem
    return routine


__all__ = ["RoutineSpec", "load_routine", "routine_from_payload", "skill_from_dict"]
