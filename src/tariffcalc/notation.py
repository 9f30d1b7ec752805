from __future__ import annotations

from tariffcalc.constants import PIKE, STRADDLE, STRAIGHT, TUCK, ShapeName
from tariffcalc.equivalence import is_basic_jump, shape_matters
from tariffcalc.skill import Skill, normalize_skill

_SHAPE_SYMBOLS: dict[ShapeName, str] = {
    TUCK: "o",
    PIKE: "<",
    STRAIGHT: "/",
    STRADDLE: "v",
}
_UNKNOWN_SHAPE_SYMBOL = "?"
_NO_TWIST_TOKEN = "-"


def shape_symbol(shape: ShapeName) -> str:
    return _SHAPE_SYMBOLS.get(shape, _UNKNOWN_SHAPE_SYMBOL)


def fig_notation(skill: Skill) -> str:
    """Render ``skill`` in FIG notation, e.g. ``"(8 - 1 o)"`` for a tucked half-out.

    Straight jumps and seat drops have no notation and render as ``""``.
    """
    skill = normalize_skill(skill)
    symbol = shape_symbol(skill.shape)
    if skill.rotation == 0 and skill.total_twist == 0:
        if skill.shape != STRAIGHT and is_basic_jump(skill):
            return f"({symbol})"
        return ""

    twist_tokens = [str(value) if value else _NO_TWIST_TOKEN for value in skill.twist_distribution]
    parts = [str(skill.rotation), *twist_tokens]
    if shape_matters(skill.rotation, skill.total_twist):
        parts.append(symbol)
    return f"({' '.join(parts)})"


__all__ = ["fig_notation", "shape_symbol"]
