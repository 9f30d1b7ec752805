from __future__ import annotations

from typing import Literal

Stance = Literal["Feet", "Front", "Back", "Seat", "Invalid"]
ShapeName = Literal["Straight", "Tuck", "Pike", "Straddle", "Invalid"]

FEET: Stance = "Feet"
FRONT: Stance = "Front"
BACK: Stance = "Back"
SEAT: Stance = "Seat"
INVALID: Stance = "Invalid"

STANCES: tuple[Stance, ...] = (FEET, FRONT, BACK, SEAT, INVALID)

STRAIGHT: ShapeName = "Straight"
TUCK: ShapeName = "Tuck"
PIKE: ShapeName = "Pike"
STRADDLE: ShapeName = "Straddle"
INVALID_SHAPE: ShapeName = "Invalid"

SHAPES: tuple[ShapeName, ...] = (STRAIGHT, TUCK, PIKE, STRADDLE, INVALID_SHAPE)

# Shapes that earn the open-shape bonus in the somersault bands.
OPEN_SHAPES = frozenset({STRAIGHT, PIKE})

# Rotation bands in quarter turns.
DOUBLE_BAND_START = 8
TRIPLE_BAND_START = 12
QUAD_BAND_START = 16

# Upper rotation bound (inclusive) for 1, 2 and 3 twist phases.
PHASE_BOUNDS = (6, 10, 14)
MAX_PHASES = 4

# Routines score at most this many distinct skills; the skill at
# SCORED_SKILL_LIMIT - 1 must land on feet.
SCORED_SKILL_LIMIT = 10

GENERIC_SKILL_NAME = "Custom Skill"

MESSAGE_SEPARATOR = " / "
MESSAGE_DUPLICATE = "Duplicate"
MESSAGE_DUPLICATE_FIRST = "Duplicate (Counts Once)"
MESSAGE_INVALID_LANDING = "Invalid Landing"
MESSAGE_TENTH_SKILL = "10th Must Land Feet"
MESSAGE_OVER_LIMIT = "Skill >10 (No Tariff)"

REPORT_SCHEMA_VERSION = "1"

SORT_ORDERS = ("tariff-desc", "tariff-asc", "alpha-asc", "alpha-desc")
DEFAULT_SORT_ORDER = "tariff-desc"

ENV_LOG_LEVEL = "TARIFFCALC_LOG_LEVEL"
ENV_STRICT_PHASES = "TARIFFCALC_STRICT_PHASES"

EXIT_SUCCESS = 0
EXIT_ROUTINE_INVALID = 1
EXIT_INTERNAL_ERROR = 2
