from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ERROR_CODE_DECODE_FAILED = "DECODE_FAILED"
ERROR_CODE_PHASE_MISMATCH = "PHASE_MISMATCH"
ERROR_CODE_UNKNOWN_CATALOG_KEY = "UNKNOWN_CATALOG_KEY"
ERROR_CODE_ROUTINE_FILE_UNREADABLE = "ROUTINE_FILE_UNREADABLE"


class SkillDecodeError(ValueError):
    """Raised when a skill or routine payload is structurally invalid."""

    def __init__(
        self,
        message: str,
        *,
        skill_index: int | None = None,
        code: str = ERROR_CODE_DECODE_FAILED,
    ) -> None:
        self.skill_index = skill_index
        self.code = code
        if skill_index is not None:
            message = f"skill {skill_index}: {message}"
        super().__init__(message)


@dataclass(slots=True, frozen=True)
class TariffcalcError:
    code: str
    message: str
    skill_index: int | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }
        if self.skill_index is not None:
            payload["skill_index"] = self.skill_index
        return payload

    @classmethod
    def from_exception(cls, exc: SkillDecodeError) -> TariffcalcError:
        return cls(code=exc.code, message=str(exc), skill_index=exc.skill_index)


__all__ = [
    "ERROR_CODE_DECODE_FAILED",
    "ERROR_CODE_PHASE_MISMATCH",
    "ERROR_CODE_ROUTINE_FILE_UNREADABLE",
    "ERROR_CODE_UNKNOWN_CATALOG_KEY",
    "SkillDecodeError",
    "TariffcalcError",
]
