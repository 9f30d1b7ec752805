from __future__ import annotations

from tariffcalc.errors import (
    ERROR_CODE_DECODE_FAILED,
    ERROR_CODE_PHASE_MISMATCH,
    SkillDecodeError,
    TariffcalcError,
)


def test_error_codes_are_stable() -> None:
    assert ERROR_CODE_DECODE_FAILED == "DECODE_FAILED"
    assert ERROR_CODE_PHASE_MISMATCH == "PHASE_MISMATCH"


def test_decode_error_is_a_value_error() -> None:
    assert isinstance(SkillDecodeError("bad"), ValueError)


def test_tariffcalc_error_to_dict_includes_required_fields() -> None:
    error = TariffcalcError(
        code=ERROR_CODE_PHASE_MISMATCH,
        message="requires 2 twist phase(s)",
        skill_index=4,
        details={"rotation": 8},
    )
    payload = error.to_dict()
    assert payload["code"] == "PHASE_MISMATCH"
    assert payload["skill_index"] == 4
    assert payload["details"]["rotation"] == 8


def test_tariffcalc_error_from_exception() -> None:
    error = TariffcalcError.from_exception(SkillDecodeError("rotation must be an integer", skill_index=1))
    assert error.code == ERROR_CODE_DECODE_FAILED
    assert error.skill_index == 1
    assert error.message == "skill 1: rotation must be an integer"
    assert "skill_index" not in TariffcalcError(code="X", message="y").to_dict()


def test_decode_error_code_flows_into_structured_error() -> None:
    exc = SkillDecodeError("requires 2 twist phase(s)", skill_index=0, code=ERROR_CODE_PHASE_MISMATCH)
    assert TariffcalcError.from_exception(exc).code == ERROR_CODE_PHASE_MISMATCH
