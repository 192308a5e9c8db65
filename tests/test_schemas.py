from __future__ import annotations

import pytest
from pydantic import ValidationError

from bfvm.schemas import ErrorKind, RunReport, VMSnapshot, VMStatus


def _snapshot(**kw) -> VMSnapshot:
    fields = dict(status=VMStatus.HALTED_SUCCESS, pc=2, pointer=0, cell=0, program_length=2)
    fields.update(kw)
    return VMSnapshot(**fields)


def test_snapshot_bounds() -> None:
    with pytest.raises(ValidationError):
        _snapshot(pointer=65536)
    with pytest.raises(ValidationError):
        _snapshot(cell=256)


def test_failed_report_requires_error() -> None:
    with pytest.raises(ValidationError, match="requires an error"):
        RunReport(ok=False, snapshot=_snapshot())


def test_successful_report_rejects_error() -> None:
    with pytest.raises(ValidationError, match="cannot carry an error"):
        RunReport(ok=True, error="boom", snapshot=_snapshot())


def test_report_json_round_trip() -> None:
    report = RunReport(
        ok=False,
        error="UnmatchedJump: Make sure to close your brackets!",
        error_kind=ErrorKind.UNMATCHED_JUMP,
        snapshot=_snapshot(status=VMStatus.HALTED_ERROR, pc=0),
    )
    data = report.model_dump(mode="json")
    assert data["error_kind"] == "UnmatchedJump"
    assert data["snapshot"]["status"] == "halted_error"
    assert RunReport.model_validate_json(report.model_dump_json()) == report
