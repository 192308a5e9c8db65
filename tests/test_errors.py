from __future__ import annotations

import pytest

from bfvm.errors import (
    BadInput,
    BrainfuckError,
    InputEOF,
    MemoryOverflow,
    MemoryUnderflow,
    NoProgramLoaded,
    UnmatchedJump,
)
from bfvm.schemas import ErrorKind


@pytest.mark.parametrize(
    ("error", "kind", "message"),
    [
        (BadInput("x"), ErrorKind.BAD_INPUT, "BadInput: Invalid character encountered 'x'"),
        (NoProgramLoaded(), ErrorKind.NO_PROGRAM_LOADED, "NoProgramLoaded: No program loaded!"),
        (MemoryOverflow(), ErrorKind.MEMORY_OVERFLOW, "MemoryOverflow: Reached memory limit!"),
        (MemoryUnderflow(), ErrorKind.MEMORY_UNDERFLOW, "MemoryUnderflow: Reached memory limit!"),
        (InputEOF(), ErrorKind.INPUT_EOF, "InputEOF: No more input left!"),
        (
            UnmatchedJump(),
            ErrorKind.UNMATCHED_JUMP,
            "UnmatchedJump: Make sure to close your brackets!",
        ),
    ],
)
def test_error_kinds_and_messages(error: BrainfuckError, kind: ErrorKind, message: str) -> None:
    assert isinstance(error, BrainfuckError)
    assert error.kind == kind
    assert str(error) == message
    assert error.pc is None


def test_overflow_and_underflow_are_distinct() -> None:
    assert not issubclass(MemoryOverflow, MemoryUnderflow)
    assert MemoryOverflow.kind != MemoryUnderflow.kind


def test_pc_is_carried() -> None:
    err = UnmatchedJump(pc=7)
    assert err.pc == 7
