from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

MEMORY_SIZE = 65536
INSTRUCTIONS = b"<>+-.,[]"


class ErrorKind(str, Enum):
    BAD_INPUT = "BadInput"
    NO_PROGRAM_LOADED = "NoProgramLoaded"
    MEMORY_OVERFLOW = "MemoryOverflow"
    MEMORY_UNDERFLOW = "MemoryUnderflow"
    INPUT_EOF = "InputEOF"
    UNMATCHED_JUMP = "UnmatchedJump"


class VMStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    HALTED_SUCCESS = "halted_success"
    HALTED_ERROR = "halted_error"


class VMSnapshot(BaseModel):
    status: VMStatus
    pc: int = Field(ge=0)
    pointer: int = Field(ge=0, le=MEMORY_SIZE - 1)
    cell: int = Field(ge=0, le=255)
    program_length: int = Field(ge=0)
    pending_input: int = Field(default=0, ge=0)


class RunReport(BaseModel):
    ok: bool
    output: str = ""
    # Hex form of the raw output, kept because `output` is lossy for non-UTF-8 bytes.
    output_hex: str = ""
    error_kind: ErrorKind | None = None
    error: str | None = None
    snapshot: VMSnapshot

    @model_validator(mode="after")
    def _error_matches_ok(self) -> "RunReport":
        if self.ok and self.error is not None:
            raise ValueError("successful report cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("failed report requires an error message")
        return self
