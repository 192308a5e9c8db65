from __future__ import annotations

from bfvm.schemas import ErrorKind


class BrainfuckError(Exception):
    kind: ErrorKind
    detail: str = ""

    def __init__(self, *, pc: int | None = None) -> None:
        self.pc = pc
        super().__init__(f"{self.kind.value}: {self.detail}")


class BadInput(BrainfuckError):
    kind = ErrorKind.BAD_INPUT

    def __init__(self, char: str, *, pc: int | None = None) -> None:
        self.char = char
        self.detail = f"Invalid character encountered '{char}'"
        super().__init__(pc=pc)


class NoProgramLoaded(BrainfuckError):
    kind = ErrorKind.NO_PROGRAM_LOADED
    detail = "No program loaded!"


class MemoryOverflow(BrainfuckError):
    kind = ErrorKind.MEMORY_OVERFLOW
    detail = "Reached memory limit!"


class MemoryUnderflow(BrainfuckError):
    kind = ErrorKind.MEMORY_UNDERFLOW
    detail = "Reached memory limit!"


class InputEOF(BrainfuckError):
    kind = ErrorKind.INPUT_EOF
    detail = "No more input left!"


class UnmatchedJump(BrainfuckError):
    kind = ErrorKind.UNMATCHED_JUMP
    detail = "Make sure to close your brackets!"
