from __future__ import annotations

from bfvm.errors import BadInput
from bfvm.schemas import INSTRUCTIONS


def to_bytes(data: bytes | bytearray | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def first_invalid(program: bytes) -> int | None:
    """Offset of the first byte outside the instruction alphabet, if any."""
    for i, byte in enumerate(program):
        if byte not in INSTRUCTIONS:
            return i
    return None


def char_at(program: bytes, index: int) -> str:
    """Character starting at `index`, decoding a UTF-8 sequence when one begins there.

    Bytes that do not start a valid sequence are reported as their Latin-1 character.
    """
    byte = program[index]
    if byte < 0x80:
        return chr(byte)
    for end in range(index + 2, min(index + 4, len(program)) + 1):
        try:
            return program[index:end].decode("utf-8")
        except UnicodeDecodeError:
            continue
    return chr(byte)


class ProgramStore:
    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self._program = b""

    def load(self, source: bytes | bytearray | str) -> None:
        program = to_bytes(source)
        if self.strict:
            bad = first_invalid(program)
            if bad is not None:
                raise BadInput(char_at(program, bad))
        self._program = program

    @property
    def is_loaded(self) -> bool:
        return bool(self._program)

    @property
    def program(self) -> bytes:
        return self._program

    def __bool__(self) -> bool:
        return self.is_loaded

    def __len__(self) -> int:
        return len(self._program)

    def __getitem__(self, index: int) -> int:
        return self._program[index]
