from __future__ import annotations

from bfvm.errors import MemoryOverflow, MemoryUnderflow
from bfvm.schemas import MEMORY_SIZE


class MemoryTape:
    """Fixed-size byte tape with a single checked address pointer.

    Cells wrap modulo 256. The pointer does not: stepping past either end of
    the tape raises instead of wrapping around.
    """

    def __init__(self) -> None:
        self._cells = bytearray(MEMORY_SIZE)
        self._pointer = 0

    @property
    def pointer(self) -> int:
        return self._pointer

    def __len__(self) -> int:
        return len(self._cells)

    def increment(self) -> None:
        self._cells[self._pointer] = (self._cells[self._pointer] + 1) & 0xFF

    def decrement(self) -> None:
        self._cells[self._pointer] = (self._cells[self._pointer] - 1) & 0xFF

    def move_right(self) -> None:
        if self._pointer == MEMORY_SIZE - 1:
            raise MemoryOverflow()
        self._pointer += 1

    def move_left(self) -> None:
        if self._pointer == 0:
            raise MemoryUnderflow()
        self._pointer -= 1

    def read(self) -> int:
        return self._cells[self._pointer]

    def write(self, value: int) -> None:
        self._cells[self._pointer] = value & 0xFF

    def set_pointer(self, address: int) -> None:
        if not 0 <= address < MEMORY_SIZE:
            raise ValueError(f"address out of range: {address}")
        self._pointer = address

    def peek(self, start: int, count: int) -> bytes:
        if start < 0 or count < 0:
            raise ValueError("start and count must be non-negative")
        return bytes(self._cells[start : start + count])
