"""String-facing wrapper around `VirtualMachine`.

Hosts that deal in text rather than bytes go through `TextVM`: program source
is filtered down to the instruction alphabet before loading, input is UTF-8
encoded, and output is decoded back to `str`.
"""

from __future__ import annotations

import logging

from bfvm.config import VMSettings
from bfvm.schemas import INSTRUCTIONS, VMSnapshot
from bfvm.vm import VirtualMachine

logger = logging.getLogger(__name__)

_ALLOWED = frozenset(INSTRUCTIONS.decode("ascii"))


class OutputDecodeError(ValueError):
    def __init__(self, output: bytes) -> None:
        self.output = output
        super().__init__("InvalidAscii: program output is not valid UTF-8")


def sanitize(text: str) -> str:
    return "".join(c for c in text if c in _ALLOWED)


def sanitize_bytes(data: bytes) -> bytes:
    return bytes(b for b in data if b in INSTRUCTIONS)


class TextVM:
    def __init__(self, *, settings: VMSettings | None = None) -> None:
        self.vm = VirtualMachine(settings=settings)

    def load(self, source: str) -> None:
        program = sanitize(source)
        dropped = len(source) - len(program)
        logger.debug("loading %d instructions (%d chars dropped)", len(program), dropped)
        self.vm.load(program)

    def feed(self, text: str) -> None:
        self.vm.feed(text.encode("utf-8"))

    def set_pointer(self, address: int) -> None:
        self.vm.set_pointer(address)

    def snapshot(self) -> VMSnapshot:
        return self.vm.snapshot()

    def run(self) -> str:
        output = self.vm.run()
        try:
            return output.decode("utf-8")
        except UnicodeDecodeError as e:
            raise OutputDecodeError(output) from e
