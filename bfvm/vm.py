from __future__ import annotations

import logging
from collections import deque

from bfvm.config import VMSettings
from bfvm.errors import BadInput, BrainfuckError, InputEOF, NoProgramLoaded, UnmatchedJump
from bfvm.program import ProgramStore, char_at, to_bytes
from bfvm.schemas import VMSnapshot, VMStatus
from bfvm.tape import MemoryTape

logger = logging.getLogger(__name__)

_LEFT = ord("<")
_RIGHT = ord(">")
_INC = ord("+")
_DEC = ord("-")
_OUT = ord(".")
_IN = ord(",")
_OPEN = ord("[")
_CLOSE = ord("]")


def match_forward(program: bytes, pc: int) -> int:
    """Return the offset of the `]` closing the `[` at `pc`."""
    depth = 0
    address = pc
    while True:
        address += 1
        if address == len(program):
            raise UnmatchedJump()
        op = program[address]
        if op == _OPEN:
            depth += 1
        elif op == _CLOSE:
            if depth == 0:
                return address
            depth -= 1


def match_backward(program: bytes, pc: int) -> int:
    """Return the offset of the `[` opening the `]` at `pc`."""
    depth = 0
    address = pc
    while True:
        if address == 0:
            raise UnmatchedJump()
        address -= 1
        op = program[address]
        if op == _CLOSE:
            depth += 1
        elif op == _OPEN:
            if depth == 0:
                return address
            depth -= 1


class VirtualMachine:
    """Interpreter for the eight-instruction tape language.

    `run()` always starts from the first instruction. The tape, the address
    pointer and any unconsumed input survive across runs and loads; only the
    output is scoped to a single run.
    """

    def __init__(self, *, settings: VMSettings | None = None) -> None:
        settings = settings or VMSettings()
        self._program = ProgramStore(strict=settings.strict)
        self._tape = MemoryTape()
        self._input: deque[int] = deque()
        self._pc = 0
        self._status = VMStatus.IDLE
        self.eof_error = settings.eof_error

    @property
    def pc(self) -> int:
        return self._pc

    @property
    def pointer(self) -> int:
        return self._tape.pointer

    @property
    def status(self) -> VMStatus:
        return self._status

    @property
    def tape(self) -> MemoryTape:
        return self._tape

    @property
    def pending_input(self) -> int:
        return len(self._input)

    def load(self, source: bytes | bytearray | str) -> None:
        self._program.load(source)
        self._status = VMStatus.IDLE

    def feed(self, data: bytes | bytearray | str) -> None:
        self._input.extend(to_bytes(data))

    def set_pointer(self, address: int) -> None:
        self._tape.set_pointer(address)

    def snapshot(self) -> VMSnapshot:
        return VMSnapshot(
            status=self._status,
            pc=self._pc,
            pointer=self._tape.pointer,
            cell=self._tape.read(),
            program_length=len(self._program),
            pending_input=len(self._input),
        )

    def run(self) -> bytes:
        if not self._program:
            raise NoProgramLoaded()

        program = self._program.program
        output = bytearray()
        trace = logger.isEnabledFor(logging.DEBUG)
        self._pc = 0
        self._status = VMStatus.RUNNING
        try:
            while self._pc < len(program):
                if trace:
                    logger.debug(
                        "STATE pc=%d (%s) ap=%d [%d]",
                        self._pc,
                        chr(program[self._pc]),
                        self._tape.pointer,
                        self._tape.read(),
                    )
                self._step(program, output)
                self._pc += 1
        except BrainfuckError as e:
            if e.pc is None:
                e.pc = self._pc
            self._status = VMStatus.HALTED_ERROR
            logger.info("run halted at pc=%d: %s", self._pc, e)
            raise

        self._status = VMStatus.HALTED_SUCCESS
        logger.debug("run finished: %d output bytes", len(output))
        return bytes(output)

    def _step(self, program: bytes, output: bytearray) -> None:
        op = program[self._pc]
        tape = self._tape
        if op == _RIGHT:
            tape.move_right()
        elif op == _LEFT:
            tape.move_left()
        elif op == _INC:
            tape.increment()
        elif op == _DEC:
            tape.decrement()
        elif op == _OUT:
            output.append(tape.read())
        elif op == _IN:
            if self._input:
                tape.write(self._input.popleft())
            elif self.eof_error:
                raise InputEOF()
            else:
                tape.write(0)
        elif op == _OPEN:
            if tape.read() == 0:
                self._pc = match_forward(program, self._pc)
        elif op == _CLOSE:
            if tape.read() != 0:
                self._pc = match_backward(program, self._pc)
        else:
            raise BadInput(char_at(program, self._pc))
