from __future__ import annotations

from bfvm.config import VMSettings, load_settings
from bfvm.errors import (
    BadInput,
    BrainfuckError,
    InputEOF,
    MemoryOverflow,
    MemoryUnderflow,
    NoProgramLoaded,
    UnmatchedJump,
)
from bfvm.host import OutputDecodeError, TextVM, sanitize
from bfvm.program import ProgramStore
from bfvm.schemas import MEMORY_SIZE, ErrorKind, RunReport, VMSnapshot, VMStatus
from bfvm.tape import MemoryTape
from bfvm.vm import VirtualMachine

__all__ = [
    "__version__",
    # Engine
    "VirtualMachine",
    "MemoryTape",
    "ProgramStore",
    "MEMORY_SIZE",
    # Errors
    "BrainfuckError",
    "BadInput",
    "NoProgramLoaded",
    "MemoryOverflow",
    "MemoryUnderflow",
    "InputEOF",
    "UnmatchedJump",
    "OutputDecodeError",
    # Schemas
    "ErrorKind",
    "VMStatus",
    "VMSnapshot",
    "RunReport",
    # Host
    "TextVM",
    "sanitize",
    # Config
    "VMSettings",
    "load_settings",
]

__version__ = "0.1.0"
