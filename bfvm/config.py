from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def repo_root() -> Path:
    # Project root is the directory that contains the `bfvm/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


@dataclass(frozen=True)
class VMSettings:
    log_level: str = "WARNING"
    # Reject bytes outside the instruction alphabet at load time.
    strict: bool = False
    # Raise InputEOF from `,` on an exhausted input queue instead of storing 0.
    eof_error: bool = False


def load_settings() -> VMSettings:
    load_env()
    return VMSettings(
        log_level=(os.getenv("BFVM_LOG_LEVEL") or "WARNING").strip().upper(),
        strict=_env_bool("BFVM_STRICT"),
        eof_error=_env_bool("BFVM_EOF_ERROR"),
    )
