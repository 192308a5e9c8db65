from __future__ import annotations

import pytest

from bfvm.errors import BadInput
from bfvm.program import ProgramStore, first_invalid


def test_empty_store_is_not_loaded() -> None:
    store = ProgramStore()
    assert not store.is_loaded
    assert not store
    store.load(b"")
    assert not store.is_loaded


def test_load_replaces_previous_program() -> None:
    store = ProgramStore()
    store.load(b"+++")
    store.load("-.")
    assert store.program == b"-."
    assert len(store) == 2
    assert store[1] == ord(".")


def test_lenient_load_accepts_any_byte() -> None:
    store = ProgramStore()
    store.load(b"+x+")
    assert store.program == b"+x+"


def test_strict_load_rejects_first_foreign_byte_and_keeps_old_program() -> None:
    store = ProgramStore(strict=True)
    store.load(b"+.")
    with pytest.raises(BadInput) as exc:
        store.load(b"++a-b")
    assert exc.value.char == "a"
    assert store.program == b"+."


@pytest.mark.parametrize(
    ("source", "char"),
    [("+é", "é"), ("-€+", "€"), (b"+\xff", "\xff"), (b"+\xc3", "\xc3")],
)
def test_strict_load_reports_offending_character(source: str | bytes, char: str) -> None:
    store = ProgramStore(strict=True)
    with pytest.raises(BadInput) as exc:
        store.load(source)
    assert exc.value.char == char


def test_first_invalid() -> None:
    assert first_invalid(b"<>+-.,[]") is None
    assert first_invalid(b"++ +") == 2
