from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from bfvm.config import VMSettings, load_settings
from bfvm.errors import BrainfuckError
from bfvm.host import sanitize_bytes
from bfvm.logutil import configure_logging
from bfvm.schemas import RunReport
from bfvm.vm import VirtualMachine

logger = logging.getLogger(__name__)


def _program_path(value: str) -> Path:
    p = Path(value)
    if value != "-" and not p.is_file():
        raise argparse.ArgumentTypeError(f"program not found: {value}")
    return p


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def _log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise argparse.ArgumentTypeError(f"unknown log level: {value}")
    return level


def _read_program(path: Path, *, raw: bool) -> bytes:
    data = sys.stdin.buffer.read() if str(path) == "-" else path.read_bytes()
    return data if raw else sanitize_bytes(data)


def find_unbalanced(program: bytes) -> int | None:
    """Offset of the first bracket without a partner, or None when balanced."""
    opened: list[int] = []
    for i, op in enumerate(program):
        if op == ord("["):
            opened.append(i)
        elif op == ord("]"):
            if not opened:
                return i
            opened.pop()
    return opened[0] if opened else None


def _settings_from_args(args: argparse.Namespace) -> VMSettings:
    settings = load_settings()
    return dataclasses.replace(
        settings,
        log_level=args.log_level or settings.log_level,
        strict=args.strict or settings.strict,
        eof_error=args.eof_error or settings.eof_error,
    )


def _print_report(*, vm: VirtualMachine, output: bytes, error: BrainfuckError | None) -> None:
    report = RunReport(
        ok=error is None,
        output=output.decode("utf-8", errors="replace"),
        output_hex=output.hex(),
        error_kind=error.kind if error is not None else None,
        error=str(error) if error is not None else None,
        snapshot=vm.snapshot(),
    )
    print(report.model_dump_json(indent=2))


def _cmd_run(args: argparse.Namespace) -> int:
    try:
        settings = _settings_from_args(args)
        configure_logging(settings.log_level)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    vm = VirtualMachine(settings=settings)
    try:
        vm.load(_read_program(args.program, raw=args.raw))
    except BrainfuckError as e:
        if args.json:
            _print_report(vm=vm, output=b"", error=e)
        else:
            print(f"error: {e}", file=sys.stderr)
        return 1

    if args.input is not None:
        vm.feed(args.input)
    elif args.input_file is not None:
        vm.feed(args.input_file.read_bytes())

    try:
        output = vm.run()
    except BrainfuckError as e:
        logger.debug("run failed", exc_info=True)
        if args.json:
            _print_report(vm=vm, output=b"", error=e)
        else:
            print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        _print_report(vm=vm, output=output, error=None)
    else:
        sys.stdout.buffer.write(output)
        sys.stdout.flush()
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    program = _read_program(args.program, raw=False)
    offset = find_unbalanced(program)
    if offset is not None:
        print(f"error: unmatched '{chr(program[offset])}' at offset {offset}", file=sys.stderr)
        return 1
    print(f"ok: {len(program)} instructions")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bfvm")
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="execute a program and write its output to stdout")
    run_p.add_argument("program", type=_program_path, help="program file ('-' for stdin)")
    input_g = run_p.add_mutually_exclusive_group()
    input_g.add_argument("--input", type=str, default=None, help="input text (UTF-8 encoded)")
    input_g.add_argument("--input-file", type=_existing_path, default=None)
    run_p.add_argument(
        "--strict",
        action="store_true",
        help="reject bytes outside the instruction alphabet at load time",
    )
    run_p.add_argument(
        "--eof-error",
        action="store_true",
        help="fail with InputEOF when ',' finds no input (default: store 0)",
    )
    run_p.add_argument(
        "--raw",
        action="store_true",
        help="load the source as-is instead of filtering it to the instruction alphabet",
    )
    run_p.add_argument("--json", action="store_true", help="print a JSON run report")
    run_p.add_argument("--log-level", type=_log_level, default=None)

    check_p = sub.add_parser("check", help="verify that a program's brackets are balanced")
    check_p.add_argument("program", type=_program_path)

    args = parser.parse_args(argv)

    if args.cmd == "run":
        return _cmd_run(args)

    if args.cmd == "check":
        return _cmd_check(args)

    raise AssertionError(f"unhandled cmd: {args.cmd}")


def entrypoint() -> None:
    raise SystemExit(main())
