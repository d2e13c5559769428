"""Command-line driver: count zero bytes per source and report suspicious ones."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import BinaryIO, List, NoReturn, Optional, Sequence

from zcount import __version__
from zcount.common.config import DEFAULT_PROFILE, load_runtime_config
from zcount.common.errors import ZcountError
from zcount.common.limits import INT_MAX, saturating_increment
from zcount.common.models import STDIN_LABEL, RunConfiguration, RuntimeConfig
from zcount.common.numbers import parse_unsigned
from zcount.common.progress import ScanLogger
from zcount.core.classification import report
from zcount.core.counting import count_zero_bytes

BUG_ADDRESS = "Leonid Chaichenets <leonid.chaichenets@googlemail.com>"

DESCRIPTION = "zcount -- A program for counting zero bytes in given files."

EPILOG = (
    "Principal use of this program is to detect corrupt files: Lost data chunks "
    "are usually replaced by zero-bytes (0x00) by the filesystem checkers. Thus, "
    "corrupted files are easily identified by a large number of zero-bytes.\n\n"
    "If no input files are given on the command line, then stdin is used. The "
    "return code of the program is the number of files containing at least "
    "NUMBER2 zero-bytes (or INT_MAX). WARNING: By default no output is produced, "
    "as the program is intended to be used in a script. Set at least one '-v' "
    "for human readable output.\n\n"
    f"Report bugs to {BUG_ADDRESS}."
)

PARSE_ABORTED_MESSAGE = "Argument parsing has been terminated due to an error!"


class ZcountArgumentParser(argparse.ArgumentParser):
    """Argument parser that announces aborted parsing before the usage error."""

    def error(self, message: str) -> NoReturn:
        print(PARSE_ABORTED_MESSAGE, file=sys.stderr)
        super().error(message)


class SaturatingCountAction(argparse.Action):
    """Like ``action="count"`` but never exceeds ``INT_MAX``."""

    def __init__(self, option_strings, dest, default=0, required=False, help=None) -> None:
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            default=default,
            required=required,
            help=help,
        )

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        current = getattr(namespace, self.dest, None) or 0
        setattr(namespace, self.dest, saturating_increment(current, INT_MAX))


def unsigned_literal(text: str) -> int:
    try:
        return parse_unsigned(text)
    except ZcountError as exc:
        raise argparse.ArgumentTypeError(exc.args[0]) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = ZcountArgumentParser(
        prog="zcount",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to scan (stdin when omitted)")
    parser.add_argument(
        "-v",
        "--verbose",
        dest="verbosity",
        action=SaturatingCountAction,
        default=0,
        help="Produce verbose output, multiple flags allowed",
    )
    parser.add_argument(
        "-u",
        "--upper",
        metavar="NUMBER1",
        type=unsigned_literal,
        help=(
            "Stop after counting NUMBER1 (long unsigned integer) of zero-bytes "
            "(NUMBER1=0 [default] for no limit)"
        ),
    )
    parser.add_argument(
        "-l",
        "--lower",
        metavar="NUMBER2",
        type=unsigned_literal,
        help=(
            "Consider a file damaged after counting at least NUMBER2 of zero-bytes "
            "(if NUMBER2 > NUMBER1 then NUMBER1 is used for both limits, default is NUMBER2=1)"
        ),
    )
    parser.add_argument(
        "--profile",
        default=DEFAULT_PROFILE,
        help="Profile from config/defaults.json supplying default limits (e.g., default, quick, tolerant)",
    )
    parser.add_argument(
        "--config",
        help="Alternate configuration JSON with profiles",
    )
    parser.add_argument(
        "--scan-log",
        help="Path to JSONL file receiving one event per scanned source",
    )
    parser.add_argument("-V", "--version", action="version", version=f"zcount {__version__}")
    return parser


def build_run_configuration(args: argparse.Namespace, runtime: RuntimeConfig) -> RunConfiguration:
    run = runtime.new_run()
    run.verbosity = args.verbosity
    if args.upper is not None:
        run.upper = args.upper
    if args.lower is not None:
        run.lower = args.lower
    return run


def scan_files(
    files: Sequence[str],
    run: RunConfiguration,
    *,
    chunk_size: int,
    logger: Optional[ScanLogger] = None,
) -> None:
    for name in files:
        try:
            handle = open(name, "rb")
        except OSError as exc:
            print(f"{name}: {exc.strerror or exc}", file=sys.stderr)
            continue
        with handle:
            zeros = count_zero_bytes(handle, run.upper, chunk_size=chunk_size)
        result = report(run, name, zeros)
        if logger:
            logger.emit(result)


def scan_stdin(
    stream: BinaryIO,
    run: RunConfiguration,
    *,
    chunk_size: int,
    logger: Optional[ScanLogger] = None,
) -> None:
    zeros = count_zero_bytes(stream, run.upper, chunk_size=chunk_size)
    result = report(run, STDIN_LABEL, zeros, from_stdin=True)
    if logger:
        logger.emit(result)


def run(argv: Optional[List[str]] = None, *, stdin: Optional[BinaryIO] = None) -> int:
    """Parse ``argv``, scan every source and return the number of flagged ones."""

    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    try:
        runtime = load_runtime_config(
            args.profile,
            config_path=Path(args.config) if args.config else None,
        )
    except ZcountError as exc:
        parser.error(str(exc))

    configuration = build_run_configuration(args, runtime)
    logger = ScanLogger(Path(args.scan_log)) if args.scan_log else None
    chunk_size = runtime.scan.chunk_size

    if args.files:
        scan_files(args.files, configuration, chunk_size=chunk_size, logger=logger)
    else:
        source = stdin if stdin is not None else sys.stdin.buffer
        scan_stdin(source, configuration, chunk_size=chunk_size, logger=logger)
    return configuration.flagged_count


def main(argv: Optional[List[str]] = None) -> None:
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
