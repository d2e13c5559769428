"""Classify a scanned source against the run thresholds and render its line."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from zcount.common.models import STDIN_LABEL, RunConfiguration, ScanResult


@dataclass(slots=True, frozen=True)
class ReportLine:
    """A single output line and whether it belongs on the error stream."""

    text: str
    to_stderr: bool


def classify_source(run: RunConfiguration, label: str, zeros: int, *, from_stdin: bool = False) -> ScanResult:
    """Apply the threshold to ``zeros`` and update the run's flagged count.

    Any source holding a zero byte counts towards the exit status; the
    threshold only decides which report line it gets.
    """

    threshold = run.clamp_lower()
    corrupted = zeros >= threshold
    if zeros > 0:
        run.flag_source()
    return ScanResult(
        label=label,
        zeros=zeros,
        threshold=threshold,
        corrupted=corrupted,
        from_stdin=from_stdin,
    )


def format_report(result: ScanResult, verbosity: int) -> Optional[ReportLine]:
    """Return the line to print for ``result``, or ``None`` when silent.

    Verbosity 1 reports corrupted sources only; 2 and above report every
    source, clean ones on stdout and corrupted ones on stderr.
    """

    if verbosity <= 0:
        return None
    if result.corrupted:
        if result.from_stdin:
            text = f"data in {STDIN_LABEL} seems corrupted, {result.zeros} zero-bytes counted"
        else:
            text = f"{result.label}: seems corrupted, {result.zeros} zero-bytes counted"
        return ReportLine(text=text, to_stderr=True)
    if verbosity == 1:
        return None
    if result.from_stdin:
        text = f"{result.zeros} zero-bytes in {STDIN_LABEL} counted"
    else:
        text = f"{result.label}: {result.zeros} zero-bytes counted"
    return ReportLine(text=text, to_stderr=False)


def report(
    run: RunConfiguration,
    label: str,
    zeros: int,
    *,
    from_stdin: bool = False,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> ScanResult:
    """Classify one source and print its report line per the run verbosity."""

    result = classify_source(run, label, zeros, from_stdin=from_stdin)
    line = format_report(result, run.verbosity)
    if line is not None:
        stream = (stderr or sys.stderr) if line.to_stderr else (stdout or sys.stdout)
        print(line.text, file=stream)
    return result
