"""Data models shared across the CLI, classifier and configuration layers."""
from __future__ import annotations

from dataclasses import dataclass, field

from .limits import saturating_increment

STDIN_LABEL = "stdin"


@dataclass(slots=True)
class RunConfiguration:
    """Per-invocation settings plus the running count of flagged sources."""

    verbosity: int = 0
    upper: int = 0
    lower: int = 1
    flagged_count: int = 0

    def flag_source(self) -> None:
        self.flagged_count = saturating_increment(self.flagged_count)

    def clamp_lower(self) -> int:
        """Pull ``lower`` down to ``upper`` when a non-zero cap makes it unreachable."""

        if self.upper != 0 and self.lower > self.upper:
            self.lower = self.upper
        return self.lower


@dataclass(slots=True)
class ScanResult:
    """Outcome of classifying one scanned source."""

    label: str
    zeros: int
    threshold: int
    corrupted: bool
    from_stdin: bool = False


@dataclass(slots=True)
class ScanSettings:
    """Global settings applied to every scan regardless of profile."""

    chunk_size: int = 65_536


@dataclass(slots=True)
class ProfileSettings:
    """Named defaults for the upper/lower zero-byte limits."""

    description: str = ""
    upper: int = 0
    lower: int = 1


@dataclass(slots=True)
class RuntimeConfig:
    """Resolved configuration for a single run."""

    scan: ScanSettings = field(default_factory=ScanSettings)
    profile: ProfileSettings = field(default_factory=ProfileSettings)

    def new_run(self) -> RunConfiguration:
        return RunConfiguration(upper=self.profile.upper, lower=self.profile.lower)
