"""Run modes and command-line options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final, Sequence

EXIT_OK: Final[int] = 0
EXIT_USAGE: Final[int] = 64
"""Bad invocation (too many arguments)."""
EXIT_DATA_ERROR: Final[int] = 65
"""Source had lexical errors."""

USAGE: Final[str] = "Usage: loxpy [script]"


class UsageError(ValueError):
    """Raised when the command line does not match `loxpy [script]`."""


class RunMode(StrEnum):
    """Top-level driver behavior."""

    FILE = "file"
    PROMPT = "prompt"


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Resolved driver configuration."""

    mode: RunMode = RunMode.PROMPT
    path: Path | None = None
    show_tokens: bool = True
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.mode == RunMode.FILE and self.path is None:
            raise ValueError("File mode requires a script path")

    @classmethod
    def from_args(
        cls,
        scripts: Sequence[str],
        *,
        show_tokens: bool = True,
        encoding: str = "utf-8",
    ) -> RunOptions:
        if len(scripts) > 1:
            raise UsageError(USAGE)
        if scripts:
            return cls(mode=RunMode.FILE, path=Path(scripts[0]), show_tokens=show_tokens, encoding=encoding)
        return cls(mode=RunMode.PROMPT, show_tokens=show_tokens, encoding=encoding)
