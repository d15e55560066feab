"""Custom exceptions for pcparse."""

from __future__ import annotations

from pathlib import Path


class PcParseError(Exception):
    """Base exception for pcparse errors."""


class ParseError(PcParseError):
    """Input could not be matched by the .pc grammar.

    Attributes:
        reason: Short description of what went wrong.
        offset: Character offset into the input where parsing failed.
        line: 1-based line number of the failure.
        column: 1-based column number of the failure.
        committed: The key and separator (e.g. ``"Requires:"``) after which
            the failing line could no longer backtrack, if any.
    """

    def __init__(
        self,
        reason: str,
        offset: int,
        line: int = 1,
        column: int = 1,
        committed: str | None = None,
    ) -> None:
        self.reason = reason
        self.offset = offset
        self.line = line
        self.column = column
        self.committed = committed

        message = f"{reason} at line {line}, column {column} (offset {offset})"
        if committed:
            message += f" after '{committed}'"
        super().__init__(message)


class PackageNotFoundError(PcParseError):
    """No <name>.pc file exists in any of the search paths."""

    def __init__(self, name: str, search_paths: list[Path]) -> None:
        self.name = name
        self.search_paths = search_paths
        searched = ", ".join(str(p) for p in search_paths) or "<no search paths>"
        super().__init__(f"Package '{name}' not found in: {searched}")


class ConfigError(PcParseError):
    """Raised when configuration is invalid or missing."""
