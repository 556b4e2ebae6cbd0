"""Error definitions for the PO message bundle parser."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional


class ParseErrorKind(Enum):
    """Categorises parse failures so callers can react to the cause."""

    MALFORMED_QUOTING = auto()
    MALFORMED_PLURAL_INDEX = auto()
    UNEXPECTED_CONTINUATION = auto()
    INVALID_PROJECT_ID = auto()
    MISSING_MESSAGE_ID = auto()


class PoBundleError(Exception):
    """Base exception for all custom errors."""


class PoParseError(PoBundleError):
    """Raised when PO content cannot be turned into messages."""

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        *,
        line: Optional[str] = None,
        block: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.line = line
        self.block = block

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message}: {self.line}"


class PoReadError(PoBundleError):
    """Raised when the PO source cannot be read or decoded."""


class ConfigurationError(PoBundleError):
    """Raised when configuration sources are unreadable or invalid."""


def malformed_quoting(line: str) -> PoParseError:
    return PoParseError(
        ParseErrorKind.MALFORMED_QUOTING,
        "Malformed translation. Line is not properly quoted",
        line=line,
    )


def malformed_plural_index(line: str) -> PoParseError:
    return PoParseError(
        ParseErrorKind.MALFORMED_PLURAL_INDEX,
        "Incorrect plural translation line",
        line=line,
    )


def unexpected_continuation(line: str) -> PoParseError:
    return PoParseError(
        ParseErrorKind.UNEXPECTED_CONTINUATION,
        "Unexpected line continuation",
        line=line,
    )
