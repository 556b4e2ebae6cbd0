"""Message id generation."""

from __future__ import annotations

import hashlib
from typing import Optional, Protocol

from .errors import ParseErrorKind, PoParseError


class IdGenerator(Protocol):
    """Maps a message meaning and key onto a canonical message id."""

    def generate(self, meaning: Optional[str], key: str) -> str:
        ...


def fingerprint(value: str) -> int:
    """Return a stable, non-negative 63-bit fingerprint of ``value``."""

    digest = hashlib.sha1(value.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") & 0x7FFFFFFFFFFFFFFF


class ProjectIdGenerator:
    """Generates ids scoped by a translation project identifier."""

    def __init__(self, project_id: Optional[str]) -> None:
        if project_id == "":
            raise PoParseError(
                ParseErrorKind.INVALID_PROJECT_ID,
                "Project id must not be empty",
            )
        self.project_id = project_id

    def generate(self, meaning: Optional[str], key: str) -> str:
        scoped = meaning if meaning is not None else key
        if self.project_id is not None:
            scoped = f"{self.project_id}: {scoped}"
        return str(fingerprint(scoped))

    def __repr__(self) -> str:
        return f"ProjectIdGenerator(project_id={self.project_id!r})"
