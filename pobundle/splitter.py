"""Splitting of PO content into per-message blocks."""

from __future__ import annotations

import re
from typing import Iterator

BLOCK_SEPARATOR_PATTERN = re.compile(r"\r?\n\r?\n")


def split_blocks(text: str) -> Iterator[str]:
    """Lazily yield the blank-line separated blocks of ``text`` in order."""

    cursor = 0
    for match in BLOCK_SEPARATOR_PATTERN.finditer(text):
        yield text[cursor:match.start()]
        cursor = match.end()
    if cursor < len(text):
        yield text[cursor:]
