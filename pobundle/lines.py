"""Prefix-based classification of PO lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import List

from .errors import malformed_plural_index, malformed_quoting

ID_PREFIX = "#: id="
PLURAL_VAR_PREFIX = "#: pluralVar="
MESSAGE_CONTEXT_PREFIX = "msgctxt "
SOURCE_MESSAGE_PREFIX = "msgid "
SINGULAR_TRANSLATION_PREFIX = "msgstr "
PLURAL_TRANSLATION_PREFIX = "msgstr["
CONTINUATION_PREFIX = '"'

PLURAL_INDEX_PATTERN = re.compile(r"^msgstr\[(?P<index>[^\]]*)\]")
LINE_SEPARATOR_PATTERN = re.compile(r"\r\n|[\n\r\u2028\u2029\u0085]")


class LineKind(Enum):
    """The field a single line contributes to."""

    ID_COMMENT = auto()
    PLURAL_VAR_COMMENT = auto()
    CONTEXT = auto()
    SOURCE_MESSAGE = auto()
    SINGULAR_TRANSLATION = auto()
    PLURAL_TRANSLATION = auto()
    CONTINUATION = auto()
    IGNORED = auto()


@dataclass(frozen=True)
class ClassifiedLine:
    """A line with its kind, the trimmed comment value and the plural index."""

    kind: LineKind
    line: str
    value: str = ""
    index: int = 0


def unquote(line: str) -> str:
    """Return everything between the first and last double quote of ``line``.

    msgstr "this is translated" => this is translated
    "also translated" => also translated
    """

    first_quote = line.find('"')
    last_quote = line.rfind('"')
    if first_quote == -1 or first_quote == last_quote:
        raise malformed_quoting(line)
    return line[first_quote + 1:last_quote]


def parse_plural_index(line: str) -> int:
    """Return the integer index of a ``msgstr[N] "..."`` line."""

    match = PLURAL_INDEX_PATTERN.match(line)
    if not match:
        raise malformed_plural_index(line)
    raw_index = match.group("index").strip()
    try:
        return int(raw_index)
    except ValueError as exc:
        raise malformed_plural_index(line) from exc


def split_lines(block: str) -> List[str]:
    """Split a block on line terminators only, leaving other control characters."""

    return LINE_SEPARATOR_PATTERN.split(block)


def classify_line(line: str) -> ClassifiedLine:
    """Classify one line of a message block by its structural prefix.

    Quoted fields keep their text in ``line``; callers unquote it when the
    field is consumed.
    """

    if line.startswith(CONTINUATION_PREFIX):
        return ClassifiedLine(LineKind.CONTINUATION, line)
    if line.startswith(ID_PREFIX):
        return ClassifiedLine(
            LineKind.ID_COMMENT, line, value=line[len(ID_PREFIX):].strip()
        )
    if line.startswith(PLURAL_VAR_PREFIX):
        return ClassifiedLine(
            LineKind.PLURAL_VAR_COMMENT,
            line,
            value=line[len(PLURAL_VAR_PREFIX):].strip(),
        )
    if line.startswith(SOURCE_MESSAGE_PREFIX):
        return ClassifiedLine(LineKind.SOURCE_MESSAGE, line)
    if line.startswith(SINGULAR_TRANSLATION_PREFIX):
        return ClassifiedLine(LineKind.SINGULAR_TRANSLATION, line)
    if line.startswith(PLURAL_TRANSLATION_PREFIX):
        return ClassifiedLine(
            LineKind.PLURAL_TRANSLATION, line, index=parse_plural_index(line)
        )
    if line.startswith(MESSAGE_CONTEXT_PREFIX):
        return ClassifiedLine(LineKind.CONTEXT, line)
    # Other lines should be ignored.
    return ClassifiedLine(LineKind.IGNORED, line)
