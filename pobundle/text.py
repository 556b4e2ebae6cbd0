"""Tokenisation of unquoted translation text into message parts."""

from __future__ import annotations

import re
from typing import List

from .naming import to_lower_camel_case_with_numeric_suffixes
from .structures import MessageBuilder

PLACEHOLDER_DELIMITER_PATTERN = re.compile(r"\{\$|\}")


def unescape_string(text: str) -> str:
    """Unescape quotes and newlines."""

    return text.replace('\\"', '"').replace("\\n", "\n")


def tokenize_translation(text: str) -> List[str]:
    """Split translation text into alternating literal and placeholder tokens.

    The first token is always literal; it is empty when the text opens with a
    placeholder.
    """

    return PLACEHOLDER_DELIMITER_PATTERN.split(text)


def parse_translation_text(
    text: str,
    builder: MessageBuilder,
    *,
    inside_plural: bool,
) -> None:
    """Append the parts of ``text`` to ``builder``.

    Placeholders become structured references, except inside a plural case
    where they are written back as ICU ``{name}`` text so the case body stays
    valid message syntax.
    """

    in_variable_token = False
    for token in tokenize_translation(text):
        if in_variable_token and inside_plural:
            builder.append_string_part("{" + token + "}")
        elif in_variable_token:
            builder.append_placeholder_reference(
                to_lower_camel_case_with_numeric_suffixes(token)
            )
        else:
            builder.append_string_part(unescape_string(token))
        in_variable_token = not in_variable_token
