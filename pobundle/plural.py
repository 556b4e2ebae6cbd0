"""Assembly of indexed ``msgstr[N]`` lines into one ICU plural expression."""

from __future__ import annotations

from typing import List, Optional

from .structures import MessageBuilder
from .text import parse_translation_text

EXPLICIT_ONE_LABEL = "=1"
OTHER_LABEL = "other"


def plural_case_label(index: int) -> str:
    """Map a PO plural index onto an ICU case label.

    Only two forms are supported: index 0 is the explicit one case and every
    other index falls back to ``other``.
    """

    # TODO: support explicit ICU numbers and languages with more than two forms.
    if index == 0:
        return EXPLICIT_ONE_LABEL
    return OTHER_LABEL


class PluralAssembler:
    """Wraps the plural cases of one message in ``{var ,plural, ...}``."""

    def __init__(self, builder: MessageBuilder, plural_var: Optional[str] = None) -> None:
        self.builder = builder
        self.plural_var = plural_var
        self._wrapper_open = False
        self._case_open = False
        self._case_text: List[str] = []

    def open(self) -> None:
        if self.plural_var is None or self._wrapper_open:
            return
        self.builder.append_string_part("{" + self.plural_var + " ,plural, offset:0  ")
        self.builder.is_plural = True
        self._wrapper_open = True

    def start_case(self, index: int, text: str) -> None:
        """Open the case for ``index`` with its first line of unquoted text."""

        self.close_case()
        self.builder.append_string_part(" " + plural_case_label(index) + " {")
        self._case_open = True
        self._case_text = [text]

    def extend(self, text: str) -> None:
        self._case_text.append(text)

    def close_case(self) -> None:
        if not self._case_open:
            return
        parse_translation_text(
            "".join(self._case_text), self.builder, inside_plural=True
        )
        self.builder.append_string_part("}")
        self._case_open = False
        self._case_text = []

    def finish(self) -> None:
        self.close_case()
        if self._wrapper_open:
            self.builder.append_string_part("}")
            self._wrapper_open = False
