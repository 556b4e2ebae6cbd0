"""State machine turning one PO message block into a ``Message``."""

from __future__ import annotations

from enum import Enum, auto
from typing import List, Optional

from .errors import ParseErrorKind, PoParseError, unexpected_continuation
from .lines import ClassifiedLine, LineKind, classify_line, split_lines, unquote
from .plural import PluralAssembler
from .structures import Message, MessageBuilder
from .text import parse_translation_text


class ParseState(Enum):
    """The field the assembler is currently collecting."""

    MESSAGE = auto()
    CONTEXT = auto()
    SOURCE_MESSAGE_IGNORED = auto()
    SINGULAR_TRANSLATION = auto()
    OUTER_PLURAL_TRANSLATION = auto()
    INNER_PLURAL_TRANSLATION = auto()


class MessageAssembler:
    """Parses a single message block.

    All parse state lives on the instance, so a new assembler is created for
    every block.
    """

    def __init__(self, block: str) -> None:
        self.block = block
        self.state = ParseState.MESSAGE
        self.builder = MessageBuilder()
        self.plural = PluralAssembler(self.builder)
        self._description: List[str] = []
        self._has_context = False
        self._singular_text: List[str] = []
        self._has_id = False

    def assemble(self) -> Optional[Message]:
        """Return the parsed message, or ``None`` when the block declares no id."""

        try:
            for line in split_lines(self.block):
                self._consume(classify_line(line))
            self._end_field()
            self.plural.finish()
        except PoParseError as exc:
            if exc.block is None:
                exc.block = self.block
            raise

        if not self._has_id:
            return None
        if self._has_context:
            self.builder.set_desc("".join(self._description))
        return self.builder.build()

    def _consume(self, classified: ClassifiedLine) -> None:
        if classified.kind is LineKind.CONTINUATION:
            self._continue(classified.line)
            return

        # A new field ends any previous multi-line translation.
        self._end_field()
        self._dispatch(classified)

    def _dispatch(self, classified: ClassifiedLine) -> None:
        kind = classified.kind
        if kind is LineKind.ID_COMMENT:
            if not classified.value:
                raise PoParseError(
                    ParseErrorKind.MISSING_MESSAGE_ID,
                    "Message id comment is empty",
                    line=classified.line,
                )
            self.builder.set_key(classified.value)
            self._has_id = True
        elif kind is LineKind.PLURAL_VAR_COMMENT:
            self.plural.plural_var = classified.value
            self.plural.open()
        elif kind is LineKind.CONTEXT:
            self._description = [unquote(classified.line)]
            self._has_context = True
            self.state = ParseState.CONTEXT
        elif kind is LineKind.SOURCE_MESSAGE:
            self.state = ParseState.SOURCE_MESSAGE_IGNORED
        elif kind is LineKind.SINGULAR_TRANSLATION:
            self._singular_text = [unquote(classified.line)]
            self.state = ParseState.SINGULAR_TRANSLATION
        elif kind is LineKind.PLURAL_TRANSLATION:
            self.state = ParseState.OUTER_PLURAL_TRANSLATION
            self.plural.start_case(classified.index, unquote(classified.line))
            self.state = ParseState.INNER_PLURAL_TRANSLATION
        elif kind is LineKind.IGNORED:
            pass
        else:
            raise ValueError(f"Unhandled line kind {kind!r}")

    def _continue(self, line: str) -> None:
        state = self.state
        if state is ParseState.CONTEXT:
            self._description.append(unquote(line))
        elif state is ParseState.SOURCE_MESSAGE_IGNORED:
            pass
        elif state is ParseState.SINGULAR_TRANSLATION:
            self._singular_text.append(unquote(line))
        elif state is ParseState.INNER_PLURAL_TRANSLATION:
            self.plural.extend(unquote(line))
        elif state in (ParseState.MESSAGE, ParseState.OUTER_PLURAL_TRANSLATION):
            raise unexpected_continuation(line)
        else:
            raise ValueError(f"Unhandled parse state {state!r}")

    def _end_field(self) -> None:
        """Flush the open field and return to ``MESSAGE``."""

        state = self.state
        if state is ParseState.SINGULAR_TRANSLATION:
            parse_translation_text(
                "".join(self._singular_text), self.builder, inside_plural=False
            )
            self._singular_text = []
        elif state in (
            ParseState.OUTER_PLURAL_TRANSLATION,
            ParseState.INNER_PLURAL_TRANSLATION,
        ):
            self.plural.close_case()
        self.state = ParseState.MESSAGE
