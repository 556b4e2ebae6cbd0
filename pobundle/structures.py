"""Core data structures for parsed PO messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class Literal:
    """A run of literal message text."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class PlaceholderRef:
    """A structured reference to a value substituted at runtime."""

    name: str

    def render(self) -> str:
        return "{" + self.name + "}"


Part = Union[Literal, PlaceholderRef]


@dataclass(frozen=True)
class Message:
    """An immutable localizable message in ICU-like form."""

    id: str
    parts: Tuple[Part, ...] = ()
    meaning: Optional[str] = None
    description: Optional[str] = None
    is_plural: bool = False

    def render(self) -> str:
        """Render the parts back into a single ICU message string."""

        return "".join(part.render() for part in self.parts)

    @property
    def placeholder_names(self) -> List[str]:
        return [part.name for part in self.parts if isinstance(part, PlaceholderRef)]


class MessageBuilder:
    """Accumulates message fields and parts until ``build`` is called."""

    def __init__(self) -> None:
        self.key: Optional[str] = None
        self.meaning: Optional[str] = None
        self.description: Optional[str] = None
        self.is_plural = False
        self._parts: List[Part] = []
        self._literal: List[str] = []
        self._built = False

    def set_key(self, key: str) -> "MessageBuilder":
        self.key = key
        return self

    def set_meaning(self, meaning: Optional[str]) -> "MessageBuilder":
        self.meaning = meaning
        return self

    def set_desc(self, description: Optional[str]) -> "MessageBuilder":
        self.description = description
        return self

    def append_string_part(self, text: str) -> "MessageBuilder":
        """Append literal text, merging it with any preceding literal text."""

        if text:
            self._literal.append(text)
        return self

    def append_placeholder_reference(self, name: str) -> "MessageBuilder":
        self._flush_literal()
        self._parts.append(PlaceholderRef(name))
        return self

    def build(self) -> Message:
        """Finalise the accumulated state into a ``Message``."""

        if self._built:
            raise RuntimeError("MessageBuilder.build() may only be called once.")
        if not self.key:
            raise ValueError("A message key is required to build a message.")
        self._flush_literal()
        self._built = True
        return Message(
            id=self.key,
            parts=tuple(self._parts),
            meaning=self.meaning,
            description=self.description,
            is_plural=self.is_plural,
        )

    def _flush_literal(self) -> None:
        if self._literal:
            self._parts.append(Literal("".join(self._literal)))
            self._literal = []
