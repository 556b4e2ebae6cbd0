"""Message bundle backed by a GNU gettext PO file."""

from __future__ import annotations

import json
import pathlib
import sys
from typing import Any, BinaryIO, Dict, Iterator, List, Optional

from .assembler import MessageAssembler
from .configuration import get_settings
from .errors import PoReadError
from .ids import IdGenerator, ProjectIdGenerator
from .splitter import split_blocks
from .structures import Message

BYTE_ORDER_MARK = "\ufeff"


class PoMessageBundle:
    """Messages parsed from a PO file, keyed by message id.

    Each block of the file provides one message::

        #: id=GREETING
        msgctxt "Shown on the landing page"
        msgid "Hello"
        msgstr "Bonjour"

    Plural messages declare their count variable and indexed translations::

        #: id=ARTICLE_COUNT
        #: pluralVar=n
        msgid "{$n} article"
        msgstr[0] "{$n} article"
        msgstr[1] "{$n} articles"

    Parsing happens eagerly in the constructor; a malformed block aborts the
    whole construction with ``PoParseError``.
    """

    def __init__(
        self,
        po_content: str,
        project_id: Optional[str] = None,
        *,
        id_generator: Optional[IdGenerator] = None,
        debug: bool = False,
    ) -> None:
        self.debug = debug
        generator = ProjectIdGenerator(project_id)
        self._id_generator: IdGenerator = id_generator or generator
        self._messages: Dict[str, Message] = {}
        self._parse(po_content)

    @classmethod
    def from_stream(
        cls,
        stream: BinaryIO,
        project_id: Optional[str] = None,
        *,
        encoding: str = "utf-8",
        id_generator: Optional[IdGenerator] = None,
        debug: bool = False,
    ) -> "PoMessageBundle":
        """Read and decode ``stream`` before parsing it."""

        try:
            content = stream.read().decode(encoding)
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            raise PoReadError(f"Could not read PO content: {exc}") from exc
        # Drop a leading byte-order mark.
        content = content.removeprefix(BYTE_ORDER_MARK)
        return cls(content, project_id, id_generator=id_generator, debug=debug)

    @classmethod
    def from_path(
        cls,
        path: pathlib.Path | str,
        project_id: Optional[str] = None,
        *,
        encoding: str = "utf-8",
        id_generator: Optional[IdGenerator] = None,
        debug: bool = False,
    ) -> "PoMessageBundle":
        po_path = pathlib.Path(path).expanduser()
        try:
            with po_path.open("rb") as stream:
                return cls.from_stream(
                    stream,
                    project_id,
                    encoding=encoding,
                    id_generator=id_generator,
                    debug=debug,
                )
        except OSError as exc:
            raise PoReadError(f"Could not open PO file {po_path}: {exc}") from exc

    def get(self, message_id: str) -> Optional[Message]:
        return self._messages.get(message_id)

    def all(self) -> Iterator[Message]:
        return iter(self._messages.values())

    def id_generator(self) -> IdGenerator:
        return self._id_generator

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._messages

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def _parse(self, po_content: str) -> None:
        skipped: List[int] = []
        for block_number, block in enumerate(split_blocks(po_content)):
            if not block.strip():
                continue
            message = MessageAssembler(block).assemble()
            if message is None:
                skipped.append(block_number)
                self._log_debug("block.skipped", {"block": block_number, "content": block})
                continue
            if message.id in self._messages:
                self._log_debug(
                    "message.replaced", {"id": message.id, "block": block_number}
                )
            self._messages[message.id] = message
        self._log_debug(
            "bundle.parsed",
            {"messages": len(self._messages), "skipped_blocks": skipped},
        )

    def _log_debug(self, label: str, payload: Any) -> None:
        """Emit structured debug information when enabled."""

        if not self.debug:
            return
        if isinstance(payload, (dict, list)):
            message = json.dumps(payload, ensure_ascii=False, indent=2)
        else:
            message = str(payload)
        print(f"[pobundle][parse-debug] {label}:\n{message}", file=sys.stderr)


def load_bundle(
    path: pathlib.Path | str,
    project_id: Optional[str] = None,
    *,
    id_generator: Optional[IdGenerator] = None,
    app_dir: pathlib.Path | None = None,
) -> PoMessageBundle:
    """Load a bundle from ``path``, filling unset options from configuration."""

    settings = get_settings(app_dir=app_dir)
    return PoMessageBundle.from_path(
        path,
        project_id if project_id is not None else settings.POBUNDLE_PROJECT_ID,
        encoding=settings.POBUNDLE_ENCODING,
        id_generator=id_generator,
        debug=bool(settings.POBUNDLE_DEBUG),
    )
