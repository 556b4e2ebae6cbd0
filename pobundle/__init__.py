"""Parse GNU gettext PO files into ICU-style localizable messages."""

from .bundle import PoMessageBundle, load_bundle
from .errors import (
    ConfigurationError,
    ParseErrorKind,
    PoBundleError,
    PoParseError,
    PoReadError,
)
from .ids import IdGenerator, ProjectIdGenerator
from .structures import Literal, Message, MessageBuilder, PlaceholderRef

__all__ = [
    "ConfigurationError",
    "IdGenerator",
    "Literal",
    "Message",
    "MessageBuilder",
    "ParseErrorKind",
    "PlaceholderRef",
    "PoBundleError",
    "PoMessageBundle",
    "PoParseError",
    "PoReadError",
    "ProjectIdGenerator",
    "load_bundle",
]

__version__ = "0.1.0"
