from __future__ import annotations

from pobundle.structures import Literal, MessageBuilder, PlaceholderRef
from pobundle.text import parse_translation_text, tokenize_translation, unescape_string


def _parts(text, *, inside_plural):
    builder = MessageBuilder().set_key("KEY")
    parse_translation_text(text, builder, inside_plural=inside_plural)
    return builder.build().parts


def test_tokens_alternate_between_text_and_placeholders():
    assert tokenize_translation("Hi {$name}!") == ["Hi ", "name", "!"]
    assert tokenize_translation("{$n} items") == ["", "n", " items"]
    assert tokenize_translation("{$a}{$b}") == ["", "a", "", "b", ""]


def test_plain_text_is_a_single_literal():
    assert _parts("Bonjour", inside_plural=False) == (Literal("Bonjour"),)


def test_placeholders_become_references_outside_plurals():
    assert _parts("Hello {$USER_NAME}, you have {$COUNT_1} mails", inside_plural=False) == (
        Literal("Hello "),
        PlaceholderRef("userName"),
        Literal(", you have "),
        PlaceholderRef("count_1"),
        Literal(" mails"),
    )


def test_placeholders_stay_literal_inside_plurals():
    assert _parts("{$n} articles", inside_plural=True) == (Literal("{n} articles"),)


def test_escapes_are_unescaped_in_literals():
    assert unescape_string('say \\"hi\\"\\nbye') == 'say "hi"\nbye'
    assert _parts('a \\"b\\"\\n{$X}', inside_plural=False) == (
        Literal('a "b"\n'),
        PlaceholderRef("x"),
    )


def test_empty_text_adds_nothing():
    assert _parts("", inside_plural=False) == ()
