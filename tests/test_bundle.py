from __future__ import annotations

import io

import pytest

from pobundle import (
    Literal,
    ParseErrorKind,
    PoMessageBundle,
    PoParseError,
    PoReadError,
    ProjectIdGenerator,
)

PO_CONTENT = """\
msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\\n"

#: id=GREETING
msgctxt "Landing page greeting"
msgid "Hello"
msgstr "Bonjour"

#: id=ARTICLES
#: pluralVar=n
msgid "{$n} article"
msgstr[0] "{$n} article"
msgstr[1] "{$n} articles"

#: id=QUOTE
msgid "Say hi"
msgstr "Dites \\"salut\\"\\n"
"{$USER_NAME}"
"""


def test_bundle_exposes_messages_by_id():
    bundle = PoMessageBundle(PO_CONTENT, "project")

    assert len(bundle) == 3
    assert "GREETING" in bundle
    greeting = bundle.get("GREETING")
    assert greeting.id == "GREETING"
    assert greeting.parts == (Literal("Bonjour"),)
    assert greeting.description == "Landing page greeting"
    assert bundle.get("MISSING") is None
    assert sorted(message.id for message in bundle.all()) == ["ARTICLES", "GREETING", "QUOTE"]
    assert sorted(bundle) == ["ARTICLES", "GREETING", "QUOTE"]


def test_plural_message_renders_icu():
    bundle = PoMessageBundle(PO_CONTENT, "project")
    assert bundle.get("ARTICLES").render() == (
        "{n ,plural, offset:0  =1 {{n} article} other {{n} articles}}"
    )


def test_escapes_and_placeholders_in_singular_message():
    message = PoMessageBundle(PO_CONTENT, "project").get("QUOTE")
    assert message.render() == 'Dites "salut"\n{userName}'
    assert message.placeholder_names == ["userName"]


def test_parsing_is_deterministic():
    first = PoMessageBundle(PO_CONTENT, "project")
    second = PoMessageBundle(PO_CONTENT, "project")
    assert {m.id: m for m in first.all()} == {m.id: m for m in second.all()}


def test_later_duplicate_replaces_earlier_message():
    content = '#: id=DUP\nmsgstr "first"\n\n#: id=DUP\nmsgstr "second"\n'
    bundle = PoMessageBundle(content, "project")

    assert len(bundle) == 1
    assert bundle.get("DUP").render() == "second"


def test_malformed_block_aborts_construction():
    content = '#: id=OK\nmsgstr "fine"\n\n#: id=BAD\n"stray"\n'
    with pytest.raises(PoParseError) as excinfo:
        PoMessageBundle(content, "project")

    assert excinfo.value.kind is ParseErrorKind.UNEXPECTED_CONTINUATION
    assert excinfo.value.block == '#: id=BAD\n"stray"\n'


def test_empty_project_id_is_rejected():
    with pytest.raises(PoParseError) as excinfo:
        PoMessageBundle(PO_CONTENT, "")
    assert excinfo.value.kind is ParseErrorKind.INVALID_PROJECT_ID


def test_default_id_generator_is_scoped_by_project():
    bundle = PoMessageBundle(PO_CONTENT, "project")
    generator = bundle.id_generator()

    assert isinstance(generator, ProjectIdGenerator)
    assert generator.project_id == "project"


def test_injected_id_generator_is_passed_through():
    class StaticIds:
        def generate(self, meaning, key):
            return "STATIC"

    generator = StaticIds()
    bundle = PoMessageBundle(PO_CONTENT, "project", id_generator=generator)
    assert bundle.id_generator() is generator


def test_from_stream_decodes_bytes():
    stream = io.BytesIO('#: id=CAFE\nmsgstr "café"\n'.encode("utf-8"))
    bundle = PoMessageBundle.from_stream(stream, "project")
    assert bundle.get("CAFE").render() == "café"


def test_from_stream_reports_decoding_failures_separately():
    stream = io.BytesIO(b'#: id=BAD\nmsgstr "\xff\xfe"\n')
    with pytest.raises(PoReadError):
        PoMessageBundle.from_stream(stream, "project")


def test_from_path_reads_file(tmp_path):
    po_path = tmp_path / "fr.po"
    po_path.write_text(PO_CONTENT, encoding="utf-8")

    bundle = PoMessageBundle.from_path(po_path, "project")
    assert bundle.get("GREETING").render() == "Bonjour"


def test_from_path_reports_missing_file(tmp_path):
    with pytest.raises(PoReadError):
        PoMessageBundle.from_path(tmp_path / "missing.po", "project")


def test_debug_output_goes_to_stderr(capsys):
    content = '#: id=DUP\nmsgstr "first"\n\n#: id=DUP\nmsgstr "second"\n'
    PoMessageBundle(content, "project", debug=True)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[pobundle][parse-debug] message.replaced" in captured.err
    assert "[pobundle][parse-debug] bundle.parsed" in captured.err


def test_from_stream_drops_leading_byte_order_mark():
    stream = io.BytesIO(b'\xef\xbb\xbf#: id=FIRST\nmsgstr "x"\n\n#: id=SECOND\nmsgstr "y"\n')
    bundle = PoMessageBundle.from_stream(stream, "project")

    assert bundle.get("FIRST").render() == "x"
    assert len(bundle) == 2
