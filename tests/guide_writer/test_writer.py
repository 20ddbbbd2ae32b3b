"""Tests for the AmigaGuide serializer."""

import tempfile
from pathlib import Path

import pytest

from src.guide_writer.models import Colour, GuideDocument, HeadingLevel, StyledSpan, StyleFlags
from src.guide_writer.writer import GuideWriter, clean_title


def build_document(**kwargs) -> GuideDocument:
    document = GuideDocument(database="test.guide", **kwargs)
    node = document.get_or_create("main")
    node.title = "Welcome"
    para = node.paragraph()
    para.emit("Hello")
    para.emit("\n")
    return document


class TestGuideWriter:
    """Test serialization of documents."""

    def test_serialize_simple_document(self):
        data = GuideWriter().serialize(build_document())

        assert data == (
            b'@database "test.guide"\n'
            b'@node MAIN "Welcome"\n'
            b"Hello\n"
            b"@endnode\n"
        )

    def test_nodes_in_creation_order(self):
        document = GuideDocument()
        document.get_or_create("zeta").title = "Z"
        document.get_or_create("alpha").title = "A"

        data = GuideWriter().serialize(document).decode("ascii")

        assert data.index("@node ZETA") < data.index("@node ALPHA")

    def test_node_name_with_space(self):
        document = GuideDocument(database="x")
        node = document.get_or_create("my file")
        node.title = "T"
        node.paragraph().emit("x\n")

        assert GuideWriter().render_node(node) == '@node MY_FILE "T"\nx\n@endnode\n'

    def test_empty_node(self):
        document = GuideDocument(database="x")
        document.get_or_create("empty").title = "Nothing"
        document.get_or_create("empty").paragraph()

        data = GuideWriter().serialize(document)

        assert data.endswith(b'@node EMPTY "Nothing"\n@endnode\n')

    def test_header_options(self):
        document = build_document(author="Me", version="test.guide 1.0", wordwrap="SmartWrap")
        lines = GuideWriter().serialize(document).decode("ascii").splitlines()

        assert lines[:4] == [
            '@database "test.guide"',
            '@author "Me"',
            "@$VER: test.guide 1.0",
            "@smartwrap",
        ]

    def test_unknown_wrap_mode_is_ignored(self):
        data = GuideWriter().serialize(build_document(wordwrap="fancy"))
        assert b"fancy" not in data

    def test_paragraph_ends_on_its_own_line(self):
        writer = GuideWriter()
        document = GuideDocument()
        node = document.get_or_create("n")
        node.paragraph().span("Heading", flags=HeadingLevel.LEVEL_3.flags)
        node.paragraph().emit("Body\n")

        assert writer.render_node(node) == (
            '@node N ""\n'
            "@{u}Heading@{uu}\n"
            "Body\n"
            "@endnode\n"
        )

    def test_heading_spans_render_distinctly(self):
        writer = GuideWriter()
        rendered = {writer.render_span(StyledSpan("H", flags=level.flags)) for level in HeadingLevel}

        assert len(rendered) == 4
        assert "H" not in rendered

    def test_level_one_heading(self):
        span = StyledSpan("H", flags=HeadingLevel.LEVEL_1.flags)
        assert GuideWriter().render_span(span) == "@{b}@{i}@{u}H@{uu}@{ui}@{ub}"

    def test_code_span(self):
        span = StyledSpan("  x", foreground=Colour.TEXT, flags=StyleFlags())
        assert GuideWriter().render_span(span) == "@{fg text}  x@{fg text}"

    def test_colours_are_reset(self):
        span = StyledSpan("x", foreground=Colour.HIGHLIGHT, background=Colour.SHADOW)
        assert GuideWriter().render_span(span) == (
            "@{fg highlight}@{bg shadow}x@{bg background}@{fg text}"
        )

    def test_link_targets_are_not_validated(self):
        document = GuideDocument()
        node = document.get_or_create("main")
        node.paragraph().emit('@{"Gone" LINK NOWHERE}\n')

        data = GuideWriter().serialize(document)

        assert b'@{"Gone" LINK NOWHERE}' in data
        assert b"@node NOWHERE" not in data

    def test_save(self):
        document = build_document()

        with tempfile.TemporaryDirectory() as temp_dir:
            output = Path(temp_dir) / "out.guide"
            result = GuideWriter().save(document, output)

            assert result == output
            assert output.read_bytes() == GuideWriter().serialize(document)

    def test_save_to_missing_directory_fails(self):
        with pytest.raises(OSError):
            GuideWriter().save(build_document(), "/nonexistent/dir/out.guide")


class TestCleanTitle:
    """Test quoting of free-form command arguments."""

    def test_quotes_are_replaced(self):
        assert clean_title('Say "hi"') == "Say 'hi'"

    def test_non_ascii_and_control_removed(self):
        assert clean_title("Café\tMenu ☃") == "CafMenu"

    def test_plain_title_unchanged(self):
        assert clean_title("Table of Contents") == "Table of Contents"
