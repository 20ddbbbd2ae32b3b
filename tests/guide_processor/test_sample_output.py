"""End-to-end conversion of the bundled sample documents."""

from pathlib import Path

import pytest

from src.guide_processor.processor import GuideProcessor
from src.guide_writer.models import GuideDocument
from src.guide_writer.writer import GuideWriter

SAMPLES_DIR = Path(__file__).parent.parent.parent / "samples"


@pytest.fixture
def guide_text():
    document = GuideProcessor().process_directory(SAMPLES_DIR, GuideDocument(database="samples.guide"))
    return GuideWriter().serialize(document).decode("ascii")


def test_nodes_and_titles(guide_text):
    assert guide_text.startswith('@database "samples.guide"\n')
    assert '@node CONTACT "Contact"' in guide_text
    assert '@node MAIN "Welcome to the Example Guide"' in guide_text
    assert '@node TOC "Table of Contents"' in guide_text
    assert guide_text.count("@endnode") == 3
    assert "Not a text source" not in guide_text


def test_inline_markup(guide_text):
    assert '@{"Table of Contents" LINK TOC}' in guide_text
    assert "@{b}bold@{ub}" in guide_text
    assert "@{u}underlined@{uu}" in guide_text
    assert "and *stars* can be escaped" in guide_text


def test_headings(guide_text):
    assert "@{b}@{i}@{u}Getting started@{uu}@{ui}@{ub}\n" in guide_text
    assert "@{b}@{u}Example@{uu}@{ub}\n" in guide_text


def test_code_lines(guide_text):
    assert "@{fg shine}  copy example.txt ram:@{fg text}\n" in guide_text
    assert "@{fg shine}  type ram:example.txt@{fg text}\n" in guide_text


def test_escaping(guide_text):
    assert "help\\@example.com" in guide_text
    assert "C:\\\\Help" in guide_text


def test_links_between_nodes(guide_text):
    assert '@{"Welcome" LINK MAIN}' in guide_text
    assert '@{"Addresses" LINK CONTACT}' in guide_text
