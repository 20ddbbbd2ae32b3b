"""Line classifier and paragraph builder for plain-text documents."""

import logging
import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..guide_writer.models import Colour, HeadingLevel, Node, Paragraph, StyleFlags
from .emphasis import apply_emphasis
from .link_transformer import LinkTransformer
from .sanitizer import sanitize_line

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r\n|\r|\n")

# The trailing space is part of every prefix
HEADING_PREFIXES = [
    ("# ", HeadingLevel.LEVEL_1),
    ("## ", HeadingLevel.LEVEL_2),
    ("### ", HeadingLevel.LEVEL_3),
    ("#### ", HeadingLevel.LEVEL_4),
]

CODE_INDENT = "  "


class LineKind(Enum):
    BLANK = "blank"
    HEADING = "heading"
    CODE = "code"
    TEXT = "text"


@dataclass
class RenderConfig:
    """Settings for document rendering."""

    code_colour: Colour = Colour.SHINE
    merge_code_runs: bool = False

    @classmethod
    def from_env(cls) -> "RenderConfig":
        """Create configuration from environment variables."""
        return cls(
            code_colour=Colour.from_name(os.getenv("GUIDE_CODE_COLOUR", "shine")),
            merge_code_runs=os.getenv("GUIDE_MERGE_CODE_RUNS", "false").lower() == "true",
        )


def split_title(source: str) -> Tuple[str, str]:
    """
    Split a document into its title line and body.

    Args:
        source: Raw document text

    Returns:
        (title, body), both stripped. A document without a line break is
        all title and has an empty body.
    """
    first_nl = source.find("\n")
    if first_nl < 0:
        return source.strip(), ""
    return source[:first_nl].strip(), source[first_nl + 1 :].strip()


def classify_line(line: str, previous_blank: bool) -> Tuple[LineKind, Optional[HeadingLevel]]:
    """Classify a sanitized body line. Never fails."""
    if not line.strip():
        return LineKind.BLANK, None

    for prefix, level in HEADING_PREFIXES:
        if line.startswith(prefix):
            return LineKind.HEADING, level

    if line.startswith(CODE_INDENT) and previous_blank:
        return LineKind.CODE, None

    return LineKind.TEXT, None


def heading_text(line: str, level: HeadingLevel) -> str:
    return line[level.value :].strip()


def transform_text(line: str, links: LinkTransformer = None) -> str:
    """Apply link, underline and strong markup to a sanitized line."""
    links = links or LinkTransformer()
    return apply_emphasis(links.transform(line))


class DocumentRenderer:
    """Renders one document's text into a guide node."""

    def __init__(self, config: RenderConfig = None):
        self.config = config or RenderConfig()
        self.links = LinkTransformer()

    def render(self, source: str, node: Node) -> Node:
        """
        Render ``source`` into ``node``.

        The first line becomes the node title; the remaining lines are
        classified one at a time and appended as paragraphs.

        Args:
            source: Raw document text
            node: Target node (paragraphs are appended)

        Returns:
            The same node
        """
        title, body = split_title(source)
        node.title = title

        lines: List[str] = LINE_BREAK.split(body) if body else []

        para = node.paragraph()
        has_data = False
        code_block = False
        last_empty = True

        for raw in lines:
            line = sanitize_line(raw)
            kind, level = classify_line(line, last_empty)

            if kind is LineKind.BLANK:
                para.emit("\n")
                has_data = True
                last_empty = True
                continue

            if kind is LineKind.HEADING:
                if has_data:
                    para = node.paragraph()
                para.span(heading_text(line, level), flags=level.flags)
                para = node.paragraph()
                has_data = False
                last_empty = False
                continue

            if kind is LineKind.CODE:
                para = self._code_line(node, para, line, has_data, code_block)
                has_data = True
                code_block = True
                # last_empty stays as is so the next indented line is code too
                continue

            if code_block:
                para = node.paragraph()
                code_block = False

            para.emit(transform_text(line, self.links))
            para.emit("\n")
            has_data = True
            last_empty = False

        logger.debug(f"Rendered {node.name}: {len(node.paragraphs)} paragraphs")
        return node

    def _code_line(
        self, node: Node, para: Paragraph, line: str, has_data: bool, code_block: bool
    ) -> Paragraph:
        if self.config.merge_code_runs and code_block:
            para.span(line, foreground=self.config.code_colour, flags=StyleFlags())
            para.emit("\n")
            return para

        if has_data:
            para = node.paragraph()
        para.span(line, foreground=self.config.code_colour, flags=StyleFlags())
        if self.config.merge_code_runs:
            para.emit("\n")
        return para
