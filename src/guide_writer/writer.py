"""Serializer that lays out a GuideDocument in the AmigaGuide wire format."""

import logging
from pathlib import Path
from typing import List, Union

from .models import Colour, GuideDocument, Node, Paragraph, StyledSpan

logger = logging.getLogger(__name__)

WORDWRAP_MODES = ("wordwrap", "smartwrap")


class GuideWriter:
    """Serializes a fully built document model to bytes."""

    def __init__(self, encoding: str = "ascii"):
        self.encoding = encoding

    def serialize(self, document: GuideDocument) -> bytes:
        """
        Render the whole document.

        Args:
            document: Populated document model (not modified)

        Returns:
            The guide file contents
        """
        lines = self._header(document)
        parts = ["".join(line + "\n" for line in lines)]

        for node in document:
            parts.append(self.render_node(node))

        return "".join(parts).encode(self.encoding, errors="replace")

    def save(self, document: GuideDocument, output: Union[str, Path]) -> Path:
        """Serialize ``document`` and write it to ``output``."""
        output = Path(output)
        data = self.serialize(document)
        output.write_bytes(data)
        logger.debug(f"Wrote {len(data)} bytes to {output}")
        return output

    def render_node(self, node: Node) -> str:
        parts = [f'@node {node.name} "{clean_title(node.title)}"\n']
        for para in node.paragraphs:
            parts.append(self.render_paragraph(para))
        parts.append("@endnode\n")
        return "".join(parts)

    def render_paragraph(self, para: Paragraph) -> str:
        text = "".join(
            fragment if isinstance(fragment, str) else self.render_span(fragment)
            for fragment in para.fragments
        )
        # A paragraph always ends on its own line
        if text and not text.endswith("\n"):
            text += "\n"
        return text

    def render_span(self, span: StyledSpan) -> str:
        opening: List[str] = []
        closing: List[str] = []

        if span.foreground is not Colour.NONE:
            opening.append(f"@{{fg {span.foreground.value}}}")
            closing.append(f"@{{fg {Colour.TEXT.value}}}")
        if span.background is not Colour.NONE:
            opening.append(f"@{{bg {span.background.value}}}")
            closing.append(f"@{{bg {Colour.BACKGROUND.value}}}")
        if span.flags.bold:
            opening.append("@{b}")
            closing.append("@{ub}")
        if span.flags.italic:
            opening.append("@{i}")
            closing.append("@{ui}")
        if span.flags.underline:
            opening.append("@{u}")
            closing.append("@{uu}")

        return "".join(opening) + span.text + "".join(reversed(closing))

    def _header(self, document: GuideDocument) -> List[str]:
        lines = [f'@database "{clean_title(document.database)}"']
        if document.author:
            lines.append(f'@author "{clean_title(document.author)}"')
        if document.version:
            lines.append(f"@$VER: {clean_title(document.version)}")
        if document.wordwrap:
            mode = document.wordwrap.strip().lower()
            if mode in WORDWRAP_MODES:
                lines.append(f"@{mode}")
            else:
                logger.warning(f"Ignoring unknown wrap mode: {document.wordwrap}")
        return lines


def clean_title(text: str) -> str:
    """Make free-form text safe for a quoted command argument."""
    kept = (ch for ch in text if 32 <= ord(ch) < 127)
    return "".join(kept).replace('"', "'").strip()
