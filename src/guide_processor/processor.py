"""Main orchestration for converting text documents into a guide."""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple, Union

from ..guide_writer.models import MAIN_NODE, GuideDocument, Node
from .reader import DocumentReader
from .renderer import DocumentRenderer, RenderConfig
from .scanner import DirectoryScanner, ScannerConfig

logger = logging.getLogger(__name__)

# Called with (source label, rendered node) after each document
RenderCallback = Callable[[str, Node], None]


def resolve_node_name(document_name: str, main: str = MAIN_NODE) -> str:
    """Canonical node name for a document, remapping the main document to MAIN."""
    name = GuideDocument.canonical_name(document_name)
    if main and name == GuideDocument.canonical_name(main):
        return MAIN_NODE
    return name


class GuideProcessor:
    """Renders a set of documents into one GuideDocument."""

    def __init__(
        self,
        main: str = MAIN_NODE,
        render_config: RenderConfig = None,
        scanner_config: ScannerConfig = None,
    ):
        self.main = main
        self.scanner = DirectoryScanner(scanner_config)
        self.reader = DocumentReader()
        self.renderer = DocumentRenderer(render_config)

    def process_directory(
        self,
        source_dir: Union[str, Path],
        document: GuideDocument = None,
        on_rendered: Optional[RenderCallback] = None,
    ) -> GuideDocument:
        """
        Discover, read and render every source file in a directory.

        Args:
            source_dir: Directory containing the text files
            document: Document to add nodes to (a new one if omitted)
            on_rendered: Optional progress callback

        Returns:
            The populated document
        """
        source_dir = Path(source_dir)
        document = document if document is not None else GuideDocument()

        files = list(self.scanner.scan_for_text_files(str(source_dir)))
        logger.info(f"Found {len(files)} source files in {source_dir}")

        rendered = 0
        failed = 0
        for relative_path in files:
            result = self.reader.read_file(source_dir / relative_path)
            if not result.success:
                logger.warning(f"Failed to read {relative_path}: {result.error}")
                failed += 1
                continue

            node = self.render_document(document, result.name, result.content)
            rendered += 1
            if on_rendered:
                on_rendered(relative_path, node)

        logger.debug(f"Rendered {rendered} documents, {failed} failed, {len(document)} nodes")
        return document

    def process_documents(
        self,
        documents: Iterable[Tuple[str, str]],
        document: GuideDocument = None,
        on_rendered: Optional[RenderCallback] = None,
    ) -> GuideDocument:
        """Render (document name, raw text) pairs without touching the file system."""
        document = document if document is not None else GuideDocument()
        for name, content in documents:
            node = self.render_document(document, name, content)
            if on_rendered:
                on_rendered(name, node)
        return document

    def render_document(self, document: GuideDocument, name: str, content: str) -> Node:
        """Render one document into the node its name maps to."""
        node_name = resolve_node_name(name, self.main)
        if node_name in document:
            logger.warning(f"Node {node_name} already exists, appending {name} to it")
        node = document.get_or_create(node_name)
        return self.renderer.render(content, node)

    @staticmethod
    def summarize(document: GuideDocument) -> List[Tuple[str, str, int]]:
        """(name, title, paragraph count) for every node, in output order."""
        return [(node.name, node.title, len(node.paragraphs)) for node in document]
