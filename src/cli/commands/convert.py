"""Convert command - renders text files and saves the guide."""

import logging
import sys
from pathlib import Path

from src.cli.config import Config
from src.guide_processor.processor import GuideProcessor
from src.guide_writer.models import MAIN_NODE, GuideDocument, Node
from src.guide_writer.writer import GuideWriter

logger = logging.getLogger(__name__)


def _log_rendered(source: str, node: Node):
    logger.info(f'--> {source} is {node.name} "{node.title}"')


def build_document(config: Config, input_dir: str, output_file: str = None) -> GuideDocument:
    """Render every source in ``input_dir`` into a new document."""
    document = GuideDocument(
        database=Path(output_file or config.output_file).name,
        author=config.author,
        version=config.version,
        wordwrap=config.wordwrap,
    )
    processor = GuideProcessor(
        main=config.main_node,
        render_config=config.render,
        scanner_config=config.scanner,
    )
    return processor.process_directory(input_dir, document, on_rendered=_log_rendered)


def convert_command(
    config: Config,
    input_dir: str = None,
    output_file: str = None,
    main: str = None,
):
    """Convert all text files in a directory into one guide file."""
    input_dir = input_dir or config.source_dir
    output_file = output_file or config.output_file
    if main:
        config.main_node = main

    logger.info(f"📁 Source directory: {input_dir}")
    logger.info(f"📄 Output file: {output_file}")
    logger.info(f"🏠 Main node: {config.main_node}")

    try:
        document = build_document(config, input_dir, output_file)

        if not len(document):
            logger.warning("⚠️ No source documents found, writing an empty guide")
        elif MAIN_NODE not in document:
            logger.warning(f"⚠️ No document named {config.main_node}, the guide has no MAIN node")

        GuideWriter().save(document, output_file)
        logger.info("Saved.")

    except Exception as e:
        logger.error(f"❌ Conversion failed: {str(e)}")
        sys.exit(1)
