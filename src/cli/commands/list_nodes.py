"""List command - shows the nodes a conversion would produce."""

import logging
import sys

from src.cli.commands.convert import build_document
from src.cli.config import Config
from src.guide_processor.processor import GuideProcessor

logger = logging.getLogger(__name__)


def list_command(config: Config, input_dir: str = None, main: str = None):
    """Render the sources without writing and print the node table."""
    input_dir = input_dir or config.source_dir
    if main:
        config.main_node = main

    try:
        document = build_document(config, input_dir)
    except Exception as e:
        logger.error(f"❌ Failed to read sources: {str(e)}")
        sys.exit(1)

    rows = GuideProcessor.summarize(document)
    if not rows:
        print("No nodes.")
        return

    width = max(len(name) for name, _, _ in rows)
    for name, title, paragraphs in rows:
        print(f"{name.ljust(width)}  {paragraphs:>3}  {title}")
