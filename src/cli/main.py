"""Main CLI entry point for text2guide."""

import argparse
import logging
import sys

from src.cli.commands.convert import convert_command
from src.cli.commands.list_nodes import list_command
from src.cli.config import Config
from src.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="text2guide",
        description="Convert a directory of plain-text documents into one AmigaGuide file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert text files and save the guide")
    convert_parser.add_argument("--input", help="Directory of text files (default: GUIDE_SOURCE_DIR or .)")
    convert_parser.add_argument("--output", help="Output guide file (default: GUIDE_OUTPUT_FILE or output.guide)")
    convert_parser.add_argument("--main", help="Name of the document used as the MAIN node (default: MAIN)")
    convert_parser.add_argument("--config", help="Path to .env configuration file", default=None)
    convert_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show per-node rendering details",
    )

    # List command
    list_parser = subparsers.add_parser("list", help="List the nodes that would be generated")
    list_parser.add_argument("--input", help="Directory of text files (default: GUIDE_SOURCE_DIR or .)")
    list_parser.add_argument("--main", help="Name of the document used as the MAIN node (default: MAIN)")
    list_parser.add_argument("--config", help="Path to .env configuration file", default=None)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    # Convert always reports progress, verbose adds per-node detail
    if args.command == "convert":
        setup_logging(verbose=True, debug=args.verbose)
    else:
        setup_logging(verbose=False)

    try:
        config = Config(args.config)
    except ValueError as e:
        logger.error(f"❌ Invalid configuration: {str(e)}")
        sys.exit(1)

    if args.command == "convert":
        convert_command(
            config=config,
            input_dir=args.input,
            output_file=args.output,
            main=args.main,
        )
    elif args.command == "list":
        list_command(config=config, input_dir=args.input, main=args.main)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
