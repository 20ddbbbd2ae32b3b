"""Configuration management for the text2guide CLI."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from src.guide_processor.renderer import RenderConfig
from src.guide_processor.scanner import ScannerConfig


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from project root .env
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Sources
        self.source_dir = os.getenv("GUIDE_SOURCE_DIR", ".")
        self.file_extensions = os.getenv("GUIDE_FILE_EXTENSIONS", ".txt").split(",")
        self.recursive = os.getenv("GUIDE_RECURSIVE", "false").lower() == "true"
        self.skip_hidden_files = os.getenv("SKIP_HIDDEN_FILES", "true").lower() == "true"

        # Output
        self.output_file = os.getenv("GUIDE_OUTPUT_FILE", "output.guide")
        self.main_node = os.getenv("GUIDE_MAIN_NODE", "MAIN")
        self.author = os.getenv("GUIDE_AUTHOR", "") or None
        self.version = os.getenv("GUIDE_VERSION", "") or None
        self.wordwrap = os.getenv("GUIDE_WORDWRAP", "") or None

        # Rendering
        self.render = RenderConfig.from_env()

    @property
    def scanner(self) -> ScannerConfig:
        return ScannerConfig(
            skip_hidden_files=self.skip_hidden_files,
            supported_extensions=list(self.file_extensions),
            recursive=self.recursive,
        )
