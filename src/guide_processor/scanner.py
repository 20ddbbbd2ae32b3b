"""Directory scanner for plain-text guide sources."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List


@dataclass
class ScannerConfig:
    """Configuration for the directory scanner."""

    skip_hidden_files: bool = True
    supported_extensions: List[str] = None
    recursive: bool = False

    def __post_init__(self):
        if self.supported_extensions is None:
            self.supported_extensions = [".txt"]
        self.supported_extensions = [
            ext.strip().lower() for ext in self.supported_extensions if ext.strip()
        ]


class DirectoryScanner:
    """Scans a directory for source documents."""

    def __init__(self, config: ScannerConfig = None):
        self.config = config or ScannerConfig()

    def scan_for_text_files(self, root_dir: str) -> Iterator[str]:
        """
        Scan for source documents in a stable (sorted) order.

        Args:
            root_dir: Directory path to scan

        Yields:
            Relative file paths with a supported extension
        """
        root_path = Path(root_dir)

        if not root_path.exists():
            raise FileNotFoundError(f"Directory not found: {root_dir}")

        if not root_path.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {root_dir}")

        for file_path in self._walk_directory(root_path):
            relative_path = file_path.relative_to(root_path)
            yield str(relative_path)

    def _walk_directory(self, path: Path) -> Iterator[Path]:
        """Walk the directory (and sub-directories when recursive)."""
        try:
            items = sorted(path.iterdir(), key=lambda p: p.name)
        except PermissionError:
            # Skip directories we can't access
            return

        for item in items:
            if self.config.skip_hidden_files and item.name.startswith("."):
                continue

            if item.is_file():
                if self._is_text_file(item):
                    yield item
            elif item.is_dir() and self.config.recursive:
                yield from self._walk_directory(item)

    def _is_text_file(self, file_path: Path) -> bool:
        """Check if file has a supported extension."""
        return file_path.suffix.lower() in self.config.supported_extensions
