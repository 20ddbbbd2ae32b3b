"""Reader for plain-text source documents."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass
class ReadResult:
    """Result of reading a source document."""

    success: bool
    name: str = None
    content: str = None
    error: str = None


class DocumentReader:
    """Reads source documents and derives their document names."""

    def read_file(self, file_path: Union[str, Path]) -> ReadResult:
        """
        Read a source document.

        Args:
            file_path: Path to the text file

        Returns:
            ReadResult with the document name (file stem) and raw text,
            or error information
        """
        file_path = Path(file_path)
        name = file_path.stem

        if not file_path.exists():
            return ReadResult(success=False, name=name, error=f"File not found: {file_path}")

        if not file_path.is_file():
            return ReadResult(success=False, name=name, error=f"Path is not a file: {file_path}")

        try:
            # Undecodable bytes become U+FFFD, which the sanitizer drops
            content = file_path.read_text(encoding="utf-8-sig", errors="replace")
        except OSError as e:
            return ReadResult(success=False, name=name, error=f"Error reading file: {e}")

        return ReadResult(success=True, name=name, content=content)
