"""Guide processor for converting plain-text documents into guide nodes."""

from .emphasis import STRONG, UNDERLINE, EmphasisTransformer, apply_emphasis
from .link_transformer import LinkTransformer
from .processor import GuideProcessor, resolve_node_name
from .reader import DocumentReader, ReadResult
from .renderer import (
    DocumentRenderer,
    LineKind,
    RenderConfig,
    classify_line,
    split_title,
    transform_text,
)
from .sanitizer import sanitize_line
from .scanner import DirectoryScanner, ScannerConfig

__all__ = [
    "DirectoryScanner",
    "DocumentReader",
    "DocumentRenderer",
    "EmphasisTransformer",
    "GuideProcessor",
    "LineKind",
    "LinkTransformer",
    "ReadResult",
    "RenderConfig",
    "ScannerConfig",
    "STRONG",
    "UNDERLINE",
    "apply_emphasis",
    "classify_line",
    "resolve_node_name",
    "sanitize_line",
    "split_title",
    "transform_text",
]
