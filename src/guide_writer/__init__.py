"""Guide document model and AmigaGuide serializer."""

from .models import (
    MAIN_NODE,
    Colour,
    Fragment,
    GuideDocument,
    HeadingLevel,
    Node,
    Paragraph,
    StyledSpan,
    StyleFlags,
)
from .writer import GuideWriter, clean_title

__all__ = [
    "MAIN_NODE",
    "Colour",
    "Fragment",
    "GuideDocument",
    "GuideWriter",
    "HeadingLevel",
    "Node",
    "Paragraph",
    "StyledSpan",
    "StyleFlags",
    "clean_title",
]
