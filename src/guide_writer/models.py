"""Document model for AmigaGuide output: nodes, paragraphs and styled spans."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Union

MAIN_NODE = "MAIN"


class Colour(Enum):
    """Guide pen selectors. NONE leaves the current pen untouched."""

    NONE = ""
    TEXT = "text"
    SHINE = "shine"
    SHADOW = "shadow"
    FILL = "fill"
    FILLTEXT = "filltext"
    BACKGROUND = "background"
    HIGHLIGHT = "highlight"

    @classmethod
    def from_name(cls, name: str) -> "Colour":
        """Look up a colour by its guide pen name (case-insensitive)."""
        name = (name or "").strip().lower()
        for colour in cls:
            if colour.value == name:
                return colour
        raise ValueError(f"Unknown guide colour: {name!r}")


@dataclass(frozen=True)
class StyleFlags:
    """The three presentation flags carried by a styled span."""

    bold: bool = False
    italic: bool = False
    underline: bool = False


class HeadingLevel(Enum):
    """Heading levels 1 (most prominent) to 4 (least)."""

    LEVEL_1 = 1
    LEVEL_2 = 2
    LEVEL_3 = 3
    LEVEL_4 = 4

    @property
    def flags(self) -> StyleFlags:
        return _HEADING_FLAGS[self]


_HEADING_FLAGS = {
    HeadingLevel.LEVEL_1: StyleFlags(bold=True, italic=True, underline=True),
    HeadingLevel.LEVEL_2: StyleFlags(bold=True, underline=True),
    HeadingLevel.LEVEL_3: StyleFlags(underline=True),
    HeadingLevel.LEVEL_4: StyleFlags(italic=True),
}


@dataclass(frozen=True)
class StyledSpan:
    """A run of text rendered with colour and presentation attributes."""

    text: str
    foreground: Colour = Colour.NONE
    background: Colour = Colour.NONE
    flags: StyleFlags = StyleFlags()


Fragment = Union[str, StyledSpan]


@dataclass
class Paragraph:
    """Ordered fragments forming one layout unit inside a node."""

    fragments: List[Fragment] = field(default_factory=list)

    def emit(self, text: str):
        """Append a run of already escaped plain text."""
        self.fragments.append(text)

    def span(
        self,
        text: str,
        foreground: Colour = Colour.NONE,
        background: Colour = Colour.NONE,
        flags: StyleFlags = StyleFlags(),
    ) -> StyledSpan:
        """Append a styled span and return it."""
        styled = StyledSpan(text, foreground, background, flags)
        self.fragments.append(styled)
        return styled

    @property
    def is_empty(self) -> bool:
        return not self.fragments

    def plain_text(self) -> str:
        """Fragment text without any styling, useful for inspection."""
        return "".join(f if isinstance(f, str) else f.text for f in self.fragments)


class Node:
    """A named, titled page of the guide."""

    def __init__(self, name: str, title: str = ""):
        self._name = name
        self.title = title
        self.paragraphs: List[Paragraph] = []

    @property
    def name(self) -> str:
        return self._name

    def paragraph(self) -> Paragraph:
        """Start a new paragraph at the end of the node and return it."""
        para = Paragraph()
        self.paragraphs.append(para)
        return para

    def __repr__(self) -> str:
        return f"Node(name={self._name!r}, title={self.title!r}, paragraphs={len(self.paragraphs)})"


@dataclass
class GuideDocument:
    """All nodes of one guide, keyed by canonical name in creation order."""

    database: str = "output.guide"
    author: Optional[str] = None
    version: Optional[str] = None
    wordwrap: Optional[str] = None
    nodes: Dict[str, Node] = field(default_factory=dict)

    @staticmethod
    def canonical_name(name: str) -> str:
        """
        Upper-case node name usable as a bare ``@node`` argument.

        Control and non-ASCII characters are dropped; spaces and double
        quotes become underscores. Link targets must name nodes the same way.
        """
        kept = "".join(ch for ch in name if 32 <= ord(ch) < 127).strip()
        return kept.replace(" ", "_").replace('"', "_").upper()

    def get_or_create(self, name: str) -> Node:
        """Return the node called ``name``, creating an empty one if needed."""
        key = self.canonical_name(name)
        node = self.nodes.get(key)
        if node is None:
            node = Node(key)
            self.nodes[key] = node
        return node

    def get(self, name: str) -> Optional[Node]:
        return self.nodes.get(self.canonical_name(name))

    def __contains__(self, name: str) -> bool:
        return self.canonical_name(name) in self.nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def __len__(self) -> int:
        return len(self.nodes)
