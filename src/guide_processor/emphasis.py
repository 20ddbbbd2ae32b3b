"""Emphasis transformer for single-character delimited spans."""

from enum import Enum

ESCAPE_MARKER = "^"


class SpanState(Enum):
    CLOSED = 0
    OPEN = 1


class EmphasisTransformer:
    """Rewrites ``<d>text<d>`` spans into start/end guide markup."""

    def __init__(self, delimiter: str, start: str, end: str):
        if len(delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter
        self.start = start
        self.end = end

    def transform(self, line: str) -> str:
        """
        Transform one line.

        A span opens on a delimiter at the start of the line or after a
        space, and closes on the next delimiter. ``^`` before the delimiter
        makes it literal. Spans still open at the end of the line are closed.

        Args:
            line: Sanitized line

        Returns:
            The line with spans replaced by markup
        """
        out = []
        state = SpanState.CLOSED
        last_space = True
        escape_next = False

        for ch in line:
            if ch == ESCAPE_MARKER:
                escape_next = True
                continue

            if escape_next:
                if ch == self.delimiter:
                    out.append(ch)
                else:
                    out.append(ESCAPE_MARKER + ch)
                escape_next = False
                continue

            if ch == self.delimiter:
                if state is SpanState.CLOSED and last_space:
                    state = SpanState.OPEN
                    out.append(self.start)
                elif state is SpanState.OPEN:
                    state = SpanState.CLOSED
                    out.append(self.end)
                else:
                    out.append(ch)
                last_space = False
                continue

            out.append(ch)
            last_space = ch == " "

        if state is SpanState.OPEN:
            out.append(self.end)

        return "".join(out)


UNDERLINE = EmphasisTransformer("_", "@{u}", "@{uu}")
STRONG = EmphasisTransformer("*", "@{b}", "@{ub}")


def apply_emphasis(line: str) -> str:
    """Underline first, then strong."""
    return STRONG.transform(UNDERLINE.transform(line))
