"""Link transformer for ``[label](target)`` cross references."""

from enum import Enum

from .emphasis import ESCAPE_MARKER

LINK_OPEN = '@{"'
LINK_SEPARATOR = '" LINK '
LINK_CLOSE = "}"


class LinkState(Enum):
    OUTSIDE = 0
    LABEL = 1
    TARGET = 2


class LinkTransformer:
    """Rewrites bracketed links into guide ``LINK`` commands."""

    def transform(self, line: str) -> str:
        """
        Transform one line.

        ``[label](target)`` becomes ``@{"label" LINK target}``. The opening
        bracket only counts at the start of the line or after a space, and
        ``^[`` gives a literal bracket. Links left open at the end of the
        line are not closed.

        Args:
            line: Sanitized line

        Returns:
            The line with links replaced by guide commands
        """
        out = []
        state = LinkState.OUTSIDE
        last_space = True
        escape_next = False

        for ch in line:
            if ch == ESCAPE_MARKER:
                escape_next = True
                continue

            if escape_next:
                if ch == "[":
                    out.append(ch)
                else:
                    out.append(ESCAPE_MARKER + ch)
                escape_next = False
                continue

            if state is LinkState.OUTSIDE and ch == "[" and last_space:
                out.append(LINK_OPEN)
                state = LinkState.LABEL
                continue
            if state is LinkState.LABEL and ch == "]":
                out.append(LINK_SEPARATOR)
                state = LinkState.TARGET
                continue
            if state is LinkState.TARGET and ch == "(":
                continue
            if state is LinkState.TARGET and ch == ")":
                out.append(LINK_CLOSE)
                state = LinkState.OUTSIDE
                continue

            out.append(ch)
            last_space = ch == " "

        return "".join(out)
