"""Line sanitizer: guide escaping and ASCII filtering."""

ESCAPES = {
    "@": "\\@",
    "\\": "\\\\",
}


def is_control(ch: str) -> bool:
    code = ord(ch)
    return code < 32 or code == 127


def sanitize_line(line: str) -> str:
    """
    Escape guide command characters and drop unsupported ones.

    Args:
        line: One line of raw text

    Returns:
        The line with ``@`` and ``\\`` escaped and control or non-ASCII
        characters removed
    """
    parts = []
    for ch in line:
        if ch in ESCAPES:
            parts.append(ESCAPES[ch])
        elif is_control(ch) or ord(ch) > 127:
            continue
        else:
            parts.append(ch)
    return "".join(parts)
