"""Remove terminal styling from Jest output before it reaches GitHub."""

import re

# CSI sequences (colors, cursor moves) and OSC sequences terminated by BEL
ANSI_PATTERN = re.compile(
    r"[\u001B\u009B][\[\]()#;?]*(?:"
    r"(?:(?:(?:;[-a-zA-Z\d/#&.:=?%@~_]+)*"
    r"|[a-zA-Z\d]+(?:;[-a-zA-Z\d/#&.:=?%@~_]*)*)?\u0007)"
    r"|(?:(?:\d{1,4}(?:;\d{0,4})*)?[\dA-PR-TZcf-ntqry=><~])"
    r")"
)


def strip_ansi(text: str) -> str:
    """Return `text` without ANSI escape sequences."""
    return ANSI_PATTERN.sub("", text)
