r"""Input Sanitization — strips free-text place queries down to a safe character set.

Invariants:
    - Output contains only ASCII letters, digits, whitespace and . , ' -
    - "Whitespace" is the ECMAScript set: Python's \s also admits \x1c-\x1f and \x85,
      which are removed here like any other disallowed character
    - Output has no leading/trailing whitespace (same set)
    - Pure function: same input, same output, no I/O
"""

import re

WHITESPACE = "".join(map(chr, (
    0x20, 0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0xA0, 0x1680,
    *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
)))

_DISALLOWED = re.compile(f"[^a-zA-Z0-9{re.escape(WHITESPACE)}.,'-]")

MIN_SUGGESTION_LENGTH = 3


def sanitize_input(text: str) -> str:
    """Remove disallowed characters, then trim."""
    return _DISALLOWED.sub("", text).strip(WHITESPACE)
