"""Prompt normalization shared by fingerprint producers and verifiers.

Whitespace is the ECMAScript WhiteSpace + LineTerminator set, not Python's
str.isspace(): U+FEFF counts, while U+001C..U+001F and U+0085 do not. This
keeps fingerprints identical to those issued by existing producers.
"""

import re

WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_WHITESPACE_RUN = re.compile(f"[{re.escape(WHITESPACE)}]+")


def normalize_prompt(prompt: str) -> str:
    """Lowercase and trim, then collapse whitespace runs to a single space."""
    return _WHITESPACE_RUN.sub(" ", prompt.lower().strip(WHITESPACE))
