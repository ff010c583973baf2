"""Text helpers for display names."""

from __future__ import annotations

import re

_WORD = re.compile(r"\S+")


def to_title_case(text: str) -> str:
    """Capitalize the first character of each whitespace-delimited word.

    All other characters are lower-cased.  Whitespace runs are kept
    verbatim and punctuation does not start a new word, so
    ``"hello-world"`` becomes ``"Hello-world"``.
    """
    return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)
