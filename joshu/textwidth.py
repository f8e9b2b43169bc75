"""Terminal display width and width-bounded truncation of text."""

import regex
from wcwidth import wcwidth

_GRAPHEME = regex.compile(r"\X")


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    return sum(max(wcwidth(ch), 0) for ch in text)


def truncate(text: str, width: int) -> str:
    """Cut ``text`` to at most ``width`` columns without splitting graphemes.

    If the cut falls inside a full-width grapheme, that grapheme is dropped,
    so the result may be narrower than ``width``.
    """
    if display_width(text) <= width:
        return text
    pieces = []
    used = 0
    for grapheme in _GRAPHEME.findall(text):
        used += display_width(grapheme)
        if used > width:
            break
        pieces.append(grapheme)
    return "".join(pieces)