"""Wrapping a single line of text over several rows of fixed width."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from wcwidth import wcwidth

from joshu.textwidth import display_width


@dataclass(frozen=True)
class LineInfo:
    """One wrapped row: character offsets into the text and its column width."""

    start: int
    end: int
    width: int


class MultilineText:
    """A text split into rows that each fit within ``area_width`` columns."""

    def __init__(self, text: str, area_width: int) -> None:
        self.text = text
        self.width = area_width
        self._lines = self._wrap(text, area_width)

    @staticmethod
    def _wrap(text: str, area_width: int) -> list[LineInfo]:
        text_width = display_width(text)
        if text_width < area_width:
            return [LineInfo(0, len(text), text_width)]

        lines = []
        start = 0
        line_width = 0
        for index, ch in enumerate(text):
            w = wcwidth(ch)
            if w < 0:
                continue
            if line_width + w < area_width:
                line_width += w
                continue
            lines.append(LineInfo(start, index, line_width))
            line_width = w
            start = index
        lines.append(LineInfo(start, len(text), display_width(text[start:])))
        return lines

    def height(self) -> int:
        """Rows needed, including a spare row when the last one is full."""
        if self._lines[-1].width >= self.width:
            return len(self) + 1
        return len(self)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[LineInfo]:
        return iter(self._lines)

    def line_strings(self) -> list[str]:
        """Return the text of each row."""
        return [self.text[line.start:line.end] for line in self._lines]