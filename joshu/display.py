"""Options controlling how directory listings are displayed."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field

from joshu.sorting import SortOption

Ratio = tuple[int, int]


def default_column_ratio() -> tuple[int, int, int]:
    """Widths of the parent, current and preview columns, relative to each other."""
    return (1, 3, 4)


def _name_of(entry) -> str:
    name = getattr(entry, "name", entry)
    return os.fsdecode(name)


def no_filter(name) -> bool:
    """Keep every entry; ``name`` must still be a valid entry name."""
    _name_of(name)
    return True


def filter_hidden(name) -> bool:
    """Keep entries whose name does not start with a dot.

    ``name`` may be a string, a path or an ``os.DirEntry``.
    """
    return not _name_of(name).startswith(".")


@dataclass
class DisplayOption:
    """Display settings for the three-column view."""

    automatically_count_files: bool = False
    collapse_preview: bool = True
    column_ratio: tuple[int, int, int] = field(default_factory=default_column_ratio)
    show_borders: bool = True
    show_hidden: bool = False
    show_icons: bool = False
    show_preview: bool = True
    sort_options: SortOption = field(default_factory=SortOption)
    tilde_in_titlebar: bool = True

    @property
    def _total(self) -> int:
        return sum(self.column_ratio)

    @property
    def default_layout(self) -> tuple[Ratio, Ratio, Ratio]:
        """Column ratios as ``(numerator, denominator)`` pairs, preview shown."""
        parent, curr, child = self.column_ratio
        total = self._total
        return ((parent, total), (curr, total), (child, total))

    @property
    def no_preview_layout(self) -> tuple[Ratio, Ratio, Ratio]:
        """Column ratios with the preview column folded into the current one."""
        parent, curr, child = self.column_ratio
        total = self._total
        return ((parent, total), (curr + child, total), (0, total))

    def filter_func(self) -> Callable[[object], bool]:
        """Return the predicate that decides which entries are listed."""
        return no_filter if self.show_hidden else filter_hidden