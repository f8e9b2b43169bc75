"""Ordering of directory entries by name, size, extension and time."""

from __future__ import annotations

import os
import re
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from functools import cmp_to_key
from pathlib import Path
from typing import Union

Entry = Union[str, os.PathLike]

_NATURAL_PART = re.compile(r"\d+|\D")


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def natural_compare(a: str, b: str) -> int:
    """Compare two strings treating runs of digits as numbers.

    Returns a negative number, zero or a positive number.
    """
    parts_a = _NATURAL_PART.findall(a)
    parts_b = _NATURAL_PART.findall(b)
    for pa, pb in zip(parts_a, parts_b):
        if pa.isdigit() and pb.isdigit():
            result = _cmp(int(pa), int(pb)) or _cmp(len(pa), len(pb))
        else:
            result = _cmp(pa, pb)
        if result:
            return result
    return _cmp(len(parts_a), len(parts_b))


def _file_name(entry: Entry) -> str:
    return Path(entry).name


def _extension(entry: Entry) -> str:
    return Path(_file_name(entry)).suffix[1:]


def _size(entry: Entry) -> int:
    path = Path(entry)
    try:
        return path.stat().st_size
    except OSError:
        try:
            return path.lstat().st_size
        except OSError:
            return 0


def _mtime_compare(f1: Entry, f2: Entry) -> int:
    try:
        m1 = os.stat(f1).st_mtime_ns
        m2 = os.stat(f2).st_mtime_ns
    except OSError:
        return 0
    return _cmp(m1, m2)


class SortType(Enum):
    """A single criterion for ordering entries."""

    LEXICAL = "lexical"
    MTIME = "mtime"
    NATURAL = "natural"
    SIZE = "size"
    EXT = "ext"

    @staticmethod
    def parse(s: str) -> SortType | None:
        """Return the sort type named ``s``, or None if there is none."""
        try:
            return SortType(s)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value

    def compare(self, f1: Entry, f2: Entry, sort_option: SortOption) -> int:
        """Compare two entries by this criterion alone."""
        if self is SortType.NATURAL:
            n1, n2 = _file_name(f1), _file_name(f2)
            if not sort_option.case_sensitive:
                n1, n2 = n1.lower(), n2.lower()
            return natural_compare(n1, n2)
        if self is SortType.LEXICAL:
            n1, n2 = _file_name(f1), _file_name(f2)
            if not sort_option.case_sensitive:
                n1, n2 = n1.lower(), n2.lower()
            return _cmp(n1, n2)
        if self is SortType.SIZE:
            return _cmp(_size(f1), _size(f2))
        if self is SortType.MTIME:
            return _mtime_compare(f1, f2)
        return natural_compare(_extension(f1), _extension(f2))


def _default_methods() -> deque[SortType]:
    return deque(
        [SortType.NATURAL, SortType.LEXICAL, SortType.SIZE, SortType.EXT, SortType.MTIME]
    )


@dataclass
class SortTypes:
    """Criteria applied in turn until one tells two entries apart."""

    methods: deque[SortType] = field(default_factory=_default_methods)

    def reorganize(self, sort_type: SortType) -> None:
        """Make ``sort_type`` the first criterion, dropping the last one."""
        self.methods.appendleft(sort_type)
        self.methods.pop()

    def compare(self, f1: Entry, f2: Entry, sort_option: SortOption) -> int:
        for method in self.methods:
            result = method.compare(f1, f2, sort_option)
            if result:
                return result
        return 0


@dataclass
class SortOption:
    """How a directory listing is ordered."""

    directories_first: bool = True
    case_sensitive: bool = False
    reverse: bool = False
    sort_methods: SortTypes = field(default_factory=SortTypes)

    def set_sort_method(self, method: SortType) -> None:
        self.sort_methods.reorganize(method)

    def compare(self, f1: Entry, f2: Entry) -> int:
        """Compare two entries; directories lead regardless of ``reverse``."""
        if self.directories_first:
            d1 = Path(f1).is_dir()
            d2 = Path(f2).is_dir()
            if d1 and not d2:
                return -1
            if d2 and not d1:
                return 1
        result = self.sort_methods.compare(f1, f2, self)
        return -result if self.reverse else result

    def sort(self, paths) -> list:
        """Return the given entries as a new list in this order."""
        return sorted(paths, key=cmp_to_key(self.compare))