import os
from pathlib import Path

import pytest

from joshu.sorting import SortOption, SortType, SortTypes, natural_compare


def _file(directory: Path, name: str, content: bytes = b"") -> Path:
    path = directory / name
    path.write_bytes(content)
    return path


def test_natural_compare_orders_numbers_by_value():
    assert natural_compare("file2", "file10") < 0
    assert natural_compare("file10", "file2") > 0
    assert natural_compare("same", "same") == 0


def test_natural_compare_prefix_comes_first():
    assert natural_compare("abc", "abcd") < 0
    assert natural_compare("abcd", "abc") > 0


def test_natural_compare_antisymmetric():
    names = ["a1", "a01", "a10", "b", "B2", "x9y", "x10y", ""]
    for a in names:
        for b in names:
            assert natural_compare(a, b) == -natural_compare(b, a)


@pytest.mark.parametrize("sort_type", list(SortType))
def test_parse_round_trip(sort_type):
    assert SortType.parse(str(sort_type)) is sort_type


def test_parse_unknown_returns_none():
    assert SortType.parse("bogus") is None
    assert SortType.parse("") is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("lexical", SortType.LEXICAL),
        ("mtime", SortType.MTIME),
        ("natural", SortType.NATURAL),
        ("size", SortType.SIZE),
        ("ext", SortType.EXT),
    ],
)
def test_str_values(text, expected):
    parsed = SortType.parse(text)
    assert parsed is expected
    assert parsed.__str__() == text


def test_default_sort_types_order():
    assert list(SortTypes().methods) == [
        SortType.NATURAL,
        SortType.LEXICAL,
        SortType.SIZE,
        SortType.EXT,
        SortType.MTIME,
    ]


def test_reorganize_puts_first_and_drops_last():
    types = SortTypes()
    types.reorganize(SortType.SIZE)
    methods = list(types.methods)
    assert methods[0] is SortType.SIZE
    assert len(methods) == 5
    assert SortType.MTIME not in methods


def test_lexical_case_sensitivity():
    sensitive = SortOption(case_sensitive=True)
    insensitive = SortOption(case_sensitive=False)
    assert SortType.LEXICAL.compare(Path("B"), Path("a"), sensitive) < 0
    assert SortType.LEXICAL.compare(Path("B"), Path("a"), insensitive) > 0


def test_natural_case_insensitive_equal():
    assert SortType.NATURAL.compare(Path("Abc"), Path("aBC"), SortOption()) == 0


def test_size_compare(tmp_path):
    big = _file(tmp_path, "big", b"x" * 10)
    small = _file(tmp_path, "small", b"x")
    assert SortType.SIZE.compare(big, small, SortOption()) > 0
    assert SortType.SIZE.compare(small, big, SortOption()) < 0


def test_ext_compare(tmp_path):
    assert SortType.EXT.compare(Path("x.b"), Path("y.a"), SortOption()) > 0
    assert SortType.EXT.compare(Path("x.txt"), Path("y.txt"), SortOption()) == 0


def test_mtime_compare(tmp_path):
    old = _file(tmp_path, "old")
    new = _file(tmp_path, "new")
    os.utime(old, (1000, 1000))
    os.utime(new, (2000, 2000))
    assert SortType.MTIME.compare(old, new, SortOption()) < 0
    assert SortType.MTIME.compare(new, old, SortOption()) > 0


def test_mtime_missing_files_equal(tmp_path):
    assert SortType.MTIME.compare(tmp_path / "nope1", tmp_path / "nope2", SortOption()) == 0


def test_sort_natural_default(tmp_path):
    f10 = _file(tmp_path, "file10")
    f2 = _file(tmp_path, "file2")
    assert SortOption().sort([f10, f2]) == [f2, f10]


def test_sort_lexical_method(tmp_path):
    f10 = _file(tmp_path, "file10")
    f2 = _file(tmp_path, "file2")
    option = SortOption()
    option.set_sort_method(SortType.LEXICAL)
    assert option.sort([f2, f10]) == [f10, f2]


def test_sort_by_size_method(tmp_path):
    a = _file(tmp_path, "a", b"xxxxx")
    b = _file(tmp_path, "b", b"x")
    option = SortOption()
    assert option.sort([b, a]) == [a, b]
    option.set_sort_method(SortType.SIZE)
    assert option.sort([a, b]) == [b, a]


def test_directories_first(tmp_path):
    directory = tmp_path / "zdir"
    directory.mkdir()
    afile = _file(tmp_path, "afile")
    assert SortOption().sort([afile, directory]) == [directory, afile]
    assert SortOption(directories_first=False).sort([directory, afile]) == [afile, directory]


def test_reverse_inverts_order(tmp_path):
    paths = [_file(tmp_path, name) for name in ("c", "a", "b")]
    forward = SortOption().sort(paths)
    backward = SortOption(reverse=True).sort(paths)
    assert backward == list(reversed(forward))


def test_reverse_keeps_directories_first(tmp_path):
    directory = tmp_path / "adir"
    directory.mkdir()
    zfile = _file(tmp_path, "zfile")
    assert SortOption(reverse=True).sort([zfile, directory]) == [directory, zfile]