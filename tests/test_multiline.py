import pytest

from joshu.multiline import LineInfo, MultilineText
from joshu.textwidth import display_width


def test_short_text_is_a_single_line():
    text = "hello"
    multi = MultilineText(text, 20)
    assert list(multi) == [LineInfo(0, len(text), 5)]
    assert multi.height() == 1
    assert multi.line_strings() == [text]


def test_text_as_wide_as_area_wraps():
    multi = MultilineText("abc", 3)
    assert multi.line_strings() == ["ab", "c"]


@pytest.mark.parametrize(
    "text, width",
    [
        ("the quick brown fox jumps over the lazy dog", 7),
        ("abcdef", 3),
        ("🌕🌕🌕🌕a🌕", 4),
        ("r͂o͒͜w̾ and more text here", 5),
    ],
)
def test_lines_rejoin_to_text_and_fit(text, width):
    multi = MultilineText(text, width)
    assert "".join(multi.line_strings()) == text
    for line in multi:
        assert line.width < width
        assert display_width(text[line.start:line.end]) == line.width


def test_lines_are_contiguous():
    text = "x" * 50
    multi = MultilineText(text, 8)
    lines = list(multi)
    assert lines[0].start == 0
    assert lines[-1].end == len(text)
    for before, after in zip(lines, lines[1:]):
        assert before.end == after.start


def test_height_matches_len_when_last_line_not_full():
    multi = MultilineText("y" * 30, 6)
    assert multi.height() == len(multi)
    assert len(multi) == len(multi.line_strings())


def test_height_adds_row_when_last_line_full():
    multi = MultilineText("", 0)
    assert len(multi) == 1
    assert multi.height() == len(multi) + 1