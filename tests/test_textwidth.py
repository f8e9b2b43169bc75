import pytest

from joshu.textwidth import display_width, truncate

ZALGO = "r\u0342o\u0352\u035cw\u033e"


def test_truncate_correct_despite_several_multibyte_chars():
    assert truncate(ZALGO, 2) == "r\u0342o\u0352\u035c"


def test_truncate_at_end_returns_complete_string():
    assert truncate(ZALGO, 3) == ZALGO


def test_truncate_behind_end_returns_complete_string():
    assert truncate(ZALGO, 4) == ZALGO


def test_truncate_at_zero_returns_empty_string():
    assert truncate(ZALGO, 0) == ""


def test_truncate_correct_despite_fullwidth_character():
    assert truncate("a🌕bc", 4) == "a🌕b"


def test_truncate_within_fullwidth_character_truncates_before_the_character():
    assert truncate("a🌕", 2) == "a"


def test_display_width_combining_and_wide():
    assert display_width(ZALGO) == 3
    assert display_width("a🌕bc") == 5


@pytest.mark.parametrize("text", ["hello world", ZALGO, "a🌕bc", "🌕🌕🌕", ""])
@pytest.mark.parametrize("width", range(0, 8))
def test_truncate_invariants(text, width):
    result = truncate(text, width)
    assert display_width(result) <= max(width, display_width(text) if display_width(text) <= width else width)
    assert text.startswith(result)