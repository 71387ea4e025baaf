import pytest

from silkengine.text import TEXT_COLORS, Characters, CharactersPattern


def make(text, size=3):
    chars = Characters()
    chars.set_characters(text, size)
    return chars


def test_defaults():
    chars = Characters()
    assert chars.rows == 1
    assert chars.width() == 0
    assert chars.size == 3


def test_width_scales_with_length_and_size():
    assert make("abc").width() == 3 * make("a").width()
    assert make("ab", size=2).width() * 3 == make("ab", size=3).width() * 2


def test_height_counts_lines():
    assert make("a\nb\nc").height() == 3 * make("a").height()
    assert make("a\nb").rows == 2


def test_width_is_the_widest_line():
    assert make("ab\ncdef\ng").width() == make("cdef").width()


def test_colour_codes_take_no_width():
    assert make("$aab").width() == make("ab").width()
    assert make("$zab").width() == make("ab").width()


def test_trailing_dollar_counts():
    assert make("ab$").width() == make("abc").width()


def test_layout_left_alignment():
    chars = make("ab\ncdef", size=1)
    runs = chars.layout(10, 20, CharactersPattern.LEFT)
    assert [r.text for r in runs] == ["ab", "cdef"]
    assert [r.x for r in runs] == [10, 10]
    assert runs[1].y - runs[0].y == 6


def test_layout_right_alignment_puts_line_ends_together():
    chars = make("ab\ncdef", size=1)
    runs = chars.layout(0, 0, CharactersPattern.RIGHT)
    ends = [r.x + len(r.text) * 3 for r in runs]
    assert ends[0] == ends[1] == chars.width()


@pytest.mark.parametrize("pattern", list(CharactersPattern))
def test_widest_line_starts_at_origin(pattern):
    chars = make("abcd", size=2)
    runs = chars.layout(5.7, 0, pattern)
    assert runs[0].x == 5


def test_middle_alignment_centres_short_line():
    chars = make("abcd\nab", size=1)
    runs = chars.layout(0, 0, CharactersPattern.MIDDLE)
    left_gap = runs[1].x
    right_gap = chars.width() - (runs[1].x + len(runs[1].text) * 3)
    assert left_gap == right_gap


def test_colour_code_sets_run_colour():
    runs = make("$aHi").layout(0, 0)
    assert runs[0].text == "Hi"
    assert runs[0].color == TEXT_COLORS["$a"]
    assert make("plain").layout(0, 0)[0].color == TEXT_COLORS["$4"]


def test_unknown_code_keeps_following_character():
    runs = make("$zq").layout(0, 0)
    assert runs[0].text == "zq"


def test_colour_carries_to_later_lines():
    runs = make("$ea\nb").layout(0, 0)
    assert [r.color for r in runs] == [TEXT_COLORS["$e"]] * 2


def test_empty_text_has_one_empty_run():
    runs = make("").layout(3, 4)
    assert len(runs) == 1
    assert runs[0].text == ""