import math

import pytest

from prettyterm.textutil import (
    RANDOM_STRINGS,
    add_title_to_line,
    add_title_to_line_center,
    center_text,
    clear_code,
    get_string_max_width,
    map_range_to_range,
    percentage,
    percentage_round,
    remove_and_count_prefix,
    return_longest_line,
    runs_in_ci,
    string_width,
    with_boolean,
)


def test_center_text_cases():
    assert center_text("Hello Wolrd\n!!!", 15) == "  Hello Wolrd  \n      !!!      "
    assert center_text("Hello Wolrd\n!!!", 5) == "Hello\n Wolr\n  d  \n !!! "


def test_center_text_auto_width():
    assert center_text("ab\nabcd", 0) == " ab \nabcd"


@pytest.mark.parametrize(
    "args",
    [
        (0, 100, 0, 255, 50),
        (0, 400, 0, 255, 200),
        (-200, 200, 0, 255, 0),
        (0, 200.123, 0, 254.3, 100),
    ],
)
def test_map_range_to_range_cases(args):
    assert map_range_to_range(*args) == 127


def test_map_range_to_range_empty_span():
    assert map_range_to_range(5, 5, 0, 255, 5) == 0


@pytest.mark.parametrize(
    "total, current, want",
    [(100, 50, 50), (200, 100, 50), (500, 250, 50), (500, 100, 20)],
)
def test_percentage_cases(total, current, want):
    assert percentage(total, current) == want


@pytest.mark.parametrize(
    "total, current, want",
    [(100, 50, 50), (200, 100, 50), (500, 250, 50), (500, 100, 20)],
)
def test_percentage_round_cases(total, current, want):
    assert percentage_round(total, current) == want


def test_percentage_round_half_away_from_zero():
    assert percentage_round(8, 1) == 13
    assert percentage_round(200, 1) == 1


def test_percentage_zero_total():
    assert math.isnan(percentage(0, 0))
    assert percentage(0, 5) == math.inf


def test_clear_code_removes_escape_sequences():
    assert clear_code("\x1b[31mred\x1b[0m") == "red"
    assert clear_code("\x1b[1;31;44mx\x1b[0m") == "x"


@pytest.mark.parametrize("text", RANDOM_STRINGS)
def test_clear_code_leaves_plain_text(text):
    assert clear_code(text) == text


def test_string_width():
    assert string_width("hello") == 5
    assert string_width("世界") == 4
    assert string_width("\rab") == 2


def test_get_string_max_width():
    assert get_string_max_width("a\nabc\n") == 3
    assert get_string_max_width("\x1b[31mabcd\x1b[0m\nab") == 4
    assert get_string_max_width("") == 0


def test_return_longest_line():
    assert return_longest_line("a\nbbb\ncc", "\n") == "bbb"
    assert return_longest_line("ab\ncd", "\n") == "ab"
    assert return_longest_line("x,\x1b[31myyy\x1b[0m", ",") == "\x1b[31myyy\x1b[0m"


def test_remove_and_count_prefix():
    assert remove_and_count_prefix("  hello", " ") == ("hello", 2)
    assert remove_and_count_prefix("--x", "-") == ("x", 2)
    assert remove_and_count_prefix("abc", "-") == ("abc", 0)


def test_add_title_to_line():
    left = add_title_to_line("T", "-", 10, True)
    right = add_title_to_line("T", "-", 10, False)
    assert left == "- T ------"
    assert right == "------ T -"
    assert len(left) == len(right) == 10


def test_add_title_to_line_center():
    result = add_title_to_line_center("T", "-", 10)
    assert result == "--- T ----"
    assert len(result) == 10


def test_add_title_too_long_raises():
    with pytest.raises(ValueError):
        add_title_to_line("long title", "-", 3, True)
    with pytest.raises(ValueError):
        add_title_to_line_center("long title", "-", 3)


def test_runs_in_ci(monkeypatch):
    monkeypatch.setenv("CI", "true")
    assert runs_in_ci() is True
    monkeypatch.setenv("CI", "")
    assert runs_in_ci() is False
    monkeypatch.delenv("CI")
    assert runs_in_ci() is False


def test_with_boolean():
    assert with_boolean([]) is True
    assert with_boolean([False]) is False
    assert with_boolean([True, False]) is True