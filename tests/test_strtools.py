import pytest

from cutil.strtools import (
    NPOS,
    concat,
    conditional,
    ends_with,
    find,
    remove_prefix,
    remove_suffix,
    replace,
    rfind,
    starts_with,
    substr,
    to_string,
)

STR1 = "hello"
STR2 = concat(STR1, " ", "world")


def test_concat():
    assert STR2 == "hello world"


def test_conditional():
    assert conditional(True, "a", "b") == "a"
    assert conditional(False, "a", "b") == "b"


def test_starts_and_ends_with():
    assert starts_with(STR2, "hello")
    assert not starts_with(STR2, "hello!")
    assert ends_with(STR2, "world")
    assert not ends_with(STR2, "hello!")


def test_substr():
    assert substr(STR2, 1, 9) == "ello worl"
    assert substr(STR2, 6) == "world"


def test_substr_out_of_range():
    with pytest.raises(IndexError):
        substr(STR2, 5, 100)


def test_find():
    assert find(STR2, "o") == 4
    assert find(STR2, "o", 5) == 7
    assert find(STR2, "!") == NPOS


def test_rfind():
    assert rfind(STR2, "o") == 7
    assert rfind(STR2, "o", 5) == 4
    assert rfind(STR2, "!") == NPOS


def test_remove_prefix_and_suffix():
    assert remove_prefix(STR2, "hello ") == "world"
    assert remove_suffix(STR2, " world") == "hello"
    assert remove_prefix(STR2, "world") == STR2
    assert remove_suffix(STR2, "hello") == STR2


def test_remove_empty_suffix_keeps_text():
    assert remove_suffix(STR2, "") == STR2


def test_replace():
    assert replace(STR2, " ", "___") == "hello___world"


def test_replace_from_index():
    text = "a.b.c"
    assert replace(text, ".", "-", 2) == "a.b-c"


def test_replace_new_contains_old():
    assert replace("ab", "a", "aa") == "aab"


def test_replace_empty_old():
    with pytest.raises(ValueError):
        replace(STR2, "", "x")


@pytest.mark.parametrize(("number", "text"), [(65536, "65536"), (0, "0"), (-65536, "-65536")])
def test_to_string(number, text):
    assert to_string(number) == text


def test_to_string_rejects_float():
    with pytest.raises(TypeError):
        to_string(1.5)