import pytest

from innex.wordtype import word_type


@pytest.mark.parametrize("char", ["a", "Z", "中", "é"])
def test_letters_are_alpha(char):
    assert word_type(char) == "alpha"


@pytest.mark.parametrize("char", ["0", "5", "٣", "½"])
def test_numerals_are_num(char):
    assert word_type(char) == "num"


@pytest.mark.parametrize("char", [" ", "+", "\t", "，", "_"])
def test_everything_else_is_other(char):
    assert word_type(char) == "other"


@pytest.mark.parametrize("bad", ["", "ab", "12"])
def test_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        word_type(bad)


def test_same_type_for_same_category():
    assert word_type("x") == word_type("y")
    assert word_type("x") != word_type("1") or False
    assert word_type("1") == word_type("9")