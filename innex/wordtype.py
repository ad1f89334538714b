"""Classification of single characters into coarse word types."""

ALPHA = "alpha"
NUM = "num"
OTHER = "other"


def word_type(word: str) -> str:
    """Return ``"alpha"``, ``"num"`` or ``"other"`` for a single character."""
    if len(word) != 1:
        raise ValueError(f"expected a single character, got {word!r}")
    if word.isalpha():
        return ALPHA
    if word.isnumeric():
        return NUM
    return OTHER