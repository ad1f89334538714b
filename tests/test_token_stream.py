import pytest

from innex.pano import Pano
from innex.token_stream import TokenStream


@pytest.fixture
def stream(tmp_path):
    path = tmp_path / "stream.txt"
    path.write_text("ab c\nde\n", encoding="utf-8")
    s = TokenStream()
    s.load_file(str(path))
    return s


def test_initial_state():
    s = TokenStream()
    assert s.pn is Pano.ON
    assert s.at == 0
    assert s.get_token() is None


def test_load_file_yields_characters(stream):
    assert stream.tokens == list("ab cde")
    assert stream.get_token() == "a"


def test_move_forward_and_clamp(stream):
    stream.move_to(2)
    assert stream.get_token() == " "
    stream.move_to(100)
    assert stream.at == len(stream.tokens) - 1
    assert stream.get_token() == "e"


def test_move_backward_and_clamp(stream):
    stream.move_to(4)
    stream.topano(Pano.PREV)
    assert stream.pn is Pano.PREV
    stream.move_to(1)
    assert stream.get_token() == "c"
    stream.move_to(100)
    assert stream.at == 0


def test_move_in_unsupported_direction(stream):
    stream.topano(Pano.AT)
    with pytest.raises(ValueError):
        stream.move_to(1)


def test_negative_offset(stream):
    with pytest.raises(ValueError):
        stream.move_to(-1)


def test_move_without_tokens():
    with pytest.raises(IndexError):
        TokenStream().move_to(1)


def test_load_appends(tmp_path):
    path = tmp_path / "x.txt"
    path.write_text("xy", encoding="utf-8")
    s = TokenStream()
    s.load_file(str(path))
    s.load_file(str(path))
    assert s.tokens == list("xyxy")