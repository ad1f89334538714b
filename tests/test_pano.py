import pytest

from innex.pano import Pano


def test_members_in_declared_order():
    names = [Pano(member.value).name for member in Pano]
    assert names == ["PREV", "AT", "NEXT", "ON"]


def test_lookup_by_value_round_trips():
    for member in Pano:
        assert Pano(member.value) is member


def test_lookup_by_name():
    assert Pano(Pano["ON"].value) is Pano.ON
    assert Pano(Pano["PREV"].value) is Pano.PREV


def test_members_are_distinct():
    values = [member.value for member in Pano]
    assert len({Pano(value) for value in values}) == 4


def test_unknown_value_is_rejected():
    values = {member.value for member in Pano}
    missing = object()
    assert missing not in values
    with pytest.raises(ValueError):
        Pano(missing)