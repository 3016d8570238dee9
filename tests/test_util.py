import pytest

from esmodel.util import get_value_by_path, set_value_by_path, split_path


def test_split_path():
    assert split_path("a.b.c") == ["a", "b", "c"]
    assert split_path(["a", "b.c"]) == ["a", "b.c"]
    assert split_path("a/b", delimiter="/") == ["a", "b"]
    with pytest.raises(ValueError):
        split_path("")
    with pytest.raises(ValueError):
        split_path([])


def test_get_value_by_path():
    data = {"a": {"b": {"c": 1}, "x": "leaf"}}
    assert get_value_by_path(data, "a.b.c") == 1
    assert get_value_by_path(data, ["a", "b"]) == {"c": 1}
    assert get_value_by_path(data, "a.b.d") is None
    assert get_value_by_path(data, "a.x.y") is None
    assert get_value_by_path(None, "a") is None


def test_set_value_by_path():
    data = {"a": {"b": 1}}
    result = set_value_by_path(data, "a.c.d", 2)
    assert result == {"a": {"b": 1, "c": {"d": 2}}}
    # the input is not changed
    assert data == {"a": {"b": 1}}
    assert set_value_by_path(None, ["x"], 1) == {"x": 1}
    # a leaf on the way is replaced by a new level
    assert set_value_by_path({"a": "leaf"}, "a.b", 3) == {"a": {"b": 3}}
    assert set_value_by_path({"a": {"b": 1}}, "a", 4) == {"a": 4}
