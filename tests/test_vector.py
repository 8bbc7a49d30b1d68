import pytest

from localkit.vector import Vector


def test_default_capacity():
    vec = Vector()
    assert vec.capacity == 20
    assert vec.is_empty()


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        Vector(0)


def test_push_back_and_front_order():
    vec = Vector()
    vec.push_back("b")
    vec.push_back("c")
    vec.push_front("a")
    assert list(vec) == ["a", "b", "c"]
    assert len(vec) == 3


def test_grows_when_full():
    vec = Vector(2)
    vec.push_back(1)
    vec.push_back(2)
    assert vec.capacity == 2
    vec.push_back(3)
    assert vec.capacity == 2 + 20
    assert list(vec) == [1, 2, 3]


def test_push_none_makes_zeroed_buffer():
    vec = Vector(elem_size=4)
    vec.push_back(None)
    assert vec.peek_back() == bytearray(4)


def test_peek_and_pop():
    vec = Vector()
    for item in ["x", "y", "z"]:
        vec.push_back(item)
    assert vec.peek_front() == "x"
    assert vec.peek_back() == "z"
    assert vec.pop_front() == "x"
    assert vec.pop_back() == "z"
    assert list(vec) == ["y"]


def test_empty_peek_and_pop_return_none():
    vec = Vector()
    assert vec.peek_front() is None
    assert vec.peek_back() is None
    assert vec.pop_front() is None
    assert vec.pop_back() is None


def test_remove_with_comparator():
    vec = Vector()
    for item in [1, 2, 3, 2]:
        vec.push_back(item)
    assert vec.remove(2, lambda a, b: a == b) == 2
    assert list(vec) == [1, 3, 2]
    assert len(vec) == 3


def test_remove_missing_returns_none():
    vec = Vector()
    vec.push_back(1)
    assert vec.remove(9, lambda a, b: a == b) is None
    assert list(vec) == [1]


def test_at_and_in_bound():
    vec = Vector()
    vec.push_back("first")
    assert vec.in_bound(0)
    assert not vec.in_bound(1)
    assert vec.at(0) == "first"
    with pytest.raises(IndexError):
        vec.at(1)


def test_clear_releases_capacity():
    vec = Vector()
    vec.push_back(1)
    vec.clear()
    assert len(vec) == 0
    assert vec.capacity == 0
    vec.push_back(2)
    assert list(vec) == [2]
    assert vec.capacity >= 1


def test_extend_capacity():
    vec = Vector(5)
    vec.extend_capacity(7)
    assert vec.capacity == 12


def test_apply_visits_in_order():
    vec = Vector()
    for item in [3, 1, 2]:
        vec.push_back(item)
    seen = []
    vec.apply(seen.append)
    assert seen == [3, 1, 2]


def test_meta_info_output(capsys):
    vec = Vector(5, 8)
    vec.push_back(1)
    vec.meta_info()
    out = capsys.readouterr().out
    assert "Vector Size: \x1b[1m1\n" in out
    assert "Vector Capacity: \x1b[1m5\n" in out
    assert "Vector's Element Size: \x1b[1m8\n" in out