import pytest

from adventsolver.y2022_day20 import WrappedList, parse_wrapped_list

SAMPLE = "1\n2\n-3\n3\n-2\n0\n4"


def test_describe():
    assert parse_wrapped_list(SAMPLE).describe() == "1, 2, -3, 3, -2, 0, 4"


@pytest.mark.parametrize(
    "index, delta, expected",
    [(0, 1, 1), (0, 2, 2), (1, -3, 4), (2, 3, 5), (2, -2, 6), (3, 0, 3), (5, 4, 3)],
)
def test_new_index(index, delta, expected):
    assert parse_wrapped_list(SAMPLE).new_index(index, delta) == expected


@pytest.mark.parametrize(
    "text, index, delta, expected",
    [
        ("1\n2\n-3\n3\n-2\n0\n4", 0, 1, "2, 1, -3, 3, -2, 0, 4"),
        ("2\n1\n-3\n3\n-2\n0\n4", 0, 2, "1, -3, 2, 3, -2, 0, 4"),
        ("1\n-3\n2\n3\n-2\n0\n4", 1, -3, "1, 2, 3, -2, -3, 0, 4"),
        ("1\n2\n3\n-2\n-3\n0\n4", 2, 3, "1, 2, -2, -3, 0, 3, 4"),
        ("1\n2\n-2\n-3\n0\n3\n4", 2, -2, "1, 2, -3, 0, 3, 4, -2"),
        ("1\n2\n-3\n0\n3\n4\n-2", 3, 0, "1, 2, -3, 0, 3, 4, -2"),
        ("1\n2\n-3\n0\n3\n4\n-2", 5, 4, "1, 2, -3, 4, 0, 3, -2"),
    ],
)
def test_move(text, index, delta, expected):
    wl = parse_wrapped_list(text)
    wl.move(index, delta)
    assert wl.describe() == expected


def test_move_returns_new_index():
    wl = parse_wrapped_list(SAMPLE)
    assert wl.move(0, 1) == 1


def test_mix():
    wl = parse_wrapped_list(SAMPLE)
    wl.mix()
    assert wl.describe() == "1, 2, -3, 4, 0, 3, -2"


def test_mix_keeps_elements():
    wl = parse_wrapped_list(SAMPLE)
    wl.mix()
    assert sorted(wl.values) == sorted([1, 2, -3, 3, -2, 0, 4])


def test_coordinates():
    wl = parse_wrapped_list("1\n2\n-3\n4\n0\n3\n-2")
    assert wl.coordinates() == (4, -3, 2)


def test_coordinates_without_zero():
    with pytest.raises(ValueError):
        WrappedList([1, 2, 3]).coordinates()


def test_parse_invalid_line():
    with pytest.raises(ValueError):
        parse_wrapped_list("1\nabc")