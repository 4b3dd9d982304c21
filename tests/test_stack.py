import pytest

from pushswap.stack import PushSwap, find_max, find_min, is_sorted


def test_initial_state():
    s = PushSwap([3, 1, 2])
    assert list(s.a) == [3, 1, 2]
    assert list(s.b) == []
    assert s.moves == []


def test_sa_swaps_top_two():
    s = PushSwap([1, 2, 3])
    s.sa()
    assert list(s.a) == [2, 1, 3]
    assert s.moves == ["sa"]


def test_sa_on_single_element_is_noop():
    s = PushSwap([7])
    s.sa()
    assert list(s.a) == [7]


def test_pb_then_pa_round_trip():
    s = PushSwap([1, 2, 3])
    s.pb()
    s.pb()
    assert list(s.a) == [3]
    assert list(s.b) == [2, 1]
    s.pa()
    s.pa()
    assert list(s.a) == [1, 2, 3]
    assert list(s.b) == []
    assert s.moves == ["pb", "pb", "pa", "pa"]


def test_pa_with_empty_b_is_noop():
    s = PushSwap([1, 2])
    s.pa()
    assert list(s.a) == [1, 2]
    assert list(s.b) == []


def test_sb_swaps_b():
    s = PushSwap([1, 2, 3])
    s.pb()
    s.pb()
    s.sb()
    assert list(s.b) == [1, 2]


def test_ra_moves_top_to_bottom():
    s = PushSwap([1, 2, 3])
    s.ra()
    assert list(s.a) == [2, 3, 1]


def test_rra_moves_bottom_to_top():
    s = PushSwap([1, 2, 3])
    s.rra()
    assert list(s.a) == [3, 1, 2]


def test_ra_then_rra_restores():
    values = [5, -4, 9, 0]
    s = PushSwap(values)
    s.ra()
    s.rra()
    assert list(s.a) == values


def test_rr_and_rrr_affect_both_stacks():
    s = PushSwap([1, 2, 3, 4, 5])
    s.pb()
    s.pb()
    s.pb()
    s.rr()
    assert list(s.a) == [5, 4]
    assert list(s.b) == [2, 1, 3]
    s.rrr()
    assert list(s.a) == [4, 5]
    assert list(s.b) == [3, 2, 1]
    assert s.moves[-2:] == ["rr", "rrr"]


def test_rb_and_rrb():
    s = PushSwap([1, 2, 3])
    s.pb()
    s.pb()
    s.pb()
    s.rb()
    assert list(s.b) == [2, 1, 3]
    s.rrb()
    assert list(s.b) == [3, 2, 1]


def test_echo_prints_each_operation(capsys):
    s = PushSwap([2, 1], echo=True)
    s.sa()
    s.ra()
    assert capsys.readouterr().out == "sa\nra\n"


def test_no_echo_prints_nothing(capsys):
    s = PushSwap([2, 1])
    s.sa()
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "values, expected",
    [([], True), ([1], True), ([1, 2, 3], True), ([2, 1], False), ([1, 3, 2], False)],
)
def test_is_sorted(values, expected):
    assert is_sorted(values) is expected


def test_find_min_and_max():
    values = [4, -7, 12, 0]
    assert find_min(values) == -7
    assert find_max(values) == 12


def test_find_min_max_empty():
    assert find_min([]) is None
    assert find_max([]) is None