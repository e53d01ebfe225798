import pytest

from pushswap.stacks import Element, Stacks


def make(a_vals, b_vals=()):
    return Stacks((Element(v) for v in a_vals), (Element(v) for v in b_vals))


def test_from_values_keeps_order_and_empty_b():
    stacks = Stacks.from_values([3, 1, 2])
    assert stacks.a_values() == [3, 1, 2]
    assert stacks.b_values() == []
    assert stacks.operations == []


def test_sa_swaps_top_two():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.sa()
    assert stacks.a_values() == [2, 1, 3]
    assert stacks.operations == ["sa"]


def test_sa_without_record():
    stacks = Stacks.from_values([1, 2])
    stacks.sa(False)
    assert stacks.a_values() == [2, 1]
    assert stacks.operations == []


def test_sa_single_element_is_noop():
    stacks = Stacks.from_values([5])
    stacks.sa()
    assert stacks.a_values() == [5]
    assert stacks.operations == []


def test_sb_swaps_b():
    stacks = make([], [4, 5, 6])
    stacks.sb()
    assert stacks.b_values() == [5, 4, 6]
    assert stacks.operations == ["sb"]


def test_ss_always_recorded():
    stacks = make([], [])
    stacks.ss()
    assert stacks.operations == ["ss"]


def test_ss_swaps_both():
    stacks = make([1, 2], [3, 4])
    stacks.ss()
    assert stacks.a_values() == [2, 1]
    assert stacks.b_values() == [4, 3]


def test_pb_then_pa_round_trip():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.pb()
    assert stacks.a_values() == [2, 3]
    assert stacks.b_values() == [1]
    stacks.pa()
    assert stacks.a_values() == [1, 2, 3]
    assert stacks.b_values() == []
    assert stacks.operations == ["pb", "pa"]


def test_pa_from_empty_b_is_noop():
    stacks = Stacks.from_values([1])
    stacks.pa()
    assert stacks.a_values() == [1]
    assert stacks.operations == []


def test_pb_from_empty_a_is_noop():
    stacks = make([], [7])
    stacks.pb()
    assert stacks.b_values() == [7]
    assert stacks.operations == []


def test_ra_moves_top_to_bottom():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.ra()
    assert stacks.a_values() == [2, 3, 1]
    assert stacks.operations == ["ra"]


def test_rra_moves_bottom_to_top():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.rra()
    assert stacks.a_values() == [3, 1, 2]
    assert stacks.operations == ["rra"]


@pytest.mark.parametrize("values", [[1, 2], [4, 9, 2, 7], [5, 3, 8, 1, 6]])
def test_ra_rra_inverse(values):
    stacks = Stacks.from_values(values)
    stacks.ra()
    stacks.rra()
    assert stacks.a_values() == values


def test_rb_rrb_inverse():
    stacks = make([], [1, 2, 3, 4])
    stacks.rb()
    stacks.rrb()
    assert stacks.b_values() == [1, 2, 3, 4]
    assert stacks.operations == ["rb", "rrb"]


def test_rotate_single_is_noop():
    stacks = make([1], [2])
    stacks.ra()
    stacks.rb()
    stacks.rra()
    stacks.rrb()
    assert stacks.operations == []


def test_rr_and_rrr():
    stacks = make([1, 2, 3], [4, 5, 6])
    stacks.rr()
    assert stacks.a_values() == [2, 3, 1]
    assert stacks.b_values() == [5, 6, 4]
    stacks.rrr()
    assert stacks.a_values() == [1, 2, 3]
    assert stacks.b_values() == [4, 5, 6]
    assert stacks.operations == ["rr", "rrr"]


def test_full_rotation_restores_stack():
    values = [8, 3, 6, 1]
    stacks = Stacks.from_values(values)
    for _ in values:
        stacks.ra(False)
    assert stacks.a_values() == values


def test_operations_preserve_multiset():
    values = [5, 2, 9, 1, 7]
    stacks = Stacks.from_values(values)
    for op in (stacks.pb, stacks.pb, stacks.ss, stacks.rr, stacks.rrr, stacks.pa):
        op()
    assert sorted(stacks.a_values() + stacks.b_values()) == sorted(values)