import pytest

from pushswap.stacks import Stacks

NUMS = [5, 9, -3, 12, 0]


def test_initial_state():
    stacks = Stacks(NUMS)
    assert list(stacks.a) == NUMS
    assert list(stacks.b) == []
    assert stacks.moves == []


def test_sa_swaps_top_two():
    stacks = Stacks(NUMS)
    stacks.sa()
    assert list(stacks.a) == [NUMS[1], NUMS[0]] + NUMS[2:]
    assert stacks.moves == ["sa"]


def test_sa_twice_restores():
    stacks = Stacks(NUMS)
    stacks.sa()
    stacks.sa()
    assert list(stacks.a) == NUMS
    assert stacks.moves == ["sa", "sa"]


def test_sa_on_single_element_is_recorded_but_harmless():
    stacks = Stacks([7])
    stacks.sa()
    assert list(stacks.a) == [7]
    assert stacks.moves == ["sa"]


def test_pb_moves_top_to_b():
    stacks = Stacks(NUMS)
    stacks.pb()
    stacks.pb()
    assert list(stacks.a) == NUMS[2:]
    assert list(stacks.b) == [NUMS[1], NUMS[0]]
    assert stacks.moves == ["pb", "pb"]


def test_pb_then_pa_restores():
    stacks = Stacks(NUMS)
    stacks.pb()
    stacks.pa()
    assert list(stacks.a) == NUMS
    assert list(stacks.b) == []
    assert stacks.moves == ["pb", "pa"]


def test_pa_from_empty_b_raises():
    stacks = Stacks(NUMS)
    with pytest.raises(IndexError):
        stacks.pa()


def test_pb_from_empty_a_raises():
    stacks = Stacks([])
    with pytest.raises(IndexError):
        stacks.pb()


def test_ra_moves_top_to_bottom():
    stacks = Stacks(NUMS)
    stacks.ra()
    assert list(stacks.a) == NUMS[1:] + NUMS[:1]
    assert stacks.moves == ["ra"]


def test_rra_moves_bottom_to_top():
    stacks = Stacks(NUMS)
    stacks.rra()
    assert list(stacks.a) == NUMS[-1:] + NUMS[:-1]
    assert stacks.moves == ["rra"]


def test_ra_then_rra_restores():
    stacks = Stacks(NUMS)
    stacks.ra()
    stacks.rra()
    assert list(stacks.a) == NUMS


def test_full_rotation_restores():
    stacks = Stacks(NUMS)
    for _ in NUMS:
        stacks.ra()
    assert list(stacks.a) == NUMS
    assert len(stacks.moves) == len(NUMS)


def test_rb_and_rrb_on_b():
    stacks = Stacks(NUMS)
    for _ in range(3):
        stacks.pb()
    before = list(stacks.b)
    stacks.rb()
    assert list(stacks.b) == before[1:] + before[:1]
    stacks.rrb()
    assert list(stacks.b) == before
    assert stacks.moves[-2:] == ["rb", "rrb"]


def test_ss_swaps_both():
    stacks = Stacks(NUMS)
    stacks.pb()
    stacks.pb()
    a_before, b_before = list(stacks.a), list(stacks.b)
    stacks.ss()
    assert list(stacks.a) == [a_before[1], a_before[0]] + a_before[2:]
    assert list(stacks.b) == [b_before[1], b_before[0]]
    assert stacks.moves[-1] == "ss"


def test_rr_and_rrr_rotate_both():
    stacks = Stacks(NUMS)
    stacks.pb()
    stacks.pb()
    a_before, b_before = list(stacks.a), list(stacks.b)
    stacks.rr()
    assert list(stacks.a) == a_before[1:] + a_before[:1]
    assert list(stacks.b) == b_before[1:] + b_before[:1]
    stacks.rrr()
    assert list(stacks.a) == a_before
    assert list(stacks.b) == b_before
    assert stacks.moves[-2:] == ["rr", "rrr"]


def test_operations_preserve_elements():
    stacks = Stacks(NUMS)
    for op in (stacks.pb, stacks.ra, stacks.pb, stacks.ss, stacks.rrr, stacks.pa, stacks.rr):
        op()
    assert sorted(list(stacks.a) + list(stacks.b)) == sorted(NUMS)
    assert len(stacks.moves) == 7