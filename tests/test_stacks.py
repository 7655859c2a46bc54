import pytest

from pushswap.stacks import Stacks, is_sorted


VALUES = [5, 3, 9, 1, 7]


def test_is_sorted_true_for_ascending():
    assert is_sorted(sorted(VALUES))


def test_is_sorted_false_for_unsorted():
    assert not is_sorted(VALUES)


def test_is_sorted_short_sequences():
    assert is_sorted([])
    assert is_sorted([4])


def test_is_sorted_allows_equal_neighbours():
    assert is_sorted([2, 2, 3])


def test_sa_swaps_top_two():
    s = Stacks(VALUES)
    assert s.sa()
    assert list(s.a) == [VALUES[1], VALUES[0], *VALUES[2:]]


def test_sa_twice_is_identity():
    s = Stacks(VALUES)
    s.sa()
    s.sa()
    assert list(s.a) == VALUES


def test_sa_needs_two_values():
    s = Stacks([1], record=True)
    assert not s.sa()
    assert list(s.a) == [1]
    assert s.operations == []


def test_pb_then_pa_restores():
    s = Stacks(VALUES)
    assert s.pb()
    assert list(s.b) == [VALUES[0]]
    assert list(s.a) == VALUES[1:]
    assert s.pa()
    assert list(s.a) == VALUES
    assert len(s.b) == 0


def test_push_from_empty_fails():
    s = Stacks(VALUES)
    assert not s.pa()
    assert list(s.a) == VALUES


def test_ra_moves_top_to_bottom():
    s = Stacks(VALUES)
    assert s.ra()
    assert list(s.a) == VALUES[1:] + VALUES[:1]


def test_rra_moves_bottom_to_top():
    s = Stacks(VALUES)
    assert s.rra()
    assert list(s.a) == VALUES[-1:] + VALUES[:-1]


def test_ra_then_rra_is_identity():
    s = Stacks(VALUES)
    s.ra()
    s.rra()
    assert list(s.a) == VALUES


def test_full_rotation_is_identity():
    s = Stacks(VALUES)
    for _ in VALUES:
        s.ra()
    assert list(s.a) == VALUES


def test_rotate_empty_fails():
    s = Stacks()
    assert not s.ra()
    assert not s.rra()


def test_ss_requires_both_stacks():
    s = Stacks(VALUES, record=True)
    assert not s.ss()
    # a was swapped even though b could not be
    assert list(s.a) == [VALUES[1], VALUES[0], *VALUES[2:]]
    assert s.operations == []


def test_ss_swaps_both():
    s = Stacks(VALUES)
    s.pb()
    s.pb()
    before_a, before_b = list(s.a), list(s.b)
    assert s.ss()
    assert list(s.a) == [before_a[1], before_a[0], *before_a[2:]]
    assert list(s.b) == [before_b[1], before_b[0]]


def test_rr_with_empty_b_fails_after_rotating_a():
    s = Stacks(VALUES)
    assert not s.rr()
    assert list(s.a) == VALUES[1:] + VALUES[:1]


def test_rrr_always_succeeds():
    s = Stacks(VALUES, record=True)
    assert s.rrr()
    assert list(s.a) == VALUES[-1:] + VALUES[:-1]
    assert s.operations == ["rrr"]


def test_rb_and_rrb_are_inverse():
    s = Stacks(VALUES)
    for _ in range(3):
        s.pb()
    before = list(s.b)
    s.rb()
    s.rrb()
    assert list(s.b) == before


def test_sb_swaps_b():
    s = Stacks(VALUES)
    s.pb()
    s.pb()
    before = list(s.b)
    assert s.sb()
    assert list(s.b) == before[::-1]


def test_recording_lists_operation_names():
    s = Stacks(VALUES, record=True)
    s.pb()
    s.pb()
    s.sa()
    s.rr()
    s.rra()
    s.pa()
    assert s.operations == ["pb", "pb", "sa", "rr", "rra", "pa"]


def test_no_recording_by_default():
    s = Stacks(VALUES)
    s.sa()
    assert s.operations == []


@pytest.mark.parametrize("op", ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"])
def test_operations_keep_the_multiset(op):
    s = Stacks(VALUES)
    s.pb()
    s.pb()
    getattr(s, op)()
    assert sorted(list(s.a) + list(s.b)) == sorted(VALUES)