import pytest

from linkwork import algorithms as alg
from linkwork.nodes import Node, build


def _values(head):
    return list(head) if head is not None else []


def _last(head):
    while head.next is not None:
        head = head.next
    return head


def test_lists_equal():
    assert alg.lists_equal(build([1, 2, 3]), build([1, 2, 3])) is True
    assert alg.lists_equal(build([1, 2, 3]), build([1, 2, 4])) is False
    assert alg.lists_equal(build([1, 2]), build([1, 2, 3])) is False
    assert alg.lists_equal(None, None) is True


@pytest.mark.parametrize("values", [[], [5], [1, 2, 3, 4]])
def test_length(values):
    assert alg.length(build(values)) == len(values)


def test_advance():
    head = build([1, 2, 3])
    assert alg.advance(head, 2).value == 3
    assert alg.advance(head, 3) is None
    with pytest.raises(IndexError):
        alg.advance(head, 4)


def test_intersection_shared_tail():
    first = build([3, 5, 9, 11])
    second = build([4, 6])
    shared = alg.advance(first, 2)
    second.next.next = shared
    assert alg.intersection(first, second) is shared
    assert alg.intersection(second, first) is shared


def test_intersection_none():
    assert alg.intersection(build([1, 2]), build([1, 2])) is None


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
def test_remove_from_end(k):
    values = [10, 20, 30, 40, 50]
    head = alg.remove_from_end(build(values), k)
    expected = values[: len(values) - k] + values[len(values) - k + 1:]
    assert _values(head) == expected


def test_remove_from_end_out_of_range():
    with pytest.raises(IndexError):
        alg.remove_from_end(build([1, 2]), 3)
    with pytest.raises(IndexError):
        alg.remove_from_end(build([1, 2]), 0)


def test_merge_sorted():
    a, b = [3, 5, 9, 11], [4, 6, 8, 10]
    assert _values(alg.merge_sorted(build(a), build(b))) == sorted(a + b)


def test_merge_sorted_with_empty():
    assert _values(alg.merge_sorted(None, build([1, 2]))) == [1, 2]


def test_merge_sorted_prefers_first_on_ties():
    first = build([1])
    second = build([1])
    assert alg.merge_sorted(first, second) is first


def test_merge_k_sorted():
    lists = [[3, 5, 9, 11, 14, 15, 16], [4, 6, 8, 10], [1, 7, 12]]
    merged = alg.merge_k_sorted([build(v) for v in lists])
    assert _values(merged) == sorted(sum(lists, []))


def test_merge_k_sorted_empty():
    assert alg.merge_k_sorted([]) is None


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3], [1, 2, 3, 4, 5, 6]])
def test_middle(values):
    assert alg.middle(build(values)).value == values[len(values) // 2]


def test_middle_empty():
    assert alg.middle(None) is None


def test_source_cycle_example():
    values = [3, 5, 9, 11, 14, 15, 16]
    head = build(values)
    _last(head).next = alg.advance(head, 2)
    assert alg.has_cycle(head) is True
    alg.remove_cycle(head)
    assert alg.has_cycle(head) is False
    assert _values(head) == values


def test_remove_cycle_starting_at_head():
    values = [1, 2, 3, 4]
    head = build(values)
    _last(head).next = head
    alg.remove_cycle(head)
    assert alg.has_cycle(head) is False
    assert _values(head) == values


def test_remove_cycle_without_cycle():
    with pytest.raises(ValueError):
        alg.remove_cycle(build([1, 2, 3]))


def test_has_cycle_false_for_plain_list():
    assert alg.has_cycle(build([1, 2, 3])) is False
    assert alg.has_cycle(None) is False


def test_remove_duplicates():
    head = alg.remove_duplicates(build([1, 1, 2, 3, 3, 3, 4, 4]))
    assert _values(head) == [1, 2, 3, 4]


def test_remove_duplicates_only_adjacent():
    values = [1, 2, 1, 2]
    assert _values(alg.remove_duplicates(build(values))) == values


def test_reversed_values():
    values = [1, 2, 3, 4, 5, 6]
    assert alg.reversed_values(build(values)) == values[::-1]
    assert alg.reversed_values(None) == []


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5, 6]])
def test_reverse(values):
    assert _values(alg.reverse(build(values))) == values[::-1]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5, 6]])
def test_reverse_recursive(values):
    assert _values(alg.reverse_recursive(build(values))) == values[::-1]


def test_reverse_round_trip():
    values = [7, 3, 9, 1]
    assert _values(alg.reverse(alg.reverse_recursive(build(values)))) == values


def test_reverse_in_groups_source_example():
    head = alg.reverse_in_groups(build([1, 2, 3, 4, 5, 6]), 2)
    assert _values(head) == [2, 1, 4, 3, 6, 5]


def test_reverse_in_groups_partial_last_group():
    values = [1, 2, 3, 4, 5]
    head = alg.reverse_in_groups(build(values), 3)
    assert _values(head) == values[:3][::-1] + values[3:][::-1]


def test_reverse_in_groups_whole_list():
    values = [1, 2, 3, 4]
    assert _values(alg.reverse_in_groups(build(values), 10)) == values[::-1]


def test_reverse_in_groups_invalid_k():
    with pytest.raises(ValueError):
        alg.reverse_in_groups(build([1, 2]), 0)


def test_node_chain_identity_preserved_by_reverse():
    head = build([1, 2, 3])
    nodes = [head, head.next, head.next.next]
    new_head = alg.reverse(head)
    assert new_head is nodes[2]
    assert nodes[0].next is None
    assert isinstance(new_head, Node)