import pytest

from linked_list import (
    REMOVE_NTH_EXAMPLES,
    ListNode,
    build_list,
    example_lists,
    list_length,
    list_to_array,
)


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3, 4, 5], [0, -1, 0, 2], [999, 888, 777]])
def test_round_trip(values):
    assert list_to_array(build_list(values)) == values


def test_empty_input():
    assert build_list([]) is None
    assert list_to_array(None) == []
    assert list_length(None) == 0


def test_build_links_in_order():
    head = build_list([1, 2, 3])
    assert head.val == 1
    assert head.next.val == 2
    assert head.next.next.val == 3
    assert head.next.next.next is None


def test_build_accepts_any_iterable():
    assert list_to_array(build_list(range(4))) == [0, 1, 2, 3]
    assert list_to_array(build_list(iter((5, 6)))) == [5, 6]


def test_list_to_array_does_not_mutate():
    head = build_list([4, 5, 6])
    first = list_to_array(head)
    second = list_to_array(head)
    assert first == second == [4, 5, 6]
    assert list_length(head) == 3


def test_node_defaults_and_repr():
    node = ListNode()
    assert node.val == 0
    assert node.next is None
    assert repr(ListNode(3)) == "ListNode(val=3)"


def test_node_has_no_dict():
    with pytest.raises(AttributeError):
        ListNode(1).extra = True


def test_example_lists_are_fresh_each_call():
    first = example_lists()
    second = example_lists()
    assert first["Example 1"] is not second["Example 1"]
    first["Example 1"].next = None
    assert list_to_array(second["Example 1"]) == [1, 2, 3, 4, 5]


def test_example_lists_contents():
    lists = example_lists()
    assert lists["Empty List"] is None
    assert list_to_array(lists["List with Zeros"]) == [0, 1, 0, 2, 0]
    assert list_to_array(lists["Large Numbers"]) == [999, 888, 777]


@pytest.mark.parametrize("values, n, expected", REMOVE_NTH_EXAMPLES)
def test_remove_nth_examples_drop_nth_from_end(values, n, expected):
    index = len(values) - n
    assert expected == values[:index] + values[index + 1:]
