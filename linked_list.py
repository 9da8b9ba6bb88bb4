from typing import Dict, Iterable, List, Optional


class ListNode:
    __slots__ = ("val", "next")

    def __init__(self, val: int = 0, next: Optional["ListNode"] = None):
        self.val = val
        self.next = next

    def __repr__(self):
        return f"ListNode(val={self.val})"


# Build a linked list from any sequence of ints
def build_list(values: Iterable[int]) -> Optional[ListNode]:
    dummy = ListNode()
    current = dummy
    for value in values:
        current.next = ListNode(value)
        current = current.next
    return dummy.next


# Convert a linked list back to a Python list (for easy checking)
def list_to_array(head: Optional[ListNode]) -> List[int]:
    result = []
    node = head
    while node is not None:
        result.append(node.val)
        node = node.next
    return result


def list_length(head: Optional[ListNode]) -> int:
    count = 0
    node = head
    while node is not None:
        count += 1
        node = node.next
    return count


# (values, n, expected) for remove_nth_from_end
REMOVE_NTH_EXAMPLES = (
    ([1, 2, 3, 4, 5], 2, [1, 2, 3, 5]),
    ([1], 1, []),
    ([1, 2], 1, [1]),
)


def example_lists() -> Dict[str, Optional[ListNode]]:
    """Return freshly built example lists keyed by label.

    Every call builds new chains, so a destructive operation on one of them
    never leaks into the next caller.
    """
    return {
        "Example 1": build_list([1, 2, 3, 4, 5]),
        "Example 2": build_list([1]),
        "Example 3": build_list([1, 2]),
        "Empty List": None,
        "List with Zeros": build_list([0, 1, 0, 2, 0]),
        "Large Numbers": build_list([999, 888, 777]),
    }
