from typing import Optional

from linked_list import ListNode, list_length, list_to_array


def linked_list_to_string(head: Optional[ListNode]) -> str:
    """Format a linked list like a Python list, e.g. "[1, 2, 3]"."""
    values = list_to_array(head)
    return "[" + ", ".join(str(v) for v in values) + "]"


def linked_list_to_chain(head: Optional[ListNode]) -> str:
    """Format a linked list as "1 -> 2 -> 3", or "null" when empty."""
    if head is None:
        return "null"
    return " -> ".join(str(v) for v in list_to_array(head))


def _prefix(label):
    return f"{label}: " if label else ""


def pretty_print_linked_list(head: Optional[ListNode], label: Optional[str] = None):
    prefix = _prefix(label)
    if head is None:
        print(f"{prefix}[] (empty list)")
        return
    print(f"{prefix}{linked_list_to_string(head)}")


def pretty_print_linked_list_chain(head: Optional[ListNode], label: Optional[str] = None):
    prefix = _prefix(label)
    if head is None:
        print(f"{prefix}null (empty list)")
        return
    print(f"{prefix}{linked_list_to_chain(head)}")


def debug_linked_list(head: Optional[ListNode], label: Optional[str] = None):
    """Print the list in both formats followed by a node-by-node dump."""
    prefix = _prefix(label)
    if head is None:
        print(f"{prefix}null (empty list)")
        return

    print(f"{prefix}Linked List:")
    print(f"  Length: {list_length(head)}")
    print(f"  Values: {linked_list_to_string(head)}")
    print(f"  Chain:  {linked_list_to_chain(head)}")

    node = head
    index = 0
    while node is not None:
        next_val = node.next.val if node.next is not None else "null"
        print(f"  Node[{index}]: val={node.val}, next={next_val}")
        node = node.next
        index += 1
