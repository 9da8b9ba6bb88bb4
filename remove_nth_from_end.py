import logging
from typing import Optional

from linked_list import REMOVE_NTH_EXAMPLES, ListNode, build_list, list_to_array
from playground_logging import setup_logging
from pretty_print_linked_list import linked_list_to_string

logger = logging.getLogger(__name__)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """
    Remove the nth node from the end of a linked list (n=1 is the last node).

    Relinks the existing chain in place and returns the new head. If n is
    larger than the list, or not positive, the list is returned unchanged.
    """
    if n <= 0:
        logger.debug("Offset %d is not positive, nothing to remove", n)
        return head

    # Dummy node in front of head so removing the head needs no special case
    dummy = ListNode(0, head)
    fast = dummy
    slow = dummy

    # Move fast n+1 steps ahead
    for _ in range(n + 1):
        if fast is None:
            logger.debug("Offset %d is larger than the list, nothing to remove", n)
            return dummy.next
        fast = fast.next

    # Move both until fast falls off the end; slow then sits before the target
    while fast is not None:
        fast = fast.next
        slow = slow.next

    target = slow.next
    slow.next = target.next
    logger.debug("Removed node with value %s", target.val)

    return dummy.next


def main():
    setup_logging()

    for i, (values, n, expected) in enumerate(REMOVE_NTH_EXAMPLES, start=1):
        head = build_list(values)
        result = remove_nth_from_end(head, n)
        print(f"Example {i} Result: {linked_list_to_string(result)}  (expected {expected})")
        if list_to_array(result) != expected:
            logger.error("Example %d did not match the expected output", i)


if __name__ == "__main__":
    main()
