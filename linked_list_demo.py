from linked_list import example_lists
from playground_logging import setup_logging
from pretty_print_linked_list import (
    debug_linked_list,
    linked_list_to_chain,
    linked_list_to_string,
    pretty_print_linked_list,
    pretty_print_linked_list_chain,
)

# Lists shown in the formatting sections
SHOWCASE = ["Empty List", "Example 1", "Example 2", "List with Zeros"]
DEBUG_SHOWCASE = ["Example 1", "Empty List", "List with Zeros"]


def main():
    setup_logging()

    lists = example_lists()

    print("=== Linked List Pretty Printing Demo ===\n")

    print("1. Array-style formatting:")
    for label in SHOWCASE:
        print(f"   {label}: {linked_list_to_string(lists[label])}")

    print("\n2. Chain-style formatting:")
    for label in SHOWCASE:
        print(f"   {label}: {linked_list_to_chain(lists[label])}")

    print("\n3. Console pretty printing:")
    for label in SHOWCASE:
        pretty_print_linked_list(lists[label], label)

    print("\n4. Chain-style console printing:")
    for label in SHOWCASE:
        pretty_print_linked_list_chain(lists[label], label)

    print("\n5. Detailed debugging info:")
    for label in DEBUG_SHOWCASE:
        debug_linked_list(lists[label], label)

    print("\n6. Usage in algorithm solutions:")
    print("   # Instead of just returning the result, show the inputs:")
    print('   #     print("Input:", linked_list_to_string(head))')
    print('   #     pretty_print_linked_list(result, "Result")')
    print("   # Or for quick debugging:")
    print('   #     debug_linked_list(result, "Final Result")')


if __name__ == "__main__":
    main()
