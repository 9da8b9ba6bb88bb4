import logging
from typing import Any, Dict, List, Optional, Tuple

from playground_logging import setup_logging

logger = logging.getLogger(__name__)


def indexed_pairs(values: List[Any]) -> List[Tuple[int, Any]]:
    # enumerate instead of range(len(...)) when you need the index too
    return [(i, value) for i, value in enumerate(values)]


def doubled(values: List[int]) -> List[int]:
    return [v * 2 for v in values]


def evens(values: List[int]) -> List[int]:
    return [v for v in values if v % 2 == 0]


def dict_entries(mapping: Dict[Any, Any]) -> List[Tuple[Any, Any]]:
    return [(key, value) for key, value in mapping.items()]


def remove_evens_skipping(values: List[int]) -> List[int]:
    """Delete by index while always moving forward.

    This is the mistake: after a delete the next element slides into the
    current index and never gets checked.
    """
    nums = list(values)
    i = 0
    while i < len(nums):
        if nums[i] % 2 == 0:
            del nums[i]
        i += 1
    return nums


def remove_evens(values: List[int]) -> List[int]:
    nums = list(values)
    i = 0
    while i < len(nums):
        if nums[i] % 2 == 0:
            del nums[i]
            continue  # stay on the same index
        i += 1
    return nums


def unpack_without_items(mapping: Dict[str, Any]) -> Optional[str]:
    """Loop over a dict as if it yielded (key, value) pairs.

    Iterating a dict gives keys only, so each key string gets unpacked
    instead. Returns the resulting error message, or None if every key
    happened to be exactly two characters long.
    """
    try:
        for key, value in mapping:
            logger.debug("Unpacked %r into %r and %r", mapping, key, value)
    except ValueError as e:
        return str(e)
    return None


def drop_falsy_while_iterating(mapping: Dict[Any, Any]) -> Optional[str]:
    """Delete from a dict while looping over it; returns the RuntimeError message."""
    d = dict(mapping)
    try:
        for key in d:
            if not d[key]:
                del d[key]
    except RuntimeError as e:
        return str(e)
    return None


def drop_falsy(mapping: Dict[Any, Any]) -> Dict[Any, Any]:
    d = dict(mapping)
    for key in list(d):  # snapshot the keys first
        if not d[key]:
            del d[key]
    return d


LOOP_RECOMMENDATIONS = (
    ("for value in sequence", (
        "Lists, tuples, strings when you only need the values",
        "Any iterable: sets, files, generators",
    )),
    ("for i, value in enumerate(sequence)", (
        "When you need the index as well as the value",
    )),
    ("for i in range(len(sequence))", (
        "Only when the index itself drives the logic",
        "Skipping elements or custom steps (or use range(start, stop, step))",
    )),
    ("while i < len(sequence)", (
        "Deleting from a list in place while walking it",
    )),
    ("for key, value in mapping.items()", (
        "Dicts when you need keys and values",
        "Never loop over the dict itself while adding or deleting keys",
    )),
    ("comprehension", (
        "Building a new list or dict from an old one",
        "Filtering instead of deleting in place",
    )),
)


def print_loop_recommendations():
    print("\n=== RECOMMENDATIONS ===")
    for loop, uses in LOOP_RECOMMENDATIONS:
        print(f"Use {loop} for:")
        for use in uses:
            print(f"  - {use}")


def main():
    setup_logging()

    numbers = [10, 20, 30, 40, 50]
    user = {
        'name': 'John Doe',
        'age': 30,
        'email': 'john@example.com',
        'active': True
    }

    print("=== LOOP CHEATSHEET DEMO ===")

    print("\n=== range(len(...)) ===")
    for i in range(len(numbers)):
        print(f"Index {i}: {numbers[i]}")

    print("\n=== for ... in ===")
    for num in numbers:
        print(f"Value: {num}")

    print("\n=== enumerate ===")
    for i, num in indexed_pairs(numbers):
        print(f"Index {i}: {num}")

    print("\n=== Comprehensions ===")
    print("Doubled:", doubled(numbers))
    print("Evens:", evens([1, 2, 3, 4, 5, 6]))

    print("\n=== dict iteration ===")
    for key in user:
        print(f"{key}: {user[key]}")
    for key, value in dict_entries(user):
        print(f"{key} = {value}")
    print("Keys:", list(user.keys()))
    print("Values:", list(user.values()))

    print("\n=== Common Mistakes ===")
    print("Wrong: `for key, value in d` without .items():", unpack_without_items(user))
    print("Wrong: deleting while moving forward:", remove_evens_skipping([1, 2, 4, 3, 6, 8, 5]))
    print("Correct: stay on the index after a delete:", remove_evens([1, 2, 4, 3, 6, 8, 5]))
    print("Simplest: build a new list:", [v for v in [1, 2, 4, 3, 6, 8, 5] if v % 2 != 0])
    print("Wrong: deleting dict keys while iterating:", drop_falsy_while_iterating({'a': 1, 'b': 0, 'c': 2}))
    print("Correct: iterate over list(d):", drop_falsy({'a': 1, 'b': 0, 'c': 2}))

    print_loop_recommendations()

    logger.debug("Loop cheatsheet finished")


if __name__ == "__main__":
    main()
