import functools
import json
import logging
from collections import Counter, defaultdict
from typing import Any, Dict, List, Optional

from playground_logging import setup_logging

logger = logging.getLogger(__name__)


# SCENARIO 1: Simple numeric keys, a plain dict is enough
def find_duplicate_numbers(nums: List[int]) -> List[int]:
    seen = {}
    duplicates = []
    for num in nums:
        if num in seen:
            if seen[num] == 1:
                duplicates.append(num)
            seen[num] += 1
        else:
            seen[num] = 1
    return duplicates


# SCENARIO 2: Computed keys, defaultdict saves the "is the key there yet" check
def group_anagrams(words: List[str]) -> List[List[str]]:
    groups = defaultdict(list)
    for word in words:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


# SCENARIO 3: Frequent insertions/deletions, a Counter keeps value -> count
def sliding_window_maximum(nums: List[int], k: int) -> List[int]:
    if k <= 0 or k > len(nums):
        return []

    window = Counter(nums[:k])
    result = [max(window)]

    for i in range(k, len(nums)):
        outgoing = nums[i - k]
        window[outgoing] -= 1
        if window[outgoing] == 0:
            del window[outgoing]

        window[nums[i]] += 1
        result.append(max(window))

    return result


# SCENARIO 4: Two Sum, complement lookup in a dict
def two_sum(nums: List[int], target: int) -> List[int]:
    index_of: Dict[int, int] = {}
    for i, num in enumerate(nums):
        complement = target - num
        if complement in index_of:
            return [index_of[complement], i]
        index_of[num] = i
    return []


def two_sum_brute_force(nums: List[int], target: int) -> List[int]:
    for i in range(len(nums)):
        for j in range(i + 1, len(nums)):
            if nums[i] + nums[j] == target:
                return [i, j]
    return []


# SCENARIO 5: Tuple keys, the arguments themselves are the cache key
def memoize(fn):
    cache = {}

    @functools.wraps(fn)
    def wrapper(*args):
        if args in cache:
            return cache[args]
        result = fn(*args)
        cache[args] = result
        return result

    wrapper.cache = cache
    return wrapper


# SCENARIO 6: JSON serialization, str-keyed dicts go straight through
def to_json(mapping) -> Optional[str]:
    try:
        return json.dumps(mapping)
    except TypeError as e:
        logger.debug("Cannot serialize %r: %s", mapping, e)
        return None


def json_round_trip(mapping):
    # int keys come back as strings
    return json.loads(json.dumps(mapping))


# SCENARIO 7: Mixed key types in one dict
def multi_type_cache() -> Dict[Any, str]:
    cache = {}
    cache["string"] = "string value"
    cache[42] = "number value"
    cache[(1,)] = "tuple value"
    cache[True] = "boolean value"
    # True == 1 and hash(True) == hash(1), so this overwrites the value above
    cache[1] = "number one value"
    return cache


def unhashable_key_error(key) -> Optional[str]:
    """Return the TypeError message for a key a dict cannot hold, or None."""
    try:
        hash(key)
    except TypeError as e:
        return str(e)
    return None


USAGE_RECOMMENDATIONS = (
    ("Simple string/number keys with basic operations",
     "dict",
     "Fast, literal syntax, JSON serializable as-is"),
    ("Counting occurrences",
     "collections.Counter",
     "Missing keys count as 0, most_common() for free"),
    ("Grouping values under a computed key",
     "collections.defaultdict(list)",
     "No need to check whether the key exists first"),
    ("Objects or tuples as keys",
     "dict",
     "Any hashable works as a key, no string conversion"),
    ("Need predictable iteration order",
     "dict",
     "Keeps insertion order since Python 3.7"),
    ("Unhashable keys (lists, dicts)",
     "convert to tuple / frozenset first",
     "dict keys must be hashable"),
    ("JSON serialization required",
     "dict with str keys",
     "json.dumps rejects tuple keys and turns int keys into strings"),
)


def print_recommendations():
    print("\n=== USAGE RECOMMENDATIONS ===")
    for index, (scenario, recommendation, reason) in enumerate(USAGE_RECOMMENDATIONS, start=1):
        print(f"{index}. {scenario}")
        print(f"   -> Use {recommendation}")
        print(f"   -> Why: {reason}\n")


USERS = {
    'user123': {'name': 'John Doe', 'email': 'john@example.com'},
    'user456': {'name': 'Jane Smith', 'email': 'jane@example.com'},
}


def print_user_cache_demo(users):
    print("=== PLAIN DICT AS A CACHE ===")
    print("user123 exists:", 'user123' in users)
    print("Get user123:", users.get('user123'))
    print("Get user999 (default):", users.get('user999', 'not found'))
    print("Size:", len(users))
    for user_id, user in users.items():
        print(f"User {user_id}: {user}")
    # Iteration only sees the keys you put in, nothing inherited
    print("Keys:", list(users))


def main():
    setup_logging()

    print_user_cache_demo(USERS)

    print("\n=== DICT vs COLLECTIONS: ALGORITHM COMPARISON ===")

    duplicate_test = [1, 2, 3, 2, 4, 1, 5, 3]
    anagram_test = ["eat", "tea", "tan", "ate", "nat", "bat"]
    sliding_test = [1, 3, -1, -3, 5, 3, 6, 7]
    k = 3

    print("Find duplicates (dict):", find_duplicate_numbers(duplicate_test))
    print("Group anagrams (defaultdict):", group_anagrams(anagram_test))
    print("Sliding window max (Counter):", sliding_window_maximum(sliding_test, k))
    print("Two Sum (dict):", two_sum([2, 7, 11, 15], 9))
    print("Two Sum (nested loops):", two_sum_brute_force([2, 7, 11, 15], 9))

    @memoize
    def area(width, height):
        return width * height

    area(3, 4)
    area(3, 4)
    print("Memoized calls (tuple keys):", area.cache)

    print("JSON (str keys):", to_json({'key1': 'value1', 'key2': 'value2'}))
    print("JSON (tuple keys):", to_json({(1, 2): 'pair'}))
    print("JSON round trip turns int keys into str:", json_round_trip({1: 'one'}))

    print("Mixed key types:", multi_type_cache())
    print("Unhashable key:", unhashable_key_error([1, 2]))

    print_recommendations()
    logger.info("Done")


if __name__ == "__main__":
    main()
