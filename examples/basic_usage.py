"""
Example: Basic IdSet usage

Demonstrates:
1. Building sets and querying membership
2. Lazy set algebra and chaining views
3. In-place algebra
4. Raw word import/export and storage stats
"""

import logging

from id_set import IdSet, get_config

# Configure logging
logging.basicConfig(
    level=get_config().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def example_1_membership():
    """Example 1: Insert, remove and query ids."""
    print("\n" + "=" * 80)
    print("Example 1: Membership")
    print("=" * 80 + "\n")

    s = IdSet([3, 4, 400])
    print(f"Set: {s}")
    print(f"Inserting 3 again added a new id: {s.insert(3)}")
    print(f"Contains 400: {s.contains(400)}")
    print(f"Removed 4: {s.remove(4)}")
    print(f"Length: {len(s)}")


def example_2_lazy_algebra():
    """Example 2: Compose views without materializing intermediate sets."""
    print("\n" + "=" * 80)
    print("Example 2: Lazy Set Algebra")
    print("=" * 80 + "\n")

    a = IdSet([1, 3, 5, 9, 11])
    b = IdSet([3, 9, 14, 220])
    c = IdSet([5, 14])

    print(f"A = {a}")
    print(f"B = {b}")
    print(f"C = {c}")
    print(f"A ^ B        = {list(a.symmetric_difference(b).ids())}")
    print(f"(A | B) - C  = {list(a.union(b).difference(c).ids())}")

    # Complement is unbounded; bound it with a finite set
    universe = IdSet.filled(16)
    print(f"[0, 16) - A  = {list(universe.intersection(a.complement()).ids())}")


def example_3_in_place():
    """Example 3: Mutate a set with another set's words."""
    print("\n" + "=" * 80)
    print("Example 3: In-place Algebra")
    print("=" * 80 + "\n")

    a = IdSet(range(0, 20, 2))
    a.union_with(IdSet([1, 3, 1000]))
    print(f"After union_with:        {a}")
    a.intersection_with(IdSet.filled(10))
    print(f"After intersection_with: {a}")
    a.retain(lambda id_: id_ % 4 != 0)
    print(f"After retain:            {a}")


def example_4_words_and_stats():
    """Example 4: Raw words and storage representation."""
    print("\n" + "=" * 80)
    print("Example 4: Raw Words and Stats")
    print("=" * 80 + "\n")

    s = IdSet.from_words([0b01101001, 0, 1])
    print(f"From words: {s}")
    print(f"Words: {[f'{word:#010x}' for word in s.to_words()]}")
    print(f"Stats: {s.stats().model_dump()}")

    s.insert(10_000)
    print(f"After inserting 10000: {s.stats().model_dump()}")
    s.remove(10_000)
    s.shrink_to_fit()
    print(f"After shrink_to_fit:   {s.stats().model_dump()}")


if __name__ == "__main__":
    example_1_membership()
    example_2_lazy_algebra()
    example_3_in_place()
    example_4_words_and_stats()
