"""
Unit tests for set algebra: lazy views, in-place operations and relations.

Randomized cases are checked against pyroaring bitmaps and builtin sets.
"""

import random

import pytest
from pyroaring import BitMap

from id_set import IdSet

OPERATIONS = ["union", "intersection", "difference", "symmetric_difference"]

BITMAP_OPERATIONS = {
    "union": lambda a, b: a | b,
    "intersection": lambda a, b: a & b,
    "difference": lambda a, b: a - b,
    "symmetric_difference": lambda a, b: a ^ b,
}


def random_ids(rng: random.Random, limit: int) -> set[int]:
    """Random set of ids below ``limit``; sometimes empty."""
    size = rng.choice([0, 1, rng.randrange(50), rng.randrange(300)])
    return {rng.randrange(limit) for _ in range(size)}


@pytest.fixture(params=range(25))
def random_pair(request):
    """Seeded pair of random id sets with differing storage lengths."""
    rng = random.Random(request.param)
    left = random_ids(rng, rng.choice([64, 200, 1000, 5000]))
    right = random_ids(rng, rng.choice([64, 200, 1000, 5000]))
    return left, right


class TestFixedCases:
    """Test the algebra on small hand-checked examples."""

    def test_intersection(self):
        """Test intersection keeps only ids present in both sets."""
        a = IdSet([11, 1, 3, 77, 103, 5])
        b = IdSet([2, 11, 77, 5, 3])
        assert list(a.intersection(b).ids()) == [3, 5, 11, 77]

    def test_difference(self):
        """Test difference drops the right-hand ids from the left."""
        a = IdSet([1, 3, 5, 200, 500])
        b = IdSet([3, 200])
        assert list(a.difference(b).ids()) == [1, 5, 500]

    def test_symmetric_difference(self):
        """Test symmetric difference keeps ids present in exactly one set."""
        a = IdSet([1, 3, 5, 9, 11])
        b = IdSet([3, 9, 14, 220])
        assert list(a.symmetric_difference(b).ids()) == [1, 5, 11, 14, 220]

    def test_union(self):
        """Test union merges ids from sets of different lengths."""
        a = IdSet([1, 3, 5, 9, 11, 160, 19, 24, 200])
        b = IdSet([1, 5, 9, 13, 19])
        expected = [1, 3, 5, 9, 11, 13, 19, 24, 160, 200]
        assert list(a.union(b).ids()) == expected

    def test_views_do_not_mutate(self):
        """Test collecting a view leaves both operands untouched."""
        a = IdSet([1, 2])
        b = IdSet([2, 3])
        a.union(b).collect()
        a.difference(b).collect()
        assert list(a) == [1, 2]
        assert list(b) == [2, 3]


class TestRandomizedAlgebra:
    """Test views and in-place operations against independent oracles."""

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_view_matches_bitmap(self, random_pair, operation):
        """Test each view yields the same ids as the pyroaring operation."""
        left, right = random_pair
        a, b = IdSet(left), IdSet(right)

        result = list(getattr(a, operation)(b).ids())
        expected = BITMAP_OPERATIONS[operation](BitMap(left), BitMap(right))

        assert result == list(expected)

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_in_place_matches_view(self, random_pair, operation):
        """Test each in-place operation equals the collected view."""
        left, right = random_pair
        a, b = IdSet(left), IdSet(right)

        expected = getattr(a, operation)(b).collect()
        getattr(a, f"{operation}_with")(b)

        assert a == expected
        assert len(a) == len(expected)
        assert list(a) == list(expected)
        assert list(b) == sorted(right)

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_in_place_matches_builtin_set(self, random_pair, operation):
        """Test in-place results and counts match builtin set operations."""
        left, right = random_pair
        a = IdSet(left)
        getattr(a, f"{operation}_with")(IdSet(right))

        expected = getattr(left, operation)(right)
        assert list(a) == sorted(expected)
        assert len(a) == len(expected)

    def test_chained_expression(self, random_pair):
        """Test a union chained into a difference matches builtin sets."""
        left, right = random_pair
        third = set(range(0, 5000, 3))
        a, b, c = IdSet(left), IdSet(right), IdSet(third)

        result = a.union(b).difference(c).collect()
        assert list(result) == sorted((left | right) - third)


class TestInPlaceEdgeCases:
    """Test length rules and aliasing of the in-place operations."""

    def test_union_with_grows(self):
        """Test union_with() grows storage to cover a longer operand."""
        a = IdSet([1])
        a.union_with(IdSet([1000]))
        assert list(a) == [1, 1000]
        assert len(a) == 2

    def test_intersection_with_truncates(self):
        """Test intersection_with() drops words past the end of a shorter operand."""
        a = IdSet([1, 63, 64, 500])
        a.intersection_with(IdSet.filled(64).blocks())
        assert list(a) == [1, 63]
        assert len(a) == 2
        assert len(a.to_words()) == 2

    def test_intersection_with_longer_other(self):
        """Test intersection_with() ignores the extra words of a longer operand."""
        a = IdSet([1])
        a.intersection_with(IdSet([1, 1000]))
        assert list(a) == [1]

    def test_difference_with_shorter_other(self):
        """Test difference_with() keeps words past the end of a shorter operand."""
        a = IdSet([1, 2, 900])
        a.difference_with(IdSet([2]))
        assert list(a) == [1, 900]
        assert len(a) == 2

    def test_symmetric_difference_with_grows(self):
        """Test symmetric_difference_with() grows for a longer operand."""
        a = IdSet([1, 2])
        a.symmetric_difference_with(IdSet([2, 700]))
        assert list(a) == [1, 700]
        assert len(a) == 2

    def test_with_complement_view(self):
        """Test an unbounded complement works as an in-place operand."""
        a = IdSet(range(10))
        b = IdSet([2, 4, 6])
        a.intersection_with(b.complement())
        assert list(a) == [0, 1, 3, 5, 7, 8, 9]
        assert len(a) == 7

    @pytest.mark.parametrize(
        "operation, expected",
        [
            ("union_with", [1, 40, 900]),
            ("intersection_with", [1, 40, 900]),
            ("difference_with", []),
            ("symmetric_difference_with", []),
        ],
    )
    def test_self_operand(self, operation, expected):
        """Test in-place operations with the set itself as operand."""
        a = IdSet([1, 40, 900])
        getattr(a, operation)(a)
        assert list(a) == expected
        assert len(a) == len(expected)


class TestRelations:
    """Test subset, superset and disjointness."""

    def test_subset_and_superset(self):
        """Test subset and superset in both directions."""
        small = IdSet([1, 5])
        big = IdSet([1, 5, 600])
        assert small.is_subset(big)
        assert big.is_superset(small)
        assert not big.is_subset(small)
        assert not small.is_superset(big)

    def test_empty_set(self):
        """Test the empty set is a subset of, and disjoint from, every set."""
        empty = IdSet()
        other = IdSet([3, 4])
        assert empty.is_subset(other)
        assert empty.is_subset(empty)
        assert other.is_superset(empty)
        assert empty.is_disjoint(other)
        assert other.is_disjoint(empty)
        assert empty.is_disjoint(empty)

    def test_equal_sets_are_subsets(self):
        """Test equal sets with different storage lengths contain each other."""
        a = IdSet([2, 90])
        b = IdSet([2, 90, 5000])
        b.remove(5000)
        assert a.is_subset(b)
        assert a.is_superset(b)

    def test_disjoint(self):
        """Test disjointness with and without a shared id."""
        assert IdSet([1, 2]).is_disjoint(IdSet([3, 400]))
        assert not IdSet([1, 400]).is_disjoint(IdSet([3, 400]))

    def test_disjoint_dense_sets(self):
        """Test interleaved evens and odds are disjoint until one id overlaps."""
        evens = IdSet(range(0, 200, 2))
        odds = IdSet(range(1, 200, 2))
        assert evens.is_disjoint(odds)
        odds.insert(100)
        assert not evens.is_disjoint(odds)

    def test_relations_match_brute_force(self, random_pair):
        """Test relations agree with membership checks and pyroaring."""
        left, right = random_pair
        a, b = IdSet(left), IdSet(right)

        assert a.is_subset(b) == all(b.contains(id_) for id_ in left)
        assert a.is_superset(b) == all(a.contains(id_) for id_ in right)
        assert a.is_disjoint(b) == (not any(b.contains(id_) for id_ in left))

        bm_left, bm_right = BitMap(left), BitMap(right)
        assert a.is_subset(b) == bm_left.issubset(bm_right)
        assert a.is_disjoint(b) == bm_left.isdisjoint(bm_right)

    def test_strict_superset_random(self, random_pair):
        """Test a strict superset contains the set but not the reverse."""
        left, right = random_pair
        union = IdSet(left | right)
        union.insert(9999)
        a = IdSet(left)
        assert union.is_superset(a)
        assert a.is_subset(union)
        assert not union.is_subset(a)
