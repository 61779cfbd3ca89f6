import unittest
import random
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bitonic.sorters.bitonic_network import (
    CompareExchange,
    apply_network,
    comparator_count,
    is_disjoint,
    network_passes,
)
from bitonic.sorters.bitonic_sort import sort_by
from bitonic.sorters.comparators import Direction, by_key, natural_order
from bitonic.sorters.sort_errors import InvalidLengthError


class TestNetworkPasses(unittest.TestCase):

    def test_trivial_lengths_have_no_passes(self):
        self.assertEqual(network_passes(0), [])
        self.assertEqual(network_passes(1), [])

    def test_length_two(self):
        self.assertEqual(network_passes(2), [[CompareExchange(0, 1, True)]])

    def test_length_four(self):
        self.assertEqual(network_passes(4), [
            [CompareExchange(0, 1, True), CompareExchange(2, 3, False)],
            [CompareExchange(0, 2, True), CompareExchange(1, 3, True)],
            [CompareExchange(0, 1, True), CompareExchange(2, 3, True)],
        ])

    def test_every_pass_is_disjoint(self):
        """Each pass may run fully in parallel: no index is used twice."""
        for exp in range(1, 9):
            n = 2 ** exp
            for pass_ in network_passes(n):
                with self.subTest(n=n):
                    self.assertTrue(is_disjoint(pass_))
                    self.assertEqual(len(pass_), n // 2)

    def test_pass_and_comparator_counts(self):
        for k in range(0, 9):
            n = 2 ** k
            passes = network_passes(n)
            with self.subTest(n=n):
                self.assertEqual(len(passes), k * (k + 1) // 2)
                self.assertEqual(sum(len(p) for p in passes), comparator_count(n))

    def test_final_stage_is_ascending(self):
        passes = network_passes(16)
        for pass_ in passes[-4:]:
            self.assertTrue(all(op.ascending for op in pass_))

    def test_invalid_length(self):
        with self.assertRaises(InvalidLengthError) as ctx:
            network_passes(6)
        self.assertEqual(ctx.exception.actual_length, 6)
        with self.assertRaises(InvalidLengthError):
            comparator_count(12)

    def test_is_disjoint_detects_reuse(self):
        self.assertFalse(is_disjoint([CompareExchange(0, 1, True), CompareExchange(1, 2, True)]))
        self.assertTrue(is_disjoint([]))


class TestApplyNetwork(unittest.TestCase):

    def test_literal_example(self):
        x = [10, 30, 11, 20, 4, 330, 21, 110]
        apply_network(x, natural_order(Direction.ASCENDING))
        self.assertEqual(x, [4, 10, 11, 20, 21, 30, 110, 330])
        apply_network(x, natural_order(Direction.DESCENDING))
        self.assertEqual(x, [330, 110, 30, 21, 20, 11, 10, 4])

    def test_matches_recursive_sort_exactly(self):
        """Same exchanges as the recursive engine, so ties land identically."""
        rng = random.Random(3)
        by_first = by_key(lambda item: item[0])
        for exp in range(0, 10):
            n = 2 ** exp
            data = [(rng.randint(0, 5), i) for i in range(n)]
            recursive = list(data)
            iterative = list(data)
            sort_by(recursive, by_first)
            apply_network(iterative, by_first)
            with self.subTest(n=n):
                self.assertEqual(iterative, recursive)

    def test_invalid_length_leaves_input(self):
        x = [3, 2, 1]
        with self.assertRaises(InvalidLengthError):
            apply_network(x, natural_order())
        self.assertEqual(x, [3, 2, 1])


if __name__ == '__main__':
    unittest.main()
