import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bitonic.utils import new_u32_vec, is_sorted_ascending, is_sorted_descending


class TestNewU32Vec(unittest.TestCase):

    def test_length_and_range(self):
        x = new_u32_vec(4096)
        self.assertEqual(len(x), 4096)
        self.assertTrue(all(isinstance(v, int) for v in x))
        self.assertTrue(all(0 <= v < 2 ** 32 for v in x))

    def test_reproducible(self):
        self.assertEqual(new_u32_vec(100), new_u32_vec(100))
        self.assertEqual(new_u32_vec(100, seed=5), new_u32_vec(100, seed=5))
        self.assertNotEqual(new_u32_vec(100, seed=1), new_u32_vec(100, seed=2))

    def test_empty(self):
        self.assertEqual(new_u32_vec(0), [])


class TestSortedness(unittest.TestCase):

    def test_ascending(self):
        self.assertTrue(is_sorted_ascending([]))
        self.assertTrue(is_sorted_ascending([1]))
        self.assertTrue(is_sorted_ascending([1, 1, 2, 3]))
        self.assertFalse(is_sorted_ascending([1, 3, 2]))

    def test_descending(self):
        self.assertTrue(is_sorted_descending([]))
        self.assertTrue(is_sorted_descending([3, 3, 2, 1]))
        self.assertFalse(is_sorted_descending([3, 1, 2]))


if __name__ == '__main__':
    unittest.main()
