"""
Tests for printing numtensor tensors.
"""

import unittest
import numtensor as nt

class TestRender(unittest.TestCase):

    def test_rank_one(self):
        self.assertEqual(str(nt.Tensor([1, 2, 3])), "array([1, 2, 3])")
        self.assertEqual(repr(nt.Tensor([-1, 0])), "array([-1, 0])")

    def test_rank_two(self):
        t = nt.Tensor([1, 2, 3, 4], shape=(2, 2))
        self.assertEqual(t.to_string(), "array([[1, 2],\n       [3, 4]])")

    def test_rank_two_single_row(self):
        self.assertEqual(str(nt.ones(1, 3)), "array([[1, 1, 1]])")

    def test_rank_three(self):
        t = nt.arange(1, 9).reshape(2, 2, 2)
        expected = (
            "array([[[1, 2],\n"
            "        [3, 4]],\n"
            "\n"
            "       [[5, 6],\n"
            "        [7, 8]]])"
        )
        self.assertEqual(str(t), expected)

    def test_rank_three_single_slice(self):
        expected = (
            "array([[[1, 1],\n"
            "        [1, 1],\n"
            "        [1, 1],\n"
            "        [1, 1]]])"
        )
        self.assertEqual(str(nt.ones((1, 4, 2))), expected)

    def test_rank_four_and_five_not_printable(self):
        for shape in [(1, 2, 2, 2), (1, 1, 1, 1, 2)]:
            t = nt.zeros(shape)
            with self.assertRaises(nt.UnsupportedRank):
                t.to_string()
            with self.assertRaises(nt.UnsupportedRank):
                str(t)
            self.assertEqual(
                repr(t),
                f"<numtensor.Tensor rank={len(shape)} shape={list(shape)}>",
            )

if __name__ == '__main__':
    unittest.main()
