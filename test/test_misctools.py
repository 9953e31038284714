# External dependencies
import unittest

# Internal dependencies
from lhopital.misctools import isclose, is_near_zero, is_nonnegative_integer


class TestMiscTools(unittest.TestCase):

    def test_isclose(self):
        self.assertTrue(isclose(1.0, 1.0 + 1e-9))
        self.assertFalse(isclose(1.0, 1.1))

    def test_is_near_zero(self):
        self.assertTrue(is_near_zero(0.0, 1e-9))
        self.assertTrue(is_near_zero(-1e-10, 1e-9))
        self.assertFalse(is_near_zero(1e-9, 1e-9))
        self.assertFalse(is_near_zero(float('nan'), 1e-9))
        self.assertFalse(is_near_zero(float('inf'), 1e-9))

    def test_is_nonnegative_integer(self):
        for n in [0, 1, 5, 3.0]:
            self.assertTrue(is_nonnegative_integer(n))
        for n in [-1, 2.5, 'three', None, float('nan'), float('inf')]:
            self.assertFalse(is_nonnegative_integer(n))


if __name__ == '__main__':
    unittest.main()
