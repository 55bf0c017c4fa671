import unittest

import numpy as np

from spthermo.thermo.polynomial import (
    POLY_INV_T,
    POLY_LOG_T,
    POLY_SIZE,
    POLY_T,
    POLY_T4,
    temperature_polynomial,
)


class TestTemperaturePolynomial(unittest.TestCase):
    def test_basis(self):
        T = 1234.5
        tt = temperature_polynomial(T)
        self.assertEqual(tt.shape, (POLY_SIZE,))
        np.testing.assert_allclose(tt, [T, T**2, T**3, T**4, 1.0 / T, np.log(T)], rtol=1e-15)

    def test_fresh_array_per_call(self):
        first = temperature_polynomial(300.0)
        second = temperature_polynomial(300.0)
        self.assertIsNot(first, second)
        first[POLY_T] = 0.0
        self.assertEqual(second[POLY_T], 300.0)

    def test_unit_temperature(self):
        tt = temperature_polynomial(1.0)
        self.assertEqual(tt[POLY_T4], 1.0)
        self.assertEqual(tt[POLY_INV_T], 1.0)
        self.assertEqual(tt[POLY_LOG_T], 0.0)


if __name__ == '__main__':
    unittest.main()
