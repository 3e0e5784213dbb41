from extremekit.utils import derivative
from extremekit.utils.differentiation import DENOMINATOR, DX, WEIGHTS
from numpy.testing import assert_allclose
from scipy import stats
import numpy as np
import unittest


class TestDifferentiation(unittest.TestCase):
    def test_weights(self):
        self.assertEqual(WEIGHTS.tolist(), [1, -8, 0, 8, -1])
        self.assertEqual(DENOMINATOR, 12)
        self.assertEqual(DX, 1e-5)

    def test_derivative_polynomial(self):
        # exact for polynomials up to degree 4, up to round-off
        x = np.linspace(-2, 2, 9)
        got = derivative(lambda t: t**4 - 3 * t**2 + t, x)

        assert_allclose(got, 4 * x**3 - 6 * x + 1, atol=1e-6)

    def test_derivative_normal_cdf(self):
        x = np.linspace(-4, 4, 17)
        got = derivative(stats.norm.cdf, x)

        assert_allclose(got, stats.norm.pdf(x), atol=1e-9)

    def test_derivative_scalar(self):
        got = derivative(np.exp, 1.0)

        self.assertEqual(np.shape(got), ())
        assert_allclose(got, np.e, rtol=1e-9)

    def test_derivative_flat_is_exactly_zero(self):
        for level in [0.0, 0.25, 1.0]:
            with self.subTest(level=level):
                got = derivative(lambda t: np.full(np.shape(t), level), [-1.0, 0.5, 2.0])

                self.assertTrue(np.all(got == 0.0))

    def test_derivative_five_evaluations(self):
        calls = []

        def func(t):
            calls.append(t)
            return t

        derivative(func, 0.0)
        self.assertEqual(len(calls), 5)
        assert_allclose(sorted(calls), np.array([-2, -1, 0, 1, 2]) * DX)


if __name__ == "__main__":
    unittest.main()
