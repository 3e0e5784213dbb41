import numpy as np
import unittest
import extremekit.loads as loads
from extremekit.errors import InvalidArgumentError
from numpy.testing import assert_allclose
from scipy import stats


class TestPeaksDistributions(unittest.TestCase):
    @classmethod
    def setUpClass(self):
        self.pot_dist = stats.genpareto(c=0.1, loc=0.0, scale=0.5)
        self.threshold = 1.2
        self.fraction = 0.2
        self.pot = loads.extreme.PeaksOverThreshold(
            self.pot_dist, self.threshold, self.fraction
        )

    def test_scipy_peaks(self):
        peaks = loads.extreme.ScipyPeaksDistribution(stats.rayleigh(scale=2.0))
        x = np.linspace(0, 10, 11)

        self.assertEqual(peaks.method, "peaks")
        assert_allclose(peaks.cdf(x), stats.rayleigh.cdf(x, scale=2.0))
        self.assertIsInstance(peaks, loads.extreme.PeaksDistribution)

    def test_scipy_peaks_method_tag(self):
        peaks = loads.extreme.ScipyPeaksDistribution(stats.norm(), method="pot")

        self.assertEqual(peaks.method, "pot")

    def test_scipy_peaks_invalid(self):
        with self.assertRaises(InvalidArgumentError):
            loads.extreme.ScipyPeaksDistribution([1, 2, 3])
        with self.assertRaises(InvalidArgumentError):
            loads.extreme.ScipyPeaksDistribution(stats.norm(), method=1)

    def test_pot_cdf(self):
        x = np.array([0.0, 1.0, 1.2, 2.0, 5.0])
        got = self.pot.cdf(x)
        want = 1.0 - self.fraction * self.pot_dist.sf(x[2:] - self.threshold)

        self.assertTrue(np.all(np.isnan(got[:2])))
        assert_allclose(got[2:], want)
        self.assertEqual(self.pot.method, "pot")
        self.assertIsInstance(self.pot, loads.extreme.PeaksDistribution)

    def test_pot_cdf_scalar(self):
        self.assertEqual(np.shape(self.pot.cdf(2.0)), ())
        self.assertTrue(np.isnan(self.pot.cdf(0.5)))

    def test_pot_at_threshold(self):
        assert_allclose(self.pot.cdf(self.threshold), 1.0 - self.fraction)

    def test_pot_invalid(self):
        for args in [
            (object(), 1.0, 0.5),
            (self.pot_dist, "1.0", 0.5),
            (self.pot_dist, 1.0, 0.0),
            (self.pot_dist, 1.0, 1.5),
            (self.pot_dist, 1.0, True),
        ]:
            with self.subTest(args=args):
                with self.assertRaises(InvalidArgumentError):
                    loads.extreme.PeaksOverThreshold(*args)

    def test_pot_short_term_extreme(self):
        # below the threshold the extreme distribution is 0, above it is
        # the power of the peaks-over-threshold CDF
        ste = loads.extreme.ste_peaks(self.pot, 50)
        x = np.array([0.5, 1.5, 3.0])
        want = np.array(
            [0.0]
            + list((1.0 - self.fraction * self.pot_dist.sf(x[1:] - self.threshold)) ** 50)
        )

        assert_allclose(ste.cdf(x), want)
        self.assertEqual(ste.bounds(), (-10.0, 10.0))

        q = 0.5
        x_star = ste.ppf(q)
        want_x = self.threshold + self.pot_dist.isf((1 - q ** (1 / 50)) / self.fraction)
        assert_allclose(x_star, want_x, atol=1e-8)


if __name__ == "__main__":
    unittest.main()
