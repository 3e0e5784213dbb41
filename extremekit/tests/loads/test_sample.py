import unittest
import extremekit.loads as loads
from extremekit.errors import InvalidArgumentError
from scipy import stats


class TestReturnYearValue(unittest.TestCase):
    @classmethod
    def setUpClass(self):
        peaks = loads.extreme.ScipyPeaksDistribution(stats.norm())
        self.ste = loads.extreme.ste_peaks(peaks, 1)

    def test_return_year_value(self):
        return_years = [50, 50.0]
        short_term_periods = [1, 1.0]

        for y in return_years:
            for stp in short_term_periods:
                with self.subTest(year=y, short_term=stp):
                    val = loads.extreme.return_year_value(self.ste.ppf, y, stp)
                    want = 4.5839339
                    self.assertAlmostEqual(want, val, 5)

    def test_return_year_value_more_peaks(self):
        ste = loads.extreme.ste_peaks(self.ste.peaks_distribution, 100)
        val = loads.extreme.return_year_value(ste.ppf, 50, 1)
        p = 1 / (50 * 365.25 * 24)

        self.assertAlmostEqual(val, stats.norm.ppf((1 - p) ** (1 / 100)), 7)

    def test_return_year_value_invalid(self):
        for args in [
            ("ppf", 50, 1),
            (self.ste.ppf, "50", 1),
            (self.ste.ppf, 50, [1]),
            (self.ste.ppf, 0, 1),
            (self.ste.ppf, 50, -1),
        ]:
            with self.subTest(args=args):
                with self.assertRaises(InvalidArgumentError):
                    loads.extreme.return_year_value(*args)

    def test_return_period_shorter_than_short_term(self):
        # exceedance probability >= 1 has no quantile
        with self.assertRaises(InvalidArgumentError):
            loads.extreme.return_year_value(self.ste.ppf, 1 / 365.25 / 24, 2)


if __name__ == "__main__":
    unittest.main()
