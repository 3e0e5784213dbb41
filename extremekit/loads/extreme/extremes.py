"""
This module provides the short-term extreme distribution of a response
estimated from its peaks distribution.

If a short-term period contains `n` independent peaks that all follow
the peaks distribution `F`, the largest of them follows `F(x)**n`. The
distribution has no closed form PDF, quantile function or mean in
general, so they are computed numerically:

- pdf: five-point central difference of the CDF.
- ppf: exponential bracket search followed by Brent's method.
- expect: adaptive quadrature of `x * pdf(x)` over a truncated domain.

Classes:
- ShortTermExtremeDistribution: Distribution of the largest of
  `peak_count` peaks.

Functions:
- ste_peaks: Estimate the short-term extreme distribution from the
  peaks distribution.
"""

from numbers import Integral
from typing import Tuple, Union

import numpy as np

from extremekit.errors import DegenerateIntervalError, InvalidArgumentError
from extremekit.loads.extreme.peaks import POT, PeaksDistribution
from extremekit.utils import integration
from extremekit.utils import (
    brentq,
    derivative,
    expand_bracket,
    restore_shape,
    to_numeric_array,
    to_probability_array,
)

LOC = 0.0
SCALE = 1.0

# The true support is the whole real line. These truncations are wide
# enough for normalized responses; peaks-over-threshold distributions need
# the tighter one for the quadrature to stay stable.
POT_BOUNDS = (-10.0, 10.0)
DEFAULT_BOUNDS = (-100.0, 100.0)


class ShortTermExtremeDistribution:
    """
    Distribution of the maximum of `peak_count` independent peaks drawn
    from `peaks_distribution`.

    Instances are immutable; every query is a pure function of its input.

    Parameters
    ----------
    peaks_distribution: PeaksDistribution
        Probability distribution of the peaks. Must have a callable `cdf`
        and may have a `method` tag.
    peak_count: int
        Number of peaks in the short-term period, at least 1.
    """

    def __init__(self, peaks_distribution: PeaksDistribution, peak_count: int):
        if not callable(getattr(peaks_distribution, "cdf", None)):
            raise InvalidArgumentError(
                "peaks_distribution must have a callable cdf. "
                + f"Got: {type(peaks_distribution)}"
            )
        if not isinstance(peak_count, Integral) or isinstance(peak_count, bool):
            raise InvalidArgumentError(
                f"peak_count must be of type int. Got: {type(peak_count)}"
            )
        if peak_count < 1:
            raise InvalidArgumentError(f"peak_count must be at least 1. Got: {peak_count}")
        self._peaks = peaks_distribution
        self._peak_count = int(peak_count)

    @property
    def peaks_distribution(self) -> PeaksDistribution:
        return self._peaks

    @property
    def peak_count(self) -> int:
        return self._peak_count

    @property
    def method(self) -> str:
        return getattr(self._peaks, "method", "")

    def __repr__(self):
        return (
            f"ShortTermExtremeDistribution({self._peaks!r}, "
            f"peak_count={self._peak_count})"
        )

    def _cdf(self, x: np.ndarray) -> np.ndarray:
        peaks_cdf = np.array(self._peaks.cdf(x), dtype=float).reshape(np.shape(x))
        peaks_cdf[np.isnan(peaks_cdf)] = 0.0
        peaks_cdf = np.clip(peaks_cdf, 0.0, 1.0)
        return peaks_cdf**self._peak_count

    def cdf(self, x):
        """
        Cumulative distribution function at x.

        Parameters
        ----------
        x : float or array_like
            Quantiles.

        Returns
        -------
        cdf : float or np.ndarray
            Cumulative distribution function evaluated at x. Values where
            the peaks CDF is undefined (NaN) are 0.
        """
        x = to_numeric_array(x, "x")
        return restore_shape(self._cdf(x))

    def sf(self, x):
        """Survival function (1 - cdf) at x."""
        return restore_shape(1.0 - np.asarray(self.cdf(x)))

    def pdf(self, x):
        """
        Probability density function at x.

        The CDF has no closed form derivative, so a five-point central
        difference with step 1e-5 is used. The density is 0 where x is not
        finite.

        Parameters
        ----------
        x : float or array_like
            Quantiles.

        Returns
        -------
        pdf : float or np.ndarray
            Probability density function evaluated at x.
        """
        x = to_numeric_array(x, "x")
        x = (x - LOC) / SCALE
        cond = np.isfinite(x) & (SCALE > 0)
        out = np.zeros(x.shape)
        if np.any(cond):
            out[cond] = derivative(self._cdf, x[cond]) / SCALE
        return restore_shape(out)

    def _ppf_single(self, q: float) -> float:
        def residual(x):
            return float(self._cdf(np.asarray(x, dtype=float))) - q

        left, right = expand_bracket(residual)
        root, _ = brentq(residual, left, right)
        return root

    def ppf(self, q):
        """
        Percent point function (inverse of cdf) at q.

        Parameters
        ----------
        q : float or array_like
            Lower tail probability, strictly between 0 and 1.

        Returns
        -------
        out : float or np.ndarray
            Quantile corresponding to the lower tail probability q.

        Raises
        ------
        InvalidArgumentError
            If any q is not strictly between 0 and 1.
        BracketingError
            If the quantile could not be bracketed.
        """
        q = to_probability_array(q, "q")
        out = np.empty(q.shape)
        for idx, q_i in np.ndenumerate(q):
            out[idx] = self._ppf_single(float(q_i))
        return restore_shape(out)

    def bounds(self) -> Tuple[float, float]:
        """
        Truncated integration domain used by `expect`.
        """
        lower, upper = POT_BOUNDS if self.method == POT else DEFAULT_BOUNDS
        return LOC + lower * SCALE, LOC + upper * SCALE

    def expect(self) -> float:
        """
        Expected value of the distribution.

        The expectation over the real line is approximated by the integral
        of `x * pdf(x)` over `bounds()`: [-10, 10] for peaks-over-threshold
        distributions and [-100, 100] otherwise. Probability outside these
        bounds is ignored.
        """
        lower, upper = self.bounds()
        return self.quad(lower, upper)

    def quad(self, a: float, b: float) -> float:
        """
        Compute the definite integral of `x * pdf(x)` from `a` to `b`.

        Limits may be given in either order; the result changes sign when
        `a > b`.

        Raises
        ------
        DegenerateIntervalError
            If both limits are infinite with the same sign.
        """
        for value, name in ((a, "a"), (b, "b")):
            if not isinstance(value, (float, int, np.number)) or isinstance(value, bool):
                raise InvalidArgumentError(
                    f"{name} must be of type float or int. Got: {type(value)}"
                )
        flip = b < a
        lower, upper = min(a, b), max(a, b)
        if np.isinf(lower) and np.isinf(upper) and np.sign(lower) == np.sign(upper):
            raise DegenerateIntervalError(
                f"Cannot integrate over [{a}, {b}]: both limits are the same infinity."
            )

        def integrand(x):
            return x * self.pdf(x)

        out = integration.quad(integrand, lower, upper)
        if flip:
            out = -out
        return out


def ste_peaks(
    peaks_distribution: PeaksDistribution, npeaks: Union[int, np.integer]
) -> ShortTermExtremeDistribution:
    """
    Estimate the short-term extreme distribution from the peaks
    distribution.

    Parameters
    ----------
    peaks_distribution: PeaksDistribution
        Probability distribution of the peaks.
    npeaks : int
        Number of peaks in short term period.

    Returns
    -------
    short_term_extreme: ShortTermExtremeDistribution
        Short-term extreme distribution.
    """
    return ShortTermExtremeDistribution(peaks_distribution, npeaks)
