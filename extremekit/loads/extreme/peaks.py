"""
This module describes the peaks distribution consumed by the short-term
extreme distribution, and provides two ready-made implementations built
from already fitted `scipy.stats` distributions.

A peaks distribution is anything exposing:
- cdf(x): probability that a single peak does not exceed x. May return
  NaN where it is undefined (e.g. below a peaks-over-threshold threshold).
- method: tag describing how the peaks were selected. "pot" marks
  peaks-over-threshold distributions.

Classes:
- PeaksDistribution: Protocol describing the capability above.
- ScipyPeaksDistribution: Tags any distribution with a callable `cdf`,
  e.g. `scipy.stats.exponweib(...)`.
- PeaksOverThreshold: Peaks distribution from a distribution of the
  exceedances over a threshold. Undefined (NaN) below the threshold.

Fitting these distributions to data is left to the caller.
"""

from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from extremekit.errors import InvalidArgumentError

POT = "pot"


@runtime_checkable
class PeaksDistribution(Protocol):
    method: str

    def cdf(self, x: ArrayLike) -> NDArray[np.float64]: ...


class ScipyPeaksDistribution:
    """
    Peaks distribution backed by a distribution object with a callable
    `cdf`, typically a frozen `scipy.stats` distribution.

    Parameters
    ----------
    distribution: scipy.stats.rv_frozen
        Probability distribution of the peaks.
    method: str
        Peak selection tag. Default "peaks".
    """

    def __init__(self, distribution, method: str = "peaks"):
        if not callable(getattr(distribution, "cdf", None)):
            raise InvalidArgumentError(
                "distribution must have a callable cdf, e.g. a scipy.stats distribution."
            )
        if not isinstance(method, str):
            raise InvalidArgumentError(
                f"method must be of type str. Got: {type(method)}"
            )
        self.distribution = distribution
        self.method = method

    def cdf(self, x: ArrayLike) -> NDArray[np.float64]:
        return np.asarray(self.distribution.cdf(x), dtype=float)

    def __repr__(self):
        return f"ScipyPeaksDistribution({self.distribution!r}, method={self.method!r})"


class PeaksOverThreshold:
    """
    Peaks distribution from a peaks-over-threshold analysis.

    Above the threshold the CDF is `1 - p * (1 - F(x - threshold))`, where
    `F` is the distribution of the exceedances and `p` the fraction of
    all peaks that exceed the threshold. Below the threshold the peaks
    distribution is not modelled and the CDF is NaN.

    Parameters
    ----------
    pot_distribution: scipy.stats.rv_frozen
        Distribution of the exceedances over the threshold, typically a
        generalized Pareto distribution.
    threshold: float
        Threshold value.
    exceedance_fraction: float
        Fraction of peaks above the threshold, in (0, 1].
    """

    method = POT

    def __init__(self, pot_distribution, threshold: float, exceedance_fraction: float):
        if not callable(getattr(pot_distribution, "cdf", None)):
            raise InvalidArgumentError(
                "pot_distribution must have a callable cdf, e.g. scipy.stats.genpareto."
            )
        if not isinstance(threshold, (float, int)) or isinstance(threshold, bool):
            raise InvalidArgumentError(
                f"threshold must be of type float or int. Got: {type(threshold)}"
            )
        if not isinstance(exceedance_fraction, (float, int)) or isinstance(
            exceedance_fraction, bool
        ):
            raise InvalidArgumentError(
                "exceedance_fraction must be of type float or int. "
                + f"Got: {type(exceedance_fraction)}"
            )
        if not 0 < exceedance_fraction <= 1:
            raise InvalidArgumentError(
                f"exceedance_fraction must be in (0, 1]. Got: {exceedance_fraction}"
            )
        self.pot = pot_distribution
        self.threshold = float(threshold)
        self.exceedance_fraction = float(exceedance_fraction)

    def cdf(self, x: ArrayLike) -> NDArray[np.float64]:
        x = np.asarray(x, dtype=float)
        data_points = np.atleast_1d(x)
        out = np.full(data_points.shape, np.nan)

        above_threshold = data_points >= self.threshold
        if np.any(above_threshold):
            pot_ccdf = 1.0 - np.asarray(
                self.pot.cdf(data_points[above_threshold] - self.threshold)
            )
            out[above_threshold] = 1.0 - self.exceedance_fraction * pot_ccdf
        return out.reshape(x.shape)

    def __repr__(self):
        return (
            f"PeaksOverThreshold({self.pot!r}, threshold={self.threshold}, "
            f"exceedance_fraction={self.exceedance_fraction})"
        )
