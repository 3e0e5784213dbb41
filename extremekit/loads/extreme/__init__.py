"""
This package provides tools for short-term extreme value analysis of a
response from the distribution of its peaks.

It includes the peaks distribution interface, the short-term extreme
distribution derived from it, and return level estimation.
"""

from extremekit.loads.extreme.extremes import (
    ShortTermExtremeDistribution,
    ste_peaks,
)

from extremekit.loads.extreme.peaks import (
    PeaksDistribution,
    ScipyPeaksDistribution,
    PeaksOverThreshold,
)

from extremekit.loads.extreme.sample import (
    return_year_value,
)
