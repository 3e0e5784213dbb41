"""
This module provides return level estimation from a short-term extreme
distribution: the value exceeded on average once per return period.

Functionality:
- return_year_value: Calculates the value from a given distribution
 corresponding to a specified return year.

"""

from typing import Callable

from extremekit.errors import InvalidArgumentError


def return_year_value(
    ppf: Callable[[float], float], return_year: float, short_term_period_hr: float
) -> float:
    """
    Calculate the value from a given distribution corresponding to a particular
    return year.

    Parameters
    ----------
    ppf: callable function of 1 argument
        Percentage Point Function (inverse CDF) of short term distribution,
        e.g. `ShortTermExtremeDistribution.ppf`.
    return_year: int, float
        Return period in years.
    short_term_period_hr: int, float
        Short term period the distribution is created from in hours.

    Returns
    -------
    value: float
        The value corresponding to the return period from the distribution.
    """
    if not callable(ppf):
        raise InvalidArgumentError("ppf must be a callable Percentage Point Function")
    if not isinstance(return_year, (float, int)) or isinstance(return_year, bool):
        raise InvalidArgumentError(
            f"return_year must be of type float or int. Got: {type(return_year)}"
        )
    if not isinstance(short_term_period_hr, (float, int)) or isinstance(
        short_term_period_hr, bool
    ):
        raise InvalidArgumentError(
            f"short_term_period_hr must be of type float or int. Got: {type(short_term_period_hr)}"
        )
    if return_year <= 0 or short_term_period_hr <= 0:
        raise InvalidArgumentError(
            "return_year and short_term_period_hr must be positive. "
            + f"Got: {return_year}, {short_term_period_hr}"
        )

    probability_of_exceedance = 1 / (return_year * 365.25 * 24 / short_term_period_hr)

    return ppf(1 - probability_of_exceedance)
