"""
Adaptive quadrature over an interval.

`quad` wraps `scipy.integrate.quad` (QUADPACK), which refines its
Gauss-Kronrod panels only where the local error estimate requires it, so
expensive integrands are evaluated no more than the adaptive scheme needs.
"""

import logging
from typing import Callable

import numpy as np
from scipy import integrate

from extremekit.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def quad(func: Callable[[float], float], a: float, b: float, limit: int = 50) -> float:
    """
    Compute the definite integral of `func` from `a` to `b`.

    Parameters
    ----------
    func: callable
        Function of one scalar variable.
    a, b: float
        Lower and upper limits of integration, `a <= b`.
    limit: int
        Upper bound on the number of subintervals used by the adaptive
        algorithm.

    Returns
    -------
    float
        The integral of `func` from `a` to `b`.
    """
    if np.isnan(a) or np.isnan(b):
        raise InvalidArgumentError(f"Integration limits must not be NaN. Got: {a}, {b}")
    if a > b:
        raise InvalidArgumentError(
            f"Lower limit must not exceed upper limit. Got: a={a}, b={b}"
        )
    if not isinstance(limit, int) or limit < 1:
        raise InvalidArgumentError(f"limit must be a positive int. Got: {limit}")

    value, abserr = integrate.quad(func, a, b, limit=limit)
    logger.debug("quad over [%g, %g] = %r (abserr %g)", a, b, value, abserr)
    return value
