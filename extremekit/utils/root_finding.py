"""
Bracketed root finding for monotone functions of one variable.

Functions:
- expand_bracket: Exponential search for an interval on which a
  non-decreasing function changes sign.
- brentq: Brent's method on a sign-changing interval, returning the root
  and a summary of the iterations.
- solve: Convenience wrapper around `brentq` returning only the root.

The two stages only communicate through the (low, high) pair returned by
`expand_bracket`, so each can be used and tested on its own.
"""

import logging
import warnings
from typing import Callable, NamedTuple, Tuple

import numpy as np

from extremekit.errors import BracketingError, NotBracketedError

logger = logging.getLogger(__name__)

XTOL = 1e-12
MAXITER = 100
BRACKET_START = -10.0
BRACKET_FACTOR = 10.0


class RootResults(NamedTuple):
    root: float
    iterations: int
    function_calls: int
    converged: bool
    flag: str


def expand_bracket(
    func: Callable[[float], float],
    start: float = BRACKET_START,
    factor: float = BRACKET_FACTOR,
) -> Tuple[float, float]:
    """
    Find an interval on which a non-decreasing function changes sign.

    The search first moves the left end point down (multiplying it by
    `factor`) while `func` is still positive there. If no right end point
    was found on the way down, it then moves a right end point up from
    `max(factor, left)` until `func` is no longer negative.

    Parameters
    ----------
    func: callable
        Non-decreasing function of one variable, e.g. `cdf(x) - q`.
    start: float
        Initial left end point. Must be negative.
    factor: float
        Growth factor of the search. Must be greater than 1.

    Returns
    -------
    low, high: float
        Bracket end points with `func(low) <= 0 <= func(high)`.
    """
    if not start < 0:
        raise ValueError(f"start must be negative. Got: {start}")
    if not factor > 1:
        raise ValueError(f"factor must be greater than 1. Got: {factor}")

    left = start
    right = np.inf
    while func(left) > 0:
        right = left
        left = left * factor
        logger.debug("Moving left end point down to %g", left)
        if np.isinf(left):
            raise BracketingError(
                f"No point with func(x) <= 0 found down to {right * factor}"
            )

    if np.isinf(right):
        right = max(factor, left)
        while func(right) < 0:
            left = right
            right = right * factor
            logger.debug("Moving right end point up to %g", right)
            if np.isinf(right):
                raise BracketingError(
                    f"No point with func(x) >= 0 found up to {left * factor}"
                )

    logger.debug("Bracket found: [%g, %g]", left, right)
    return left, right


# pylint: disable=R0912,R0914
def brentq(
    func: Callable[[float], float],
    a: float,
    b: float,
    xtol: float = XTOL,
    maxiter: int = MAXITER,
) -> Tuple[float, RootResults]:
    """
    Find a root of a function in a bracketing interval using Brent's
    method.

    This is the classic van Wijngaarden-Dekker-Brent method: a safe
    version of the secant method that combines root bracketing, interval
    bisection and inverse quadratic interpolation. Brent (1973) claims
    convergence is guaranteed for functions computable within [a, b].

    Parameters
    ----------
    func: callable
        Continuous function of one variable returning a float.
    a, b: float
        Bracket end points. `func(a)` and `func(b)` must have opposite
        signs.
    xtol: float
        Iterations stop once the bracket is at most this wide.
    maxiter: int
        Maximum number of iterations. When exhausted the current
        candidate is returned and a RuntimeWarning is issued.

    Returns
    -------
    root: float
        Estimate of the root.
    results: RootResults
        Iteration count, number of function calls and convergence flag.

    Raises
    ------
    NotBracketedError
        If `func(a) * func(b) >= 0`. No iterations are performed.

    Notes
    -----
    Numerical Recipes, 2nd ed., section 9.3.
    """
    f_a = func(a)
    f_b = func(b)
    function_calls = 2
    if f_a * f_b >= 0:
        raise NotBracketedError(
            f"f(a) and f(b) must have opposite signs. "
            f"Got: f({a}) = {f_a}, f({b}) = {f_b}"
        )

    # b is the best estimate so far
    if abs(f_a) < abs(f_b):
        a, b = b, a
        f_a, f_b = f_b, f_a
    c, f_c = a, f_a
    d = c
    bisected = True
    iterations = 0
    converged = True
    s = b

    while abs(b - a) > xtol:
        if f_a != f_c and f_b != f_c and f_a != f_b:
            # Inverse quadratic interpolation
            s = (
                a * f_b * f_c / ((f_a - f_b) * (f_a - f_c))
                + b * f_a * f_c / ((f_b - f_a) * (f_b - f_c))
                + c * f_a * f_b / ((f_c - f_a) * (f_c - f_b))
            )
        elif f_a != f_b:
            # Secant
            s = b - f_b * (b - a) / (f_b - f_a)
        else:
            s = None

        if (
            s is None
            or not ((3 * a + b) / 4 < s < b)
            or (bisected and abs(s - b) >= abs(b - c) / 2)
            or (not bisected and abs(s - b) >= abs(c - d) / 2)
            or (bisected and abs(b - c) < xtol)
            or (not bisected and abs(c - d) < xtol)
        ):
            s = (a + b) / 2
            bisected = True
        else:
            bisected = False

        # a and b are neighbouring floats, no narrower bracket exists
        if s in (a, b):
            s = b
            break

        f_s = func(s)
        function_calls += 1
        iterations += 1
        if f_s == 0:
            break

        d = c
        c, f_c = b, f_b
        if f_a * f_s < 0:
            b, f_b = s, f_s
        else:
            a, f_a = s, f_s

        if abs(f_a) < abs(f_b):
            a, b = b, a
            f_a, f_b = f_b, f_a

        if iterations > maxiter:
            converged = False
            break

    if converged:
        logger.debug("brentq converged to %r in %d iterations", s, iterations)
    else:
        msg = (
            f"brentq failed to converge after {maxiter} iterations, "
            f"bracket width {abs(b - a):g}. Returning best estimate {s!r}."
        )
        logger.warning(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    results = RootResults(
        root=s,
        iterations=iterations,
        function_calls=function_calls,
        converged=converged,
        flag="converged" if converged else "maxiter",
    )
    return s, results


def solve(
    func: Callable[[float], float],
    a: float,
    b: float,
    xtol: float = XTOL,
    maxiter: int = MAXITER,
) -> float:
    """
    Alias for `brentq` returning only the root.
    """
    root, _ = brentq(func, a, b, xtol=xtol, maxiter=maxiter)
    return root
