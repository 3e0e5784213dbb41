"""
Fixed-stencil numerical differentiation.

`derivative` estimates the first derivative of a function with the
fourth-order five-point central difference

    f'(x) ~ (f(x - 2h) - 8 f(x - h) + 8 f(x + h) - f(x + 2h)) / (12 h)

The step is fixed. A different accuracy needs a different stencil, not a
different step.
"""

from typing import Callable

import numpy as np

DX = 1e-5
WEIGHTS = np.array([1, -8, 0, 8, -1])
DENOMINATOR = 12


def derivative(
    func: Callable[[np.ndarray], np.ndarray], x: np.ndarray, dx: float = DX
) -> np.ndarray:
    """
    Find the first derivative of a function at `x` using a five-point
    central difference formula with spacing `dx`.

    Parameters
    ----------
    func: callable
        Vectorised function of one variable.
    x: float or np.ndarray
        Evaluation points.
    dx: float
        Spacing.

    Returns
    -------
    np.ndarray
        Derivative estimate, same shape as `x`.
    """
    x = np.asarray(x, dtype=float)
    val = np.zeros_like(x)
    half = len(WEIGHTS) >> 1
    for k, weight in enumerate(WEIGHTS):
        val = val + weight * np.asarray(func(x + (k - half) * dx))
    return val / (DENOMINATOR * dx)
