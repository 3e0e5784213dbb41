"""
Exceptions raised by the extremekit numerical routines and distributions.

All exceptions derive from ``ExtremeError`` and from the closest built-in
exception, so callers can catch either.
"""


class ExtremeError(Exception):
    pass


class InvalidArgumentError(ExtremeError, ValueError, TypeError):
    """Non-numeric or out-of-domain input."""


class BracketingError(ExtremeError, ValueError):
    """A sign-changing bracket could not be established."""


class NotBracketedError(BracketingError):
    """f(a) and f(b) do not have opposite signs."""


class DegenerateIntervalError(ExtremeError, ValueError):
    """Both integration bounds are infinite with the same sign."""
