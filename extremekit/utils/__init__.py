"""
This module initializes and imports the numerical and type-handling
utilities used by the extremekit distributions: bracketed root finding,
fixed-stencil differentiation, adaptive quadrature and input conversion.
"""

from .root_finding import RootResults, expand_bracket, brentq, solve
from .differentiation import derivative
from .integration import quad
from .type_handling import to_numeric_array, to_probability_array, restore_shape
