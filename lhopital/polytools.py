"""This submodule contains tools for working with numpy.poly1d objects."""

# External Dependencies
import warnings
import numpy as np

# Internal Dependencies
from .misctools import (DivisionByZero, MaxIterationsExceeded, is_near_zero,
                        is_nonnegative_integer)

# Default Parameters ##########################################################

RATIONAL_LIMIT_TOL = 1e-9
RATIONAL_LIMIT_MAXITS = 100


def rational_limit(f, g, t0, tol=RATIONAL_LIMIT_TOL,
                   maxits=RATIONAL_LIMIT_MAXITS):
    """Computes the limit of the rational function (f/g)(t)
    as t approaches t0.
    INPUT:
    f, g - numpy.poly1d objects (the numerator and denominator).
    t0 - the point the limit is taken at.
    tol - values with absolute value below tol are treated as zero.
    maxits - the maximum number of times L'Hopital's rule may be applied.
    OUTPUT:
    The limit, as a float.  Raises DivisionByZero if g(t0) is (near) zero
    but f(t0) is not, and MaxIterationsExceeded if f and g are still both
    zero at t0 after maxits differentiations (which can only happen when
    maxits is smaller than the degree of g, or when f and g are both the
    zero polynomial)."""
    if not (isinstance(f, np.poly1d) and isinstance(g, np.poly1d)):
        raise TypeError("f and g must be numpy.poly1d objects.")
    if not is_nonnegative_integer(maxits):
        raise ValueError("maxits should be a non-negative integer.")
    if g == np.poly1d([0]):
        warnings.warn("The denominator is the zero polynomial.")

    for _ in range(int(maxits)):
        f_t0, g_t0 = f(t0), g(t0)
        if is_near_zero(f_t0, tol) and is_near_zero(g_t0, tol):
            f, g = f.deriv(), g.deriv()
        elif is_near_zero(g_t0, tol):
            raise DivisionByZero("Limit does not exist.")
        else:
            return float(f_t0/g_t0)
    raise MaxIterationsExceeded("Maximum iterations reached without finding "
                                "a determinate form.")
