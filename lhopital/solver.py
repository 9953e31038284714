"""This submodule contains lhopital_solve(), which computes the limit of a
quotient of two expression trees at a point by applying L'Hopital's rule for
as long as the quotient has the indeterminate form 0/0.

Each iteration is logged at DEBUG level on the "lhopital.solver" logger.  To
see the iterations, e.g.
>>> import logging
>>> logging.basicConfig(level=logging.DEBUG)"""

# External dependencies
import logging

# Internal dependencies
from .expression import differentiate, evaluate
from .misctools import (DivisionByZero, MaxIterationsExceeded, is_near_zero,
                        is_nonnegative_integer)

logger = logging.getLogger(__name__)

# Default Parameters ##########################################################

# values closer than this to zero are treated as zero, both when checking
# for 0/0 and when checking for a vanishing denominator
LHOPITAL_TOL = 1e-9

LHOPITAL_MAXITS = 5


def lhopital_solve(numerator, denominator, at, max_iterations=LHOPITAL_MAXITS,
                   report=None):
    """Computes the limit of numerator/denominator as x approaches `at`.

    While both expressions evaluate to (nearly) zero at `at`, they are
    replaced by their derivatives and re-evaluated.  The first iteration
    that is not 0/0 decides the outcome.

    INPUT:
    numerator, denominator - Expression objects.
    at - the point the limit is taken at.
    max_iterations - the number of evaluations allowed.  With
        max_iterations=0 nothing is evaluated and MaxIterationsExceeded is
        raised immediately.
    report - an optional callable, report(i, numerator, denominator,
        num_val, den_val), called at each iteration i (starting from 0)
        with the current expressions and their values at `at`, before they
        are classified.  Its return value is ignored.

    OUTPUT:
    The limit, as a float.

    Raises DivisionByZero if the denominator vanishes at `at` but the
    numerator does not, MaxIterationsExceeded if the quotient is still 0/0
    after max_iterations iterations, and DifferentiationUnsupported if a
    derivative is needed that can't be computed (e.g. of a Product)."""
    if not is_nonnegative_integer(max_iterations):
        raise ValueError("max_iterations should be a non-negative integer.")
    at = float(at)
    num, den = numerator, denominator

    for i in range(int(max_iterations)):
        num_val = evaluate(num, at)
        den_val = evaluate(den, at)

        logger.debug("Iteration %d: numerator=%r, denominator=%r, "
                     "evaluated at x = %s: %.4f / %.4f",
                     i, num, den, at, num_val, den_val)
        if report is not None:
            report(i, num, den, num_val, den_val)

        if (is_near_zero(num_val, LHOPITAL_TOL) and
                is_near_zero(den_val, LHOPITAL_TOL)):
            logger.debug("Result is 0/0. Applying L'Hopital's rule.")
            num, den = differentiate(num), differentiate(den)
        elif is_near_zero(den_val, LHOPITAL_TOL):
            raise DivisionByZero("Limit results in division by zero: "
                                 "%r / %r at x = %s." % (num_val, den_val, at))
        else:
            logger.debug("Limit found.")
            return num_val/den_val

    raise MaxIterationsExceeded("Exceeded %d iterations, could not find a "
                                "determinate form." % max_iterations)
