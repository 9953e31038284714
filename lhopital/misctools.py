"""This submodule contains miscellaneous tools that are used internally, but
aren't specific to expression trees or limits."""


class LimitError(Exception):
    """Base class for every way a limit computation can fail.  Catch this to
    handle DivisionByZero, MaxIterationsExceeded and
    DifferentiationUnsupported at once."""


class DivisionByZero(LimitError, ZeroDivisionError):
    """The denominator vanishes at the limit point but the numerator does
    not, so the limit is undefined (or infinite)."""


class MaxIterationsExceeded(LimitError, RuntimeError):
    """Repeated differentiation did not reach a determinate form within the
    allowed number of iterations."""


class DifferentiationUnsupported(LimitError, NotImplementedError):
    """No differentiation rule exists for this kind of expression."""


def isclose(a, b, rtol=1e-5, atol=1e-8):
    """This is essentially np.isclose, but slightly faster."""
    return abs(a - b) < (atol + rtol * abs(b))


def is_near_zero(value, tol):
    """True if |value| is strictly less than tol.  NaN is never near zero."""
    return abs(value) < tol


def is_nonnegative_integer(n):
    """True for ints (and integral floats) greater than or equal to zero."""
    try:
        return n >= 0 and int(n) == n
    except (TypeError, ValueError, OverflowError):
        return False
