"""Computes the limit of f(x) = (x^2 - 4)/(x - 2) as x -> 2.

Substituting x = 2 gives 0/0, so lhopital_solve() differentiates the
numerator and denominator once (getting 2x and 1) and evaluates again.
The report callback below prints each iteration as it happens."""
from lhopital import *


def print_iteration(i, numerator, denominator, num_val, den_val):
    print("Iteration {}:".format(i))
    print("  Numerator: {!r}".format(numerator))
    print("  Denominator: {!r}".format(denominator))
    print("  Evaluated: {:.4f} / {:.4f}".format(num_val, den_val))


if __name__ == '__main__':
    x = Variable()
    numerator = Difference(Power(x, 2.0), Constant(4.0))
    denominator = Difference(x, Constant(2.0))
    limit_point = 2.0

    print("Calculating limit of f(x) = (x^2 - 4) / (x - 2) as x -> {}\n"
          "".format(limit_point))
    try:
        result = lhopital_solve(numerator, denominator, limit_point, 5,
                                report=print_iteration)
    except LimitError as e:
        print("\nError: {}".format(e))
    else:
        print("\nFinal Result: {}".format(result))
