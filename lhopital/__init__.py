from .expression import (Expression, Constant, Variable, Sum, Difference,
                         Product, Power, evaluate, differentiate, poly2expr,
                         expr2poly)
from .solver import lhopital_solve, LHOPITAL_TOL, LHOPITAL_MAXITS
from .polytools import rational_limit
from .misctools import (LimitError, DivisionByZero, MaxIterationsExceeded,
                        DifferentiationUnsupported)
