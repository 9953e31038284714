"""This submodule contains the Expression class and its node kinds
(Constant, Variable, Sum, Difference, Product and Power), along with
functions for evaluating and differentiating expression trees and for
converting between expression trees and numpy.poly1d objects.

Expression trees are immutable.  Every operation that "changes" a tree,
such as differentiate(), returns a brand new tree."""

# External dependencies
from numbers import Real
import numpy as np

# Internal dependencies
from .misctools import DifferentiationUnsupported, is_nonnegative_integer


# Conversion ##################################################################

def poly2expr(poly):
    """Converts a polynomial to an expression tree.
    INPUT:
    poly - a numpy.poly1d object or a sequence of real coefficients,
        highest degree first (numpy ordering).
    OUTPUT:
    A left-nested chain of Sum/Difference nodes with one term per nonzero
    coefficient.  The term c*x^k is Power(Variable, k) when c == 1 and
    Product(Constant(c), Power(Variable, k)) otherwise, so only polynomials
    whose non-constant coefficients are all 1 can be differentiated.
    Note: the zero polynomial becomes Constant(0)."""
    coeffs = [float(c) for c in np.poly1d(poly).coeffs]
    degree = len(coeffs) - 1

    expr = None
    for idx, c in enumerate(coeffs):
        if c == 0:
            continue
        k = degree - idx
        if expr is None:
            expr = _monomial(c, k)
        elif c < 0:
            expr = Difference(expr, _monomial(-c, k))
        else:
            expr = Sum(expr, _monomial(c, k))
    if expr is None:
        return Constant(0)
    return expr


def _monomial(c, k):
    if k == 0:
        return Constant(c)
    if c == 1:
        return Power(Variable(), k)
    return Product(Constant(c), Power(Variable(), k))


def expr2poly(expr):
    """Returns the numpy.poly1d object equal to expr.  Raises ValueError if
    expr is not a polynomial, i.e. if it contains a Power node whose exponent
    is not a non-negative integer."""
    return expr.poly()


def evaluate(expr, x):
    """Evaluates the expression tree expr at x."""
    if not isinstance(expr, Expression):
        raise TypeError("Input `expr` should be an Expression, not a "
                        "%s." % type(expr).__name__)
    return expr.evaluate(x)


def differentiate(expr):
    """Returns a new expression tree equal to d/dx of expr.
    Raises DifferentiationUnsupported for anything outside the sum,
    difference and (variable-only) power rules."""
    if not isinstance(expr, Expression):
        raise DifferentiationUnsupported(
            "Cannot differentiate an object of type "
            "%s." % type(expr).__name__)
    return expr.differentiate()


def _check_child(child, name):
    if not isinstance(child, Expression):
        raise TypeError("`%s` should be an Expression, not a "
                        "%s." % (name, type(child).__name__))
    return child


def _check_number(value, name):
    if not isinstance(value, Real):
        raise TypeError("`%s` should be a real number, not a "
                        "%s." % (name, type(value).__name__))
    return float(value)


def _promote(other):
    """Wraps plain numbers in a Constant so they can be used as operands."""
    if isinstance(other, Expression):
        return other
    if isinstance(other, Real):
        return Constant(other)
    return None


# Main Classes ################################################################


class Expression(object):
    """Abstract base class of all expression tree nodes.

    Subclasses store their fields with object.__setattr__ in __init__ and
    are read-only afterwards."""
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError("%s objects are immutable."
                             "" % type(self).__name__)

    def __delattr__(self, name):
        raise AttributeError("%s objects are immutable."
                             "" % type(self).__name__)

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented
        return not eq

    def __call__(self, x):
        return self.evaluate(x)

    def __add__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        return Sum(self, other)

    def __radd__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        return Sum(other, self)

    def __sub__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        return Difference(self, other)

    def __rsub__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        return Difference(other, self)

    def __mul__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        return Product(self, other)

    def __rmul__(self, other):
        other = _promote(other)
        if other is None:
            return NotImplemented
        return Product(other, self)

    def __pow__(self, exponent):
        if not isinstance(exponent, Real):
            return NotImplemented
        return Power(self, exponent)

    def evaluate(self, x):
        """returns the value of the expression at x."""
        raise NotImplementedError

    def differentiate(self):
        """returns a new expression equal to the derivative of this one."""
        raise DifferentiationUnsupported(
            "Differentiation rule not implemented for "
            "%s." % type(self).__name__)

    def derivative(self, n=1):
        """returns the nth derivative of the expression, as an expression."""
        if not is_nonnegative_integer(n) or n == 0:
            raise ValueError("n should be a positive integer.")
        expr = self
        for _ in range(int(n)):
            expr = expr.differentiate()
        return expr

    def poly(self):
        """returns the expression as a numpy.poly1d object."""
        raise NotImplementedError

    def children(self):
        """returns a tuple of the expression's direct subexpressions."""
        return ()

    def depth(self):
        """returns the number of nodes on the longest root-to-leaf path."""
        return 1 + max([c.depth() for c in self.children()] or [0])

    def __len__(self):
        """The number of nodes in the tree."""
        return 1 + sum(len(c) for c in self.children())


class Constant(Expression):
    __slots__ = ('_value',)

    def __init__(self, value):
        object.__setattr__(self, '_value', _check_number(value, 'value'))

    @property
    def value(self):
        return self._value

    def __hash__(self):
        return hash(('Constant', self._value))

    def __repr__(self):
        return 'Constant(%r)' % self._value

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return isinstance(other, Constant) and self._value == other._value

    def evaluate(self, x):
        return self._value

    def differentiate(self):
        # d/dx(c) = 0
        return Constant(0)

    def poly(self):
        return np.poly1d([self._value])


class Variable(Expression):
    """The single free variable, x.  All Variable instances are equal."""
    __slots__ = ()

    def __hash__(self):
        return hash('Variable')

    def __repr__(self):
        return 'Variable'

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return isinstance(other, Variable)

    def evaluate(self, x):
        return x

    def differentiate(self):
        # d/dx(x) = 1
        return Constant(1)

    def poly(self):
        return np.poly1d([1., 0.])


class _BinaryExpression(Expression):
    __slots__ = ('_left', '_right')

    def __init__(self, left, right):
        object.__setattr__(self, '_left', _check_child(left, 'left'))
        object.__setattr__(self, '_right', _check_child(right, 'right'))

    @property
    def left(self):
        return self._left

    @property
    def right(self):
        return self._right

    def children(self):
        return self._left, self._right

    def __hash__(self):
        return hash((type(self).__name__, self._left, self._right))

    def __repr__(self):
        return '%s(%r, %r)' % (type(self).__name__, self._left, self._right)

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return (type(self) is type(other) and
                self._left == other._left and
                self._right == other._right)


class Sum(_BinaryExpression):
    __slots__ = ()

    def evaluate(self, x):
        return self._left.evaluate(x) + self._right.evaluate(x)

    def differentiate(self):
        # d/dx(f + g) = f' + g'
        return Sum(self._left.differentiate(), self._right.differentiate())

    def poly(self):
        return self._left.poly() + self._right.poly()


class Difference(_BinaryExpression):
    __slots__ = ()

    def evaluate(self, x):
        return self._left.evaluate(x) - self._right.evaluate(x)

    def differentiate(self):
        # d/dx(f - g) = f' - g'
        return Difference(self._left.differentiate(),
                          self._right.differentiate())

    def poly(self):
        return self._left.poly() - self._right.poly()


class Product(_BinaryExpression):
    """Note: there is no product rule, so differentiate() always raises
    DifferentiationUnsupported."""
    __slots__ = ()

    def evaluate(self, x):
        return self._left.evaluate(x) * self._right.evaluate(x)

    def differentiate(self):
        raise DifferentiationUnsupported(
            "Differentiation rule not implemented for Product "
            "(no product rule): %r" % self)

    def poly(self):
        return self._left.poly() * self._right.poly()


class Power(Expression):
    """base raised to a constant, real exponent."""
    __slots__ = ('_base', '_exponent')

    def __init__(self, base, exponent):
        object.__setattr__(self, '_base', _check_child(base, 'base'))
        object.__setattr__(self, '_exponent',
                           _check_number(exponent, 'exponent'))

    @property
    def base(self):
        return self._base

    @property
    def exponent(self):
        return self._exponent

    def children(self):
        return self._base,

    def __hash__(self):
        return hash(('Power', self._base, self._exponent))

    def __repr__(self):
        return 'Power(%r, %r)' % (self._base, self._exponent)

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return (isinstance(other, Power) and
                self._base == other._base and
                self._exponent == other._exponent)

    def evaluate(self, x):
        # numpy float64 power gives nan for a negative base with a
        # non-integer exponent and inf for 0**(negative), where the builtin
        # ** would return a complex or raise ZeroDivisionError
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return float(np.power(np.float64(self._base.evaluate(x)),
                                  self._exponent))

    def differentiate(self):
        # d/dx(x^n) = n*x^(n-1), only for a bare variable base
        if not isinstance(self._base, Variable):
            raise DifferentiationUnsupported(
                "Differentiation is only implemented for powers of the "
                "variable, not %r" % self)
        return Product(Constant(self._exponent),
                       Power(Variable(), self._exponent - 1))

    def poly(self):
        if not is_nonnegative_integer(self._exponent):
            raise ValueError("Expression is not a polynomial: %r has a "
                             "non-integer or negative exponent." % self)
        return self._base.poly() ** int(self._exponent)
