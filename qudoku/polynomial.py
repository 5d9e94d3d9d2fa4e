import operator
from abc import ABC, abstractmethod
from fractions import Fraction
from functools import reduce
from typing import Any, NamedTuple

from .exceptions import DuplicateEvaluationInputError
from .field import GFElement


class Evaluation(NamedTuple):
    """
    A polynomial evaluation at a certain input and output, which may be of
    different types. Effectively a tuple of ``(input, output)``.
    """

    input: Any
    output: Any


def strip_trailing_zeros(a):
    end = len(a)
    while end > 0 and not a[end - 1]:
        end -= 1
    return list(a[:end])


def checked_div(numerator, denominator):
    """
    Divide ``numerator`` by ``denominator``, refusing a zero divisor.

    This is the only division used by the package. Field elements are
    divided by multiplying with the inverse; plain integers and fractions
    produce an exact ``Fraction``.
    """
    if not denominator:
        raise DuplicateEvaluationInputError(
            "division by zero; evaluations must have distinct inputs"
        )
    if isinstance(denominator, GFElement):
        return numerator * ~denominator
    if isinstance(numerator, GFElement):
        return numerator * ~numerator.field(denominator)
    return Fraction(numerator) / denominator


def horner_evaluate(x, coefficients):
    """
    Evaluate a standard-form polynomial using Horner's method.

    The ``coefficients`` are in ascending order of degree, starting with the
    constant term. With coefficients ``[a0, a1, a2, a3]``::

        f(x) = a0 + x(a1 + x(a2 + x(a3)))

    An empty coefficient list evaluates to ``0``.
    """
    if len(coefficients) == 0:
        return 0

    # Seeding with the leading coefficient keeps the output in the
    # coefficient type, so points and scalars work alike.
    out = coefficients[-1]
    for a in reversed(coefficients[:-1]):
        out = out * x + a
    return out


def lagrange_basis(evaluations, index, x):
    """
    Evaluate the Lagrange basis polynomial of ``evaluations[index]`` at ``x``.

    Returns ``1`` if ``x`` is the input of ``evaluations[index]`` and zero
    if it is the input of any other evaluation. Duplicate inputs raise
    DuplicateEvaluationInputError.
    """
    x_i = evaluations[index].input

    if x == x_i:
        return 1

    # Numerator and denominator are accumulated separately so that only a
    # single division is needed.
    numerator = 1
    denominator = 1

    for j, evaluation in enumerate(evaluations):
        if j == index:
            continue

        numerator = numerator * (x - evaluation.input)
        if not numerator:
            return numerator

        denominator = denominator * (x_i - evaluation.input)
        if not denominator:
            raise DuplicateEvaluationInputError(
                f"evaluations {index} and {j} share the input {x_i}"
            )

    return checked_div(numerator, denominator)


class Polynomial(ABC):
    """
    Common interface of polynomials, whatever their representation.
    """

    @abstractmethod
    def evaluate(self, x):
        """Evaluate the polynomial on a given input."""

    @abstractmethod
    def degree(self):
        """Degree of the polynomial. Degenerate polynomials have degree zero."""

    def interpolation_threshold(self):
        """
        Number of evaluations needed to interpolate this polynomial.
        """
        return self.degree() + 1

    def issue_share(self, x):
        """Evaluate at ``x`` and pair the output with its input."""
        return Evaluation(x, self.evaluate(x))

    def __call__(self, x):
        return self.evaluate(x)


class StandardFormPolynomial(Polynomial):
    """
    A polynomial expressed in standard form by its coefficients, starting
    with the constant term.

    Coefficients can be anything supporting ``+`` among themselves and
    ``*`` with the inputs the polynomial is evaluated on: integers, field
    elements or curve points.
    """

    def __init__(self, coefficients):
        self.coefficients = tuple(coefficients)

    def __repr__(self):
        if not self.coefficients:
            return "0"
        return " + ".join(
            ["%s x^%d" % (a, i) if i > 0 else "%s" % a for i, a in enumerate(self.coefficients)]
        )

    def __eq__(self, other):
        if not isinstance(other, StandardFormPolynomial):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __hash__(self):
        return hash(self.coefficients)

    def __len__(self):
        return len(self.coefficients)

    def __iter__(self):
        return iter(self.coefficients)

    def evaluate(self, x):
        return horner_evaluate(x, self.coefficients)

    def degree(self):
        # Trailing zero coefficients do not count
        return max(len(strip_trailing_zeros(self.coefficients)) - 1, 0)


class LagrangePolynomial(Polynomial):
    """
    A polynomial represented by a set of evaluations, evaluated using
    Lagrange interpolation without ever recovering its coefficients.

    The evaluations must have distinct inputs. Evaluating a polynomial built
    from duplicate inputs raises DuplicateEvaluationInputError.
    """

    def __init__(self, evaluations):
        self.evaluations = tuple(Evaluation(*evaluation) for evaluation in evaluations)

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, list(self.evaluations))

    def __eq__(self, other):
        if not isinstance(other, LagrangePolynomial):
            return NotImplemented
        return self.evaluations == other.evaluations

    def __hash__(self):
        return hash(self.evaluations)

    def __len__(self):
        return len(self.evaluations)

    def __iter__(self):
        return iter(self.evaluations)

    def evaluate(self, x):
        if len(self.evaluations) == 0:
            return 0

        inputs = [evaluation.input for evaluation in self.evaluations]
        if len(set(inputs)) != len(inputs):
            raise DuplicateEvaluationInputError("evaluations must have distinct inputs")

        terms = (
            evaluation.output * lagrange_basis(self.evaluations, i, x)
            for i, evaluation in enumerate(self.evaluations)
        )
        return reduce(operator.add, terms)

    def degree(self):
        return max(len(self.evaluations) - 1, 0)
