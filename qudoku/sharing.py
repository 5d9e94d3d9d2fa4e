"""
Shamir secret sharing over secp256k1.

A dealer builds a :class:`SecretSharingPolynomial` whose constant term is
the secret and issues one :data:`SecretShare` per shareholder. Multiplying
the polynomial by a fixed point ``Q`` gives a :class:`PointSharingPolynomial`
whose evaluations (:data:`PointShare`) can be distributed publicly. Any
threshold-sized set of shares can be turned into an interpolated polynomial
which evaluates exactly like the dealer's polynomial.
"""
import secrets

from .elliptic_curve import G, Point, Scalar, secp256k1
from .field import FieldsNotIdentical, GFElement
from .hashing import sha256
from .polynomial import Evaluation, LagrangePolynomial, StandardFormPolynomial

# A share of a secret, held by exactly one shareholder: (Scalar, Scalar)
SecretShare = Evaluation

# A secret share multiplied by a fixed point, fit for distribution: (Scalar, Point)
PointShare = Evaluation


def _to_scalar(value):
    if isinstance(value, GFElement):
        if value.field is not Scalar:
            raise FieldsNotIdentical
        return value
    if isinstance(value, int):
        return Scalar(value)
    raise TypeError(f"expected a secp256k1 scalar, got {type(value)}")


def _to_point(value):
    if isinstance(value, Point):
        return value
    raise TypeError(f"expected a secp256k1 point, got {type(value)}")


def random_coefficients(n, rng=None):
    """
    Returns ``n`` uniformly random non-zero scalars.

    Uses the operating system's CSPRNG unless another ``rng`` (anything with
    a ``randint`` method, e.g. a seeded ``random.Random``) is given.
    """
    if rng is None:
        rng = secrets.SystemRandom()
    return [Scalar(rng.randint(1, Scalar.modulus - 1)) for _ in range(n)]


def issue_share(polynomial, x):
    """Evaluate ``polynomial`` at ``x`` and pair the output with its input."""
    if isinstance(polynomial, _ScalarInputs):
        x = _to_scalar(x)
    return Evaluation(x, polynomial.evaluate(x))


def derive_secret(polynomial, x):
    """
    Evaluates a point-valued polynomial at ``x`` and hashes the compressed
    encoding of the resulting point into 32 bytes of secret material.
    """
    point = polynomial.evaluate(x)
    if not isinstance(point, Point):
        raise TypeError(f"derive_secret needs a point-valued polynomial, got {type(point)}")
    return sha256(point.serialize())


class _ScalarInputs(object):
    """Polynomials evaluated on secp256k1 scalars; integers are coerced."""

    _zero = staticmethod(Scalar.zero)

    def evaluate(self, x):
        x = _to_scalar(x)
        if len(self) == 0:
            return self._zero()
        return super().evaluate(x)

    def issue_share(self, x):
        return issue_share(self, x)


class _PointOutputs(_ScalarInputs):
    _zero = staticmethod(secp256k1.infinity)

    def derive_secret(self, x):
        return derive_secret(self, x)


class SecretSharingPolynomial(_ScalarInputs, StandardFormPolynomial):
    """The dealer's polynomial, with scalar coefficients."""

    def __init__(self, coefficients):
        super().__init__(_to_scalar(c) for c in coefficients)

    @classmethod
    def random(cls, degree, secret=None, rng=None):
        """
        A random polynomial of the given degree, i.e. with a threshold of
        ``degree + 1`` shares. The constant term is ``secret`` if given.
        """
        if degree < 0:
            raise ValueError(f"degree must be non-negative, got {degree}")
        coefficients = random_coefficients(degree + 1, rng)
        if secret is not None:
            coefficients[0] = _to_scalar(secret)
        return cls(coefficients)


class PointSharingPolynomial(_PointOutputs, StandardFormPolynomial):
    """The dealer's polynomial multiplied by a fixed point."""

    def __init__(self, coefficients):
        super().__init__(_to_point(c) for c in coefficients)


class InterpolatedSecretPolynomial(_ScalarInputs, LagrangePolynomial):
    """A secret-sharing polynomial interpolated from secret shares."""

    def __init__(self, shares):
        super().__init__(
            Evaluation(_to_scalar(x), _to_scalar(y)) for x, y in shares
        )


class InterpolatedPointPolynomial(_PointOutputs, LagrangePolynomial):
    """A point-sharing polynomial interpolated from point shares."""

    def __init__(self, shares):
        super().__init__(
            Evaluation(_to_scalar(x), _to_point(y)) for x, y in shares
        )


def scalar_polynomial_to_point_polynomial(polynomial, point):
    """
    Multiplies every coefficient (standard form) or every output
    (interpolated form) of a scalar polynomial by ``point``.

    For every ``x`` the result satisfies
    ``result.evaluate(x) == polynomial.evaluate(x) * point``.
    """
    point = _to_point(point)

    if isinstance(polynomial, StandardFormPolynomial):
        return PointSharingPolynomial([c * point for c in polynomial.coefficients])
    if isinstance(polynomial, LagrangePolynomial):
        return InterpolatedPointPolynomial(
            [(e.input, e.output * point) for e in polynomial.evaluations]
        )

    raise TypeError(f"cannot map {type(polynomial)} to a point polynomial")


def scalar_polynomial_to_generator_polynomial(polynomial):
    return scalar_polynomial_to_point_polynomial(polynomial, G)
