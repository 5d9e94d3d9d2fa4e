from .exceptions import PointLiftError, PointNotOnCurveError
from .field import GF, FieldsNotIdentical, GFElement


class YParity:
    EVEN = "even"
    ODD = "odd"

    ALL = (EVEN, ODD)


class WeierstrassCurve(object):
    """
    A short Weierstrass curve of the form y^2 = x^3 + ax + b over a prime
    field, together with a generator of its prime-order group.
    """

    def __init__(self, p: int, a: int, b: int, order: int, gx: int, gy: int):
        self.field = GF(p)
        self.scalar_field = GF(order)
        self.order = order
        self.a = self.field(a)
        self.b = self.field(b)
        self._gx = gx
        self._gy = gy

        self.disc = -16 * (4 * self.a * self.a * self.a + 27 * self.b * self.b)
        if not self.is_smooth():
            raise ValueError(f"The curve {self} is not smooth!")

    def __str__(self) -> str:
        return "y^2 = x^3 + %sx + %s (mod %d)" % (self.a, self.b, self.field.modulus)

    def __repr__(self) -> str:
        return str(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeierstrassCurve):
            return NotImplemented
        return (self.field, self.a, self.b, self.order) == (
            other.field,
            other.a,
            other.b,
            other.order,
        )

    def __hash__(self):
        return hash((self.field.modulus, self.a, self.b, self.order))

    def is_smooth(self) -> bool:
        return self.disc != 0

    def contains_point(self, x: GFElement, y: GFElement) -> bool:
        """
        Checks whether or not the given coordinates sit on the curve
        """
        return y * y == x * x * x + self.a * x + self.b

    def generator(self) -> "Point":
        return Point(self._gx, self._gy, self)

    def infinity(self) -> "Infinity":
        return Infinity(self)

    def lift_x(self, x_bytes: bytes, parity: str = YParity.EVEN) -> "Point":
        """
        Interprets ``x_bytes`` as a big-endian x-coordinate and returns the
        curve point with that x-coordinate whose y-coordinate has the given
        parity.

        Raises PointLiftError if the value is not a field element, if no
        point has that x-coordinate, or if the only candidate has the other
        parity.
        """
        if parity not in YParity.ALL:
            raise ValueError(f"parity must be one of {YParity.ALL}, got {parity!r}")

        x_int = int.from_bytes(x_bytes, "big")
        if x_int >= self.field.modulus:
            raise PointLiftError("x-coordinate exceeds the field modulus")

        x = self.field(x_int)
        rhs = x * x * x + self.a * x + self.b
        if not rhs.is_square():
            raise PointLiftError("x-coordinate is not on the curve")

        want_even = parity == YParity.EVEN
        y = rhs.sqrt()
        if y.is_even() != want_even:
            y = -y
            # y == 0 has no counterpart of the other parity
            if y.is_even() != want_even:
                raise PointLiftError(f"no point with {parity} y-coordinate")

        return Point(x, y, self)


class Point(object):
    """
    Represents an affine point on a short Weierstrass curve.

    Points are immutable. Scalar multiplication accepts plain integers or
    elements of the curve's scalar field, on either side of ``*``.
    """

    def __init__(self, x, y, curve: WeierstrassCurve = None):
        if curve is None:
            curve = secp256k1
        if not isinstance(curve, WeierstrassCurve):
            raise TypeError(
                f"Could not create Point-- given curve not of type "
                f"WeierstrassCurve ({type(curve)})"
            )

        self.curve = curve  # the curve containing this point
        self.x = x if isinstance(x, GFElement) else curve.field(x)
        self.y = y if isinstance(y, GFElement) else curve.field(y)

        if not self.curve.contains_point(self.x, self.y):
            raise PointNotOnCurveError(
                f"Could not create Point({self})-- not on the given curve {curve}!"
            )

    @classmethod
    def from_bytes(cls, data: bytes, curve: WeierstrassCurve = None) -> "Point":
        """
        Decodes the 33-byte compressed encoding produced by ``serialize``.
        33 zero bytes decode to the point at infinity.
        """
        if curve is None:
            curve = secp256k1

        size = curve.field.byte_length + 1
        if len(data) != size:
            raise PointNotOnCurveError(f"expected {size} bytes, got {len(data)}")
        if not any(data):
            return curve.infinity()

        prefix = data[0]
        if prefix not in (2, 3):
            raise PointNotOnCurveError(f"invalid compressed point prefix {prefix:#04x}")

        parity = YParity.EVEN if prefix == 2 else YParity.ODD
        try:
            return curve.lift_x(data[1:], parity)
        except PointLiftError as e:
            raise PointNotOnCurveError(str(e)) from e

    def __str__(self):
        return "(%r, %r)" % (self.x, self.y)

    def __repr__(self):
        return str(self)

    def __bool__(self):
        return True

    def __neg__(self):
        return Point(self.x, -self.y, self.curve)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        if self.curve != other.curve:
            raise ValueError("Can't add points on different curves!")

        if isinstance(other, Infinity):
            return self

        x1, y1, x2, y2 = self.x, self.y, other.x, other.y

        if x1 == x2:
            if y1 == y2:
                return self.double()
            return self.curve.infinity()

        slope = (y2 - y1) * ~(x2 - x1)
        x3 = slope * slope - x1 - x2
        y3 = slope * (x1 - x3) - y1

        return Point(x3, y3, self.curve)

    def __sub__(self, other: "Point") -> "Point":
        return self + -other

    def __mul__(self, n) -> "Point":
        n = self._scalar_to_int(n)
        if n is NotImplemented:
            return n

        product = self.curve.infinity()
        if n == 0:
            return product

        # Double-and-add, most significant bit first
        for bit in bin(n)[2:]:
            product = product.double()
            if bit == "1":
                product += self

        return product

    def __rmul__(self, n):
        return self * n

    def _scalar_to_int(self, n):
        if isinstance(n, GFElement):
            if n.field is not self.curve.scalar_field:
                raise FieldsNotIdentical
            return int(n)
        if isinstance(n, int):
            return n % self.curve.order
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if isinstance(other, Infinity) or self.curve != other.curve:
            return False

        return (self.x, self.y) == (other.x, other.y)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.curve, self.x, self.y))

    def double(self) -> "Point":
        if not self.y:
            return self.curve.infinity()

        x, y = self.x, self.y
        slope = (3 * x * x + self.curve.a) * ~(2 * y)
        x3 = slope * slope - 2 * x
        y3 = slope * (x - x3) - y

        return Point(x3, y3, self.curve)

    def serialize(self) -> bytes:
        """Compressed SEC1 encoding: parity prefix byte followed by x."""
        prefix = 2 if self.y.is_even() else 3
        return bytes([prefix]) + self.x.to_bytes()


class Infinity(Point):
    """
    Represents the point at infinity of the curve, the group identity
    """

    def __init__(self, curve: WeierstrassCurve = None):
        self.curve = curve if curve is not None else secp256k1

    def __neg__(self):
        return self

    def __str__(self):
        return "Infinity"

    def __bool__(self):
        return False

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        if self.curve != other.curve:
            raise ValueError("Can't add points on different curves!")

        return other

    def __mul__(self, n) -> "Point":
        if self._scalar_to_int(n) is NotImplemented:
            return NotImplemented

        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return isinstance(other, Infinity) and self.curve == other.curve

    def __hash__(self):
        return hash((self.curve, None))

    def double(self) -> "Point":
        return self

    def serialize(self) -> bytes:
        return bytes(self.curve.field.byte_length + 1)


secp256k1 = WeierstrassCurve(
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    a=0,
    b=7,
    order=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    gx=0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    gy=0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)

# Field of scalars modulo the secp256k1 group order
Scalar = secp256k1.scalar_field

G = secp256k1.generator()


def lift_x(x_bytes: bytes, parity: str = YParity.EVEN) -> Point:
    return secp256k1.lift_x(x_bytes, parity)
