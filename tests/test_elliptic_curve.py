from pytest import mark, raises

from qudoku.elliptic_curve import (
    G,
    Infinity,
    Point,
    Scalar,
    WeierstrassCurve,
    YParity,
    lift_x,
    secp256k1,
)
from qudoku.exceptions import PointLiftError, PointNotOnCurveError
from qudoku.field import FieldsNotIdentical, GF

G_COMPRESSED = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
G2_COMPRESSED = "02c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5"
G3_COMPRESSED = "02f9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9"


def test_generator_is_on_curve():
    assert secp256k1.contains_point(G.x, G.y)
    assert G.serialize().hex() == G_COMPRESSED


def test_small_multiples():
    assert (2 * G).serialize().hex() == G2_COMPRESSED
    assert (G + G) == G.double() == G * 2
    assert (G * 3).serialize().hex() == G3_COMPRESSED
    assert G + G + G == Scalar(3) * G


def test_group_order():
    assert G * secp256k1.order == secp256k1.infinity()
    assert G * (secp256k1.order - 1) == -G
    assert G * 0 == Infinity()
    assert G * Scalar(0) == Infinity()
    assert G * -1 == -G


def test_group_law():
    a, b = Scalar(12345), Scalar(98765)
    assert G * a + G * b == G * (a + b)
    assert (G * a) * b == G * (a * b)
    assert G * a - G * a == Infinity()
    assert G - G * 2 == -G


def test_infinity():
    inf = secp256k1.infinity()
    assert not inf
    assert G
    assert inf + G == G
    assert G + inf == G
    assert inf * 5 == inf
    assert -inf == inf
    assert inf.double() == inf
    assert inf != G
    assert G != inf
    assert inf.serialize() == bytes(33)


def test_serialization_round_trip():
    for k in (1, 2, 3, 7, 2 ** 200 + 1):
        point = G * k
        data = point.serialize()
        assert len(data) == 33
        assert data[0] in (2, 3)
        assert Point.from_bytes(data) == point
    assert Point.from_bytes(bytes(33)) == Infinity()


@mark.parametrize(
    "data",
    [
        bytes(32),
        b"\x04" + bytes.fromhex(G_COMPRESSED)[1:],
        b"\x02" + b"\xff" * 32,
    ],
)
def test_from_bytes_invalid(data):
    with raises(PointNotOnCurveError):
        Point.from_bytes(data)


def test_point_not_on_curve():
    with raises(PointNotOnCurveError):
        Point(1, 1)


def test_points_are_hashable():
    assert len({G, G * 1, 2 * G, Infinity(), Infinity()}) == 3


def test_scalar_from_other_field():
    with raises(FieldsNotIdentical):
        G * GF(17)(3)


def test_lift_x_generator():
    x_bytes = G.x.to_bytes()
    assert lift_x(x_bytes) == G  # G has an even y-coordinate
    assert lift_x(x_bytes, YParity.ODD) == -G


def test_lift_x_parity():
    for k in range(1, 10):
        point = G * k
        even = lift_x(point.x.to_bytes(), YParity.EVEN)
        odd = lift_x(point.x.to_bytes(), YParity.ODD)
        assert even.y.is_even()
        assert not odd.y.is_even()
        assert even == -odd
        assert point in (even, odd)


def test_lift_x_failures():
    # x >= p is never a field element
    with raises(PointLiftError):
        lift_x(b"\xff" * 32)

    with raises(ValueError):
        lift_x(G.x.to_bytes(), "sideways")


def test_lift_x_not_on_curve():
    # y^2 = x^3 + 1 over GF(23) has no point with x = 4 (65 is a non-residue)
    curve = WeierstrassCurve(p=23, a=0, b=1, order=23, gx=0, gy=1)
    assert not curve.field(4 * 4 * 4 + 1).is_square()
    with raises(PointLiftError):
        curve.lift_x(bytes([4]))


def test_lift_x_zero_y():
    # x = 22 (= -1) gives y = 0, which has no odd counterpart
    curve = WeierstrassCurve(p=23, a=0, b=1, order=23, gx=0, gy=1)
    point = curve.lift_x(bytes([22]), YParity.EVEN)
    assert point.y == 0
    with raises(PointLiftError):
        curve.lift_x(bytes([22]), YParity.ODD)


def test_singular_curve():
    with raises(ValueError):
        WeierstrassCurve(p=23, a=0, b=0, order=23, gx=0, gy=0)
