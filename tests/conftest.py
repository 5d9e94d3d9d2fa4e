from pytest import fixture


@fixture
def galois_field():
    from qudoku.field import GF

    return GF(17)


@fixture
def scalar_field():
    from qudoku.elliptic_curve import Scalar

    return Scalar


@fixture
def generator():
    from qudoku.elliptic_curve import G

    return G


@fixture
def fixed_point():
    from qudoku.hashing import hash_to_point

    return hash_to_point(b"qudoku test point")


@fixture
def secret_polynomial():
    from qudoku.sharing import SecretSharingPolynomial

    # f(x) = 4 + x + 8x^2
    return SecretSharingPolynomial([4, 1, 8])
