import hashlib
import logging

from pytest import mark

from qudoku.config import HashToCurveConfig
from qudoku.elliptic_curve import G, Point, YParity, secp256k1
from qudoku.exceptions import PointLiftError
from qudoku.hashing import hash_to_point, inc_bytes_be, sha256


@mark.parametrize(
    "value, expected",
    [
        ([], []),
        ([0], [1]),
        ([0, 0, 0xFE], [0, 0, 0xFF]),
        ([0, 0, 0xFF], [0, 1, 0]),
        ([0xFF, 0xFF, 0xFF], [0, 0, 0]),
        ([0xFF, 0xFF, 1], [0xFF, 0xFF, 2]),
    ],
)
def test_inc_bytes_be(value, expected):
    data = bytearray(value)
    inc_bytes_be(data)
    assert data == bytearray(expected)


def test_sha256():
    assert sha256(b"abc") == hashlib.sha256(b"abc").digest()
    assert len(sha256(b"")) == 32


def test_hash_to_point_is_deterministic():
    point = hash_to_point(b"hello")
    assert isinstance(point, Point)
    assert hash_to_point(b"hello") == point
    assert hash_to_point(b"world") != point
    assert secp256k1.contains_point(point.x, point.y)
    assert point != G


def test_hash_to_point_parity():
    for i in range(8):
        data = b"input %d" % i
        even = hash_to_point(data)
        odd = hash_to_point(data, HashToCurveConfig(YParity.ODD))
        assert even.y.is_even()
        assert not odd.y.is_even()
        assert even == -odd


def test_hash_to_point_retries(mocker, caplog):
    expected = G * 5
    lift = mocker.patch(
        "qudoku.hashing.lift_x",
        side_effect=[PointLiftError("nope"), PointLiftError("nope"), expected],
    )
    mocker.patch("qudoku.hashing.sha256", return_value=b"\x00" * 31 + b"\xfe")

    with caplog.at_level(logging.DEBUG, logger="qudoku.hashing"):
        assert hash_to_point(b"anything") is expected

    candidates = [call.args[0] for call in lift.call_args_list]
    assert candidates == [
        b"\x00" * 31 + b"\xfe",
        b"\x00" * 31 + b"\xff",
        b"\x00" * 30 + b"\x01\x00",
    ]
    assert all(call.args[1] == YParity.EVEN for call in lift.call_args_list)
    assert "after 3 attempts" in caplog.text


def test_hash_to_point_wraps_around(mocker):
    lift = mocker.patch(
        "qudoku.hashing.lift_x",
        side_effect=[PointLiftError("x >= p"), G],
    )
    mocker.patch("qudoku.hashing.sha256", return_value=b"\xff" * 32)

    assert hash_to_point(b"") == G
    assert lift.call_args_list[1].args[0] == bytes(32)
