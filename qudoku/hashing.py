import hashlib
import logging

from .config import HashToCurveConfig
from .elliptic_curve import lift_x
from .exceptions import PointLiftError

logger = logging.getLogger(__name__)


def sha256(data):
    return hashlib.sha256(data).digest()


def inc_bytes_be(data):
    """
    Increments a bytearray in place as if it were a big-endian unsigned
    integer. All-0xFF input wraps around to all zeros and an empty array is
    left untouched.
    """
    for i in reversed(range(len(data))):
        if data[i] == 0xFF:
            data[i] = 0
        else:
            data[i] += 1
            return


def hash_to_point(data, config=None):
    """
    Hashes ``data`` to a secp256k1 point with no known discrete log relative
    to the generator. The y-coordinate parity follows ``config``, even by
    default.

    **Not constant time.** The number of iterations depends on the input,
    so only public data should be hashed with this function.
    """
    if config is None:
        config = HashToCurveConfig.default()

    candidate = bytearray(sha256(data))
    attempts = 1
    while True:
        try:
            point = lift_x(bytes(candidate), config.parity)
        except PointLiftError:
            inc_bytes_be(candidate)
            attempts += 1
            continue

        if attempts > 1:
            logger.debug("hash_to_point found a point after %d attempts", attempts)
        return point
