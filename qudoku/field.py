# Copyright 2019 Decentralized Systems Lab
#
# This file (field.py) began as a modification of a file from
# Viff, the copyright notice for which is posted below.
# See https://viff.dk/
#
# Copyright 2007, 2008 VIFF Development Team.
#
# This file is part of VIFF, the Virtual Ideal Functionality Framework.
#
# VIFF is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License (LGPL) as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# VIFF is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General
# Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with VIFF. If not, see <http://www.gnu.org/licenses/>.
from random import Random

from gmpy2 import invert, is_prime, legendre, mpz, powmod


class FieldsNotIdentical(Exception):
    pass


class FieldElement(object):
    """Common base class for elements."""

    def __int__(self):
        return int(self.value)

    __index__ = __int__


class GF(object):
    # Class is implemented following the 'multiton' design pattern
    # When the constructor is called with a value that's been used
    # before, it returns the previously created field, such that all
    # fields with the same modulus are the same object
    _field_cache = {}

    def __new__(cls, modulus):
        # Creates a new field if not present in the cache
        return GF._field_cache.setdefault(modulus, super(GF, cls).__new__(cls))

    def __init__(self, modulus):
        if not is_prime(mpz(modulus)):
            raise ValueError(f"{modulus} is not a prime")

        self.modulus = modulus
        self.byte_length = (modulus.bit_length() + 7) // 8

    def __call__(self, value):
        return GFElement(value, self)

    def __repr__(self):
        return f"GF({self.modulus})"

    def zero(self):
        return GFElement(0, self)

    def random(self, seed=None):
        return GFElement(Random(seed).randint(0, self.modulus - 1), self)


class GFElement(FieldElement):
    """Element of a prime field.

    Elements support ``+``, ``-``, ``*``, unary ``-``, ``**`` and ``~``
    (inversion). There is intentionally no ``/`` operator: the only
    division in this package is :func:`qudoku.polynomial.checked_div`.
    """

    def __init__(self, value, gf):
        self.modulus = gf.modulus
        self.field = gf
        self.value = mpz(value) % self.modulus

    def __add__(self, other):
        """Addition."""
        if not isinstance(other, (GFElement, int)):
            return NotImplemented
        try:
            # We can do a quick test using 'is' here since
            # there will only be one class representing this
            # field.
            if self.field is not other.field:
                raise FieldsNotIdentical
            return GFElement(self.value + other.value, self.field)
        except AttributeError:
            return GFElement(self.value + other, self.field)

    __radd__ = __add__

    def __sub__(self, other):
        """Subtraction."""
        if not isinstance(other, (GFElement, int)):
            return NotImplemented
        try:
            if self.field is not other.field:
                raise FieldsNotIdentical
            return GFElement(self.value - other.value, self.field)
        except AttributeError:
            return GFElement(self.value - other, self.field)

    def __rsub__(self, other):
        """Subtraction (reflected argument version)."""
        if not isinstance(other, int):
            return NotImplemented
        return GFElement(other - self.value, self.field)

    def __mul__(self, other):
        """Multiplication."""
        if not isinstance(other, (GFElement, int)):
            return NotImplemented
        try:
            if self.field is not other.field:
                raise FieldsNotIdentical
            return GFElement(self.value * other.value, self.field)
        except AttributeError:
            return GFElement(self.value * other, self.field)

    __rmul__ = __mul__

    def __pow__(self, exponent):
        """Exponentiation."""
        if exponent < 0:
            return (~self) ** -exponent
        return GFElement(powmod(self.value, exponent, self.modulus), self.field)

    def __neg__(self):
        """Negation."""
        return GFElement(-self.value, self.field)

    def __invert__(self):
        """Inversion.

        Note that zero cannot be inverted, trying to do so
        will raise a ZeroDivisionError.
        """
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert zero")
        return GFElement(invert(self.value, self.modulus), self.field)

    def is_square(self):
        """Euler's criterion. Zero counts as a square."""
        return self.value == 0 or legendre(self.value, self.modulus) == 1

    def sqrt(self):
        """Square root.

        Only Blum primes (congruent to 3 mod 4) are supported, which covers
        the base field of secp256k1. Raises ValueError for non-residues.
        No attempt is made to return a root of a particular parity.
        """
        if self.modulus % 4 != 3:
            raise NotImplementedError("sqrt is only implemented for p = 3 mod 4")
        if not self.is_square():
            raise ValueError(f"{self} is not a quadratic residue")
        return GFElement(powmod(self.value, (self.modulus + 1) // 4, self.modulus), self.field)

    def is_even(self):
        return self.value % 2 == 0

    def to_bytes(self):
        """Canonical big-endian encoding, sized to the field modulus."""
        return int(self.value).to_bytes(self.field.byte_length, "big")

    def unsigned(self):
        """Return a unsigned representation of the value"""
        return int(self.value)

    def __repr__(self):
        return "{%d}" % self.value

    def __str__(self):
        """Informal string representation.

        This is simply the value enclosed in curly braces.
        """
        return "{%d}" % self.unsigned()

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, GFElement):
            if self.field is not other.field:
                raise FieldsNotIdentical
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.modulus
        return NotImplemented

    def __ne__(self, other):
        """Inequality test."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        """Hash value."""
        # Consistent with int equality: F(k) == k implies equal hashes
        return hash(int(self.value))

    def __bool__(self):
        """Truth value testing.

        Returns False if this element is zero, True otherwise.
        This allows GF elements to be used directly in Boolean
        formula:

        >>> F = GF(17)
        >>> bool(F(0))
        False
        >>> bool(F(1))
        True
        >>> not F(18)
        False
        """
        return self.value != 0
