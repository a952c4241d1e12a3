#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Quadratic extension R(i) = R[x]/(x^2 + 1) of a ring R.

Complex values a + b*i, with a and b in R and i^2 = -1.

If R is the prime field F_p, then x^2 + 1 is irreducible over F_p
exactly when p = 3 (mod 4): in that case F_p(i) is a field of order p^2
(isomorphic to F_(p^2)) and Fermat's little theorem provides
the multiplicative inverse as x^(p^2 - 2).
Otherwise F_p(i) is just a ring with zero divisors
and the computed 'inverse' is not meaningful:
this is a caller-enforced precondition, not checked here.
"""

import secrets
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from ectower.alias import RandBelow
from ectower.exceptions import ECTowerValueError
from ectower.ring import Ring, RingElement, coerced


class QuadraticExtension(Ring):
    """Ring R(i) obtained adjoining a root of x^2 + 1 to the base ring R."""

    def __init__(self, base: Ring) -> None:
        self.base = base

    def __call__(  # type: ignore[override]
        self, real: Any = 0, imaginary: Any = 0
    ) -> "Complex":
        return Complex(self.base.coerce(real), self.base.coerce(imaginary), self)

    def __str__(self) -> str:
        return f"{self.base}(i)"

    def __repr__(self) -> str:
        return f"QuadraticExtension({self.base!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuadraticExtension):
            return NotImplemented
        return self.base == other.base

    def __hash__(self) -> int:
        return hash(("QuadraticExtension", self.base))

    def coerce(self, value: Any) -> "Complex":
        "Elements of the base ring (and ints) are embedded as real values."
        if isinstance(value, Complex) and value.ring == self:
            return value
        return self(value)

    def zero(self) -> "Complex":
        return Complex(self.base.zero(), self.base.zero(), self)

    def identity(self) -> "Complex":
        return Complex(self.base.identity(), self.base.zero(), self)

    def characteristic(self) -> int:
        return self.base.characteristic()

    def cardinality(self) -> int:
        return self.base.cardinality() ** 2

    def elements(self) -> Iterator["Complex"]:
        for real in self.base.elements():
            for imaginary in self.base.elements():
                yield Complex(real, imaginary, self)

    def random_element(self, randbelow: RandBelow = secrets.randbelow) -> "Complex":
        real = self.base.random_element(randbelow)
        imaginary = self.base.random_element(randbelow)
        return Complex(real, imaginary, self)


@dataclass(frozen=True)
class Complex(RingElement):
    real: RingElement
    imaginary: RingElement
    ring: QuadraticExtension

    def parent(self) -> QuadraticExtension:
        return self.ring

    def __str__(self) -> str:
        if self.imaginary.is_zero():
            return f"{self.real}"
        if self.real.is_zero():
            return f"{self.imaginary}i"
        return f"({self.real} + {self.imaginary}i)"

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imaginary!r})"

    @coerced
    def __add__(self, other: Any) -> "Complex":
        return Complex(
            self.real + other.real, self.imaginary + other.imaginary, self.ring
        )

    @coerced
    def __sub__(self, other: Any) -> "Complex":
        return Complex(
            self.real - other.real, self.imaginary - other.imaginary, self.ring
        )

    @coerced
    def __mul__(self, other: Any) -> "Complex":
        # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
        a, b = self.real, self.imaginary
        c, d = other.real, other.imaginary
        return Complex(a * c - b * d, a * d + b * c, self.ring)

    def __neg__(self) -> "Complex":
        return Complex(-self.real, -self.imaginary, self.ring)

    def modpow(self, exponent: int) -> "Complex":
        """Return self**exponent.

        This implementation uses
        'square & multiply' algorithm,
        'right-to-left' binary decomposition of the exponent,
        working directly on the (real, imaginary) pair.
        """

        if exponent < 0:
            raise ECTowerValueError(f"negative exponent: {exponent}")

        res_r, res_i = self.ring.base.identity(), self.ring.base.zero()
        a, b = self.real, self.imaginary
        while exponent > 0:
            if exponent & 1:
                res_r, res_i = res_r * a - res_i * b, res_r * b + a * res_i
            # (a + bi)^2 = (a^2 - b^2) + 2abi
            a, b = a * a - b * b, a * b + b * a
            exponent >>= 1
        return Complex(res_r, res_i, self.ring)

    def __pow__(self, exponent: int) -> "Complex":
        return self.modpow(exponent)

    def inverse(self) -> Optional["Complex"]:
        """Return the multiplicative inverse, if any.

        It is computed as self**(p^2 - 2), p being the characteristic:
        a true inverse only if p is a prime with p = 3 (mod 4).
        """
        if self.real.is_zero() and self.imaginary.is_zero():
            return None
        p = self.characteristic()
        return self.modpow(p * p - 2)
