#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field F_p.

PrimeField(p) is the ring of the integers modulo p;
its elements are ModInt values,
with representative always reduced in [0, p-1].

The modulus is not checked to be prime:
the multiplicative inverse (computed with Fermat's little theorem)
is a true inverse only if it is.
"""

import secrets
from dataclasses import dataclass
from math import ceil
from typing import Any, Iterator, Optional

from ectower.alias import Integer, RandBelow
from ectower.exceptions import ECTowerValueError
from ectower.number_theory import xgcd
from ectower.ring import Ring, RingElement, coerced
from ectower.utils import int_from_integer, int_string


class PrimeField(Ring):
    """Finite field F_p of the integers modulo a prime p."""

    def __init__(self, p: Integer) -> None:
        p = int_from_integer(p)
        if p < 2:
            raise ECTowerValueError(f"invalid modulus: {p}")
        self.p = p
        # byte-length
        self.p_size = ceil(p.bit_length() / 8)

    def __call__(self, n: Integer) -> "ModInt":  # type: ignore[override]
        return ModInt(int_from_integer(n), self)

    def __str__(self) -> str:
        return f"F_{self.p}"

    def __repr__(self) -> str:
        return f"PrimeField({int_string(self.p)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.p == other.p

    def __hash__(self) -> int:
        return hash(("PrimeField", self.p))

    def zero(self) -> "ModInt":
        return ModInt(0, self)

    def identity(self) -> "ModInt":
        return ModInt(1, self)

    def characteristic(self) -> int:
        return self.p

    def cardinality(self) -> int:
        return self.p

    def elements(self) -> Iterator["ModInt"]:
        return (ModInt(n, self) for n in range(self.p))

    def random_element(self, randbelow: RandBelow = secrets.randbelow) -> "ModInt":
        return ModInt(randbelow(self.p), self)


@dataclass(frozen=True)
class ModInt(RingElement):
    representative: int
    field: PrimeField

    def __post_init__(self) -> None:
        object.__setattr__(self, "representative", self.representative % self.field.p)

    def parent(self) -> PrimeField:
        return self.field

    def to_int(self) -> int:
        return self.representative

    def __int__(self) -> int:
        return self.representative

    def __str__(self) -> str:
        return f"{self.representative}"

    def __repr__(self) -> str:
        return f"ModInt({self.representative}, {int_string(self.field.p)})"

    @coerced
    def __add__(self, other: Any) -> "ModInt":
        return ModInt(
            (self.representative + other.representative) % self.field.p, self.field
        )

    @coerced
    def __sub__(self, other: Any) -> "ModInt":
        # adding p first keeps the intermediate value non-negative
        return ModInt(
            (self.representative + self.field.p - other.representative) % self.field.p,
            self.field,
        )

    @coerced
    def __mul__(self, other: Any) -> "ModInt":
        return ModInt(
            (self.representative * other.representative) % self.field.p, self.field
        )

    def __neg__(self) -> "ModInt":
        return ModInt((self.field.p - self.representative) % self.field.p, self.field)

    def power(self, exponent: int) -> "ModInt":
        """Return self**exponent (mod p).

        The three-argument built-in pow is the modular
        'square & multiply' binary exponentiation,
        i.e. O(log exponent) modular multiplications:
        it gives the same result as ectower.ring.square_and_multiply.
        """
        if exponent < 0:
            raise ECTowerValueError(f"negative exponent: {exponent}")
        return ModInt(pow(self.representative, exponent, self.field.p), self.field)

    def __pow__(self, exponent: int) -> "ModInt":
        return self.power(exponent)

    def inverse(self) -> Optional["ModInt"]:
        """Return the multiplicative inverse (mod p), if any.

        An inverse exists only if gcd(representative, p) = 1;
        it is computed as self**(p-2), according to Fermat's little theorem:
        p must be prime.
        """
        g, _, _ = xgcd(self.representative, self.field.p)
        if g != 1:
            return None
        return self.power(self.field.p - 2)
