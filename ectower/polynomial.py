#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Polynomial ring R[x] over a ring R.

A Polynomial is the sequence of its coefficients c_0, ..., c_d,
the index being the power of the variable.
Trailing zero coefficients are always trimmed,
but the zero polynomial is kept as the single coefficient [0].

Note that degree() is zero for the zero polynomial,
even if it has no degree at all:
use strict_degree() to discriminate the two cases.
"""

from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Optional, Sequence, Tuple

from ectower.ring import Ring, RingElement, coerced


class PolynomialRing(Ring):
    """Ring of the polynomials with coefficients in the base ring."""

    def __init__(self, base: Ring, variable: str = "x") -> None:
        self.base = base
        self.variable = variable

    def __call__(  # type: ignore[override]
        self, coefficients: Sequence[Any] = ()
    ) -> "Polynomial":
        return Polynomial(tuple(coefficients), self)

    def __str__(self) -> str:
        return f"{self.base}[{self.variable}]"

    def __repr__(self) -> str:
        return f"PolynomialRing({self.base!r}, '{self.variable}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolynomialRing):
            return NotImplemented
        return self.base == other.base and self.variable == other.variable

    def __hash__(self) -> int:
        return hash(("PolynomialRing", self.base, self.variable))

    def coerce(self, value: Any) -> "Polynomial":
        "Elements of the base ring (and ints) are embedded as constants."
        if isinstance(value, Polynomial) and value.ring == self:
            return value
        return self.constant(value)

    def constant(self, c: Any) -> "Polynomial":
        "Return the constant polynomial c."
        return Polynomial((c,), self)

    def gen(self) -> "Polynomial":
        "Return the variable x as a polynomial."
        return Polynomial((self.base.zero(), self.base.identity()), self)

    def zero(self) -> "Polynomial":
        return Polynomial((), self)

    def identity(self) -> "Polynomial":
        return Polynomial((self.base.identity(),), self)

    def characteristic(self) -> int:
        return self.base.characteristic()


@dataclass(frozen=True)
class Polynomial(RingElement):
    coefficients: Tuple[RingElement, ...]
    ring: PolynomialRing

    def __post_init__(self) -> None:
        base = self.ring.base
        coefficients = [base.coerce(c) for c in self.coefficients]
        zero = base.zero()
        if not coefficients:
            coefficients.append(zero)
        while len(coefficients) > 1 and coefficients[-1] == zero:
            coefficients.pop()
        object.__setattr__(self, "coefficients", tuple(coefficients))

    def parent(self) -> PolynomialRing:
        return self.ring

    def degree(self) -> int:
        "Return the degree, assuming zero for the zero polynomial."
        return len(self.coefficients) - 1

    def strict_degree(self) -> Optional[int]:
        "Return the degree, None for the zero polynomial."
        if len(self.coefficients) == 1 and self.coefficients[0].is_zero():
            return None
        return self.degree()

    def evaluate(self, t: Any) -> RingElement:
        """Return the value of the polynomial at t.

        The sum of the c_i * t^i terms is accumulated
        keeping track of the running power of t:
        O(degree) ring multiplications and additions.
        """
        t = self.ring.base.coerce(t)
        t_pow = t.identity()
        result = t.zero()
        for c in self.coefficients:
            result = result + c * t_pow
            t_pow = t_pow * t
        return result

    def __call__(self, t: Any) -> RingElement:
        return self.evaluate(t)

    def to_string(self, variable: Optional[str] = None) -> str:
        """Return the polynomial as a sum of terms in increasing powers.

        Zero terms are omitted, unit coefficients are not printed,
        negative coefficients are not rendered as subtractions.
        """
        if variable is None:
            variable = self.ring.variable
        one = self.ring.base.identity()
        terms = []
        for i, c in enumerate(self.coefficients):
            if i == 0:
                if self.degree() == 0 or not c.is_zero():
                    terms.append(f"{c}")
                continue
            if c.is_zero():
                continue
            coefficient = "" if c == one else f"{c}"
            power = variable if i == 1 else f"{variable}^{i}"
            terms.append(coefficient + power)
        return " + ".join(terms)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        coefficients = ", ".join(repr(c) for c in self.coefficients)
        return f"Polynomial([{coefficients}])"

    @coerced
    def __add__(self, other: Any) -> "Polynomial":
        zero = self.ring.base.zero()
        pairs = zip_longest(self.coefficients, other.coefficients, fillvalue=zero)
        return Polynomial(tuple(a + b for a, b in pairs), self.ring)

    @coerced
    def __sub__(self, other: Any) -> "Polynomial":
        # the missing coefficients of a shorter other are zero - c = -c
        zero = self.ring.base.zero()
        pairs = zip_longest(self.coefficients, other.coefficients, fillvalue=zero)
        return Polynomial(tuple(a - b for a, b in pairs), self.ring)

    @coerced
    def __mul__(self, other: Any) -> "Polynomial":
        # convolution of the coefficient sequences
        zero = self.ring.base.zero()
        product = [zero] * (len(self.coefficients) + len(other.coefficients) - 1)
        for i, a in enumerate(self.coefficients):
            for j, b in enumerate(other.coefficients):
                product[i + j] = product[i + j] + a * b
        return Polynomial(tuple(product), self.ring)

    def __neg__(self) -> "Polynomial":
        return Polynomial(tuple(-c for c in self.coefficients), self.ring)

    def inverse(self) -> Optional["Polynomial"]:
        """Return the multiplicative inverse, if any.

        Only constant polynomials with invertible coefficient
        are considered to be units.
        """
        if self.degree() > 0:
            return None
        inv = self.coefficients[0].inverse()
        if inv is None:
            return None
        return self.ring.constant(inv)


def evaluate(f: Polynomial, t: Any) -> RingElement:
    "Return the value of the polynomial f at t."
    return f.evaluate(t)
