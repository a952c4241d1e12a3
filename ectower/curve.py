#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class.

EllipticCurve binds the a, b coefficients of the short Weierstrass
equation y^2 = x^3 + a*x + b to their field,
so that the group law does not need a at every call,
and checks point membership evaluating the right-hand side polynomial.

The enumeration functions are meant to explore low-cardinality curves,
for didactical (and fun) reason only.
"""

import secrets
from math import isqrt
from typing import Any, Dict, List, Optional

from ectower.alias import RandBelow
from ectower.exceptions import ECTowerTypeError, ECTowerValueError
from ectower.polynomial import Polynomial, PolynomialRing
from ectower.rational_point import (
    INF,
    AffinePoint,
    Infinity,
    RationalPoint,
    add_rational_points,
    multiply_rational_point,
)
from ectower.ring import Ring, RingElement

# do not walk through fields larger than this
MAX_ENUMERATION_SIZE = 1_000_000


class EllipticCurve:
    """Elliptic curve y^2 = x^3 + a*x + b over a field.

    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The field is usually F_p(i), p being a prime with p = 3 (mod 4),
    but any Ring providing multiplicative inverses will do.
    """

    def __init__(self, field: Ring, a: Any, b: Any) -> None:
        self.field = field
        self.a = field.coerce(a)
        self.b = field.coerce(b)

        # Check that 4*a^3 + 27*b^2 ≠ 0
        d = 4 * self.a * self.a * self.a + 27 * self.b * self.b
        if d.is_zero():
            raise ECTowerValueError("zero discriminant")

        # right-hand side of the Weierstrass equation
        ring = PolynomialRing(field)
        self.polynomial: Polynomial = ring([self.b, self.a, 0, 1])

    def __str__(self) -> str:
        result = "EllipticCurve"
        result += f"\n y^2 = {self.polynomial}"
        result += f"\n over {self.field}"
        return result

    def __repr__(self) -> str:
        return f"EllipticCurve({self.field!r}, {self.a!r}, {self.b!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EllipticCurve):
            return NotImplemented
        return (self.field, self.a, self.b) == (other.field, other.a, other.b)

    def __hash__(self) -> int:
        return hash((self.field, self.a, self.b))

    def is_on_curve(self, Q: RationalPoint) -> bool:
        "Return True if the point is on the curve."
        if isinstance(Q, Infinity):
            return True
        if not isinstance(Q, AffinePoint):
            raise ECTowerTypeError("not a rational point")
        return Q.y * Q.y == self.polynomial(Q.x)

    def require_on_curve(self, Q: RationalPoint) -> None:
        """Require the input curve point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECTowerValueError("point not on curve")

    def negate(self, Q: RationalPoint) -> RationalPoint:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        return Q.negate()

    def add(self, Q1: RationalPoint, Q2: RationalPoint) -> RationalPoint:
        """Return the sum of two points.

        The input points must be on the curve.
        """
        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return add_rational_points(Q1, Q2, self.a)

    def double(self, Q: RationalPoint) -> RationalPoint:
        "Return 2*Q; the input point is assumed to be on curve."
        return add_rational_points(Q, Q, self.a)

    def mult(self, n: int, Q: RationalPoint) -> RationalPoint:
        """Return n*Q.

        The input point must be on the curve.
        """
        self.require_on_curve(Q)
        return multiply_rational_point(Q, self.a, n)

    def random_point(self, randbelow: RandBelow = secrets.randbelow) -> AffinePoint:
        """Return a random affine point.

        Very unsophisticated trial and error approach:
        random (x, y) pairs are drawn until y^2 = x^3 + a*x + b.
        """
        while True:
            x = self.field.random_element(randbelow)
            y = self.field.random_element(randbelow)
            if y * y == self.polynomial(x):
                return AffinePoint(x, y)

    def points(self) -> List[RationalPoint]:
        """Return all the curve points, if the field is small.

        Very unsophisticated walk-through approach,
        for didactical sake only.
        """
        q = self.field.cardinality()
        if q > MAX_ENUMERATION_SIZE:
            err_msg = f"field is too big to count all curve points: {q}"
            raise ECTowerValueError(err_msg)

        # square roots of all the squares of the field
        roots: Dict[RingElement, List[RingElement]] = {}
        for y in self.field.elements():
            roots.setdefault(y * y, []).append(y)

        points: List[RationalPoint] = [INF]
        for x in self.field.elements():
            for y in roots.get(self.polynomial(x), []):
                points.append(AffinePoint(x, y))
        return points

    def order(self, G: RationalPoint, max_order: Optional[int] = None) -> Optional[int]:
        """Return the order of G, if not greater than max_order.

        Very unsophisticated walk-through approach (repeated addition),
        for didactical sake only.
        If max_order is not provided, the Hasse bound q + 1 + 2*sqrt(q)
        on the number of curve points is used, q being the field cardinality.
        None is returned if the order has not been found.
        """
        self.require_on_curve(G)
        if max_order is None:
            q = self.field.cardinality()
            max_order = q + 1 + 2 * (isqrt(q) + 1)

        Q = G
        for i in range(1, max_order + 1):
            if Q == INF:
                return i
            Q = add_rational_points(Q, G, self.a)
        return None
