#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Rational points of a short Weierstrass elliptic curve.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in a field,
together with a point at infinity INF.

The group law only depends on the a coefficient,
which is passed explicitly to add_rational_points and
multiply_rational_point; b is implicitly fixed by the points.
The points are assumed to be on the curve:
membership is not checked here (see ectower.curve for that).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ectower.exceptions import (
    ECTowerInvariantError,
    ECTowerTypeError,
    ECTowerValueError,
)
from ectower.ring import RingElement


class RationalPoint(ABC):
    "Point at infinity or affine point of an elliptic curve."

    @abstractmethod
    def negate(self) -> "RationalPoint":
        "Return the opposite point."

    def add(self, other: "RationalPoint", a: Any) -> "RationalPoint":
        return add_rational_points(self, other, a)

    def scalar_multiply(self, a: Any, n: int) -> "RationalPoint":
        return multiply_rational_point(self, a, n)


@dataclass(frozen=True)
class Infinity(RationalPoint):
    "The point at infinity, i.e. the group identity."

    def negate(self) -> "Infinity":
        return self

    def __str__(self) -> str:
        return "O"

    def __repr__(self) -> str:
        return "INF"


INF = Infinity()


@dataclass(frozen=True)
class AffinePoint(RationalPoint):
    x: RingElement
    y: RingElement

    def negate(self) -> "AffinePoint":
        return AffinePoint(self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def _inverse(d: RingElement) -> RingElement:
    inv = d.inverse()
    if inv is None:
        err_msg = f"not invertible: {d}"
        err_msg += " (are the points on the curve?)"
        raise ECTowerInvariantError(err_msg)
    return inv


def add_rational_points(Q1: RationalPoint, Q2: RationalPoint, a: Any) -> RationalPoint:
    """Return the sum of two points (chord & tangent group law).

    The input points are assumed to be on the curve:
    for them the inverted denominators (2*y1 or x2 - x1)
    are never zero. If that is not the case,
    ECTowerInvariantError is raised.
    """

    if isinstance(Q1, Infinity):
        return Q2
    if isinstance(Q2, Infinity):
        return Q1
    if not isinstance(Q1, AffinePoint) or not isinstance(Q2, AffinePoint):
        raise ECTowerTypeError("not a rational point")

    x1, y1 = Q1.x, Q1.y
    x2, y2 = Q2.x, Q2.y
    if x1 == x2:
        # opposite points, including the case y1 == y2 == 0
        if y1 == -y2:
            return INF
        # point doubling
        lam = (3 * x1 * x1 + a) * _inverse(y1 + y1)
    else:
        lam = (y2 - y1) * _inverse(x2 - x1)
    x3 = lam * lam - x1 - x2
    y3 = lam * (x1 - x3) - y1
    return AffinePoint(x3, y3)


def multiply_rational_point(Q: RationalPoint, a: Any, n: int) -> RationalPoint:
    """Scalar multiplication of a curve point.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the n coefficient,
    affine coordinates: O(log n) group operations.

    The input point is assumed to be on curve and
    the n coefficient is assumed to have been reduced mod the order
    if appropriate.
    """

    if n < 0:
        raise ECTowerValueError(f"negative n: {n}")

    # R is the running result, Q the running doubling
    R: RationalPoint = INF
    while n > 0:
        if n & 1:
            R = add_rational_points(R, Q, a)
        # the doubling part of 'double & add'
        Q = add_rational_points(Q, Q, a)
        n >>= 1
    return R
