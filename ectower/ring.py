#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ring capabilities.

The generic algorithms of this package (binary exponentiation,
polynomial evaluation, the elliptic curve group law)
only rely on the capabilities declared here.

A Ring is the parent structure, e.g. F_p, F_p(i), or F_p(i)[x]:
it provides the additive identity (zero), the multiplicative
identity (identity), and the characteristic; it also builds
its own elements.

A RingElement is an immutable value belonging to a Ring:
besides the arithmetic operators (+, -, *, unary -, ==)
it provides its multiplicative inverse, if any.

Plain ints are accepted as operands and mapped into the ring
through the canonical homomorphism Z -> R,
so that 3 * x * x + a reads as expected.
"""

import functools
import secrets
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Optional

from ectower.alias import RandBelow
from ectower.exceptions import ECTowerTypeError, ECTowerValueError


class Ring(ABC):
    """Parent structure of RingElement objects."""

    @abstractmethod
    def __call__(self, *args: Any) -> "RingElement":
        "Return a new element of the ring."

    @abstractmethod
    def zero(self) -> "RingElement":
        "Return the additive identity."

    @abstractmethod
    def identity(self) -> "RingElement":
        "Return the multiplicative identity."

    @abstractmethod
    def characteristic(self) -> int:
        """Return the characteristic of the ring.

        For an extension this is the characteristic of the base ring,
        not the cardinality of the extension.
        """

    def coerce(self, value: Any) -> "RingElement":
        """Return value as an element of the ring.

        Elements of the ring are returned unchanged,
        anything else is handed to the ring constructor.
        """
        if isinstance(value, RingElement) and value.parent() == self:
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return self(value)
        raise ECTowerTypeError(f"cannot coerce into {self}: {value!r}")

    def cardinality(self) -> int:
        "Return the number of elements of a finite ring."
        raise ECTowerTypeError(f"not a finite ring: {self}")

    def elements(self) -> Iterator["RingElement"]:
        "Iterate over all the elements of a finite ring."
        raise ECTowerTypeError(f"not a finite ring: {self}")

    def random_element(
        self, randbelow: RandBelow = secrets.randbelow
    ) -> "RingElement":
        "Return a uniformly distributed element of a finite ring."
        raise ECTowerTypeError(f"not a finite ring: {self}")


def coerced(method: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    """Coerce the second operand of a binary operator into the ring.

    If the operand cannot be coerced NotImplemented is returned,
    so that Python can try the reflected operation
    (e.g. ModInt + Polynomial becomes Polynomial.__radd__).
    """

    @functools.wraps(method)
    def wrapper(self: "RingElement", other: Any) -> Any:
        try:
            other = self.parent().coerce(other)
        except ECTowerTypeError:
            return NotImplemented
        return method(self, other)

    return wrapper


class RingElement(ABC):
    """Immutable element of a Ring."""

    @abstractmethod
    def parent(self) -> Ring:
        "Return the ring the element belongs to."

    def zero(self) -> "RingElement":
        return self.parent().zero()

    def identity(self) -> "RingElement":
        return self.parent().identity()

    def characteristic(self) -> int:
        return self.parent().characteristic()

    def is_zero(self) -> bool:
        return self == self.parent().zero()

    @abstractmethod
    def inverse(self) -> Optional["RingElement"]:
        """Return the multiplicative inverse.

        None is returned if the element is not invertible
        (e.g. the additive identity).
        """

    @abstractmethod
    def __add__(self, other: Any) -> "RingElement":
        pass

    @abstractmethod
    def __sub__(self, other: Any) -> "RingElement":
        pass

    @abstractmethod
    def __mul__(self, other: Any) -> "RingElement":
        pass

    @abstractmethod
    def __neg__(self) -> "RingElement":
        pass

    @coerced
    def __radd__(self, other: "RingElement") -> "RingElement":
        return other + self

    @coerced
    def __rsub__(self, other: "RingElement") -> "RingElement":
        return other - self

    @coerced
    def __rmul__(self, other: "RingElement") -> "RingElement":
        return other * self

    @coerced
    def __truediv__(self, other: "RingElement") -> "RingElement":
        inv = other.inverse()
        if inv is None:
            raise ZeroDivisionError(f"not invertible: {other}")
        return self * inv

    def __pow__(self, exponent: int) -> "RingElement":
        return square_and_multiply(self, exponent)

    def __bool__(self) -> bool:
        return not self.is_zero()


def square_and_multiply(x: RingElement, exponent: int) -> RingElement:
    """Return x**exponent.

    This implementation uses
    'square & multiply' algorithm,
    'right-to-left' binary decomposition of the exponent,
    i.e. O(log exponent) ring multiplications.
    """

    if exponent < 0:
        raise ECTowerValueError(f"negative exponent: {exponent}")

    result = x.identity()
    while exponent > 0:
        if exponent & 1:
            result = result * x
        # the squaring part of 'square & multiply'
        x = x * x
        exponent >>= 1
    return result
