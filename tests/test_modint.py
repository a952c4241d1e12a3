#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ectower.modint` module."

import pytest

from ectower.exceptions import ECTowerTypeError, ECTowerValueError
from ectower.modint import ModInt, PrimeField
from ectower.ring import square_and_multiply

F7 = PrimeField(7)


def test_prime_field() -> None:
    assert F7.characteristic() == 7
    assert F7.cardinality() == 7
    assert F7.p_size == 1
    assert PrimeField(863).p_size == 2
    assert F7.zero() == F7(0)
    assert F7.identity() == F7(1)
    assert [x.to_int() for x in F7.elements()] == list(range(7))

    assert PrimeField(7) == F7
    assert hash(PrimeField(7)) == hash(F7)
    assert PrimeField("0x07") == F7
    assert PrimeField(11) != F7

    assert str(F7) == "F_7"
    assert repr(F7) == "PrimeField(7)"

    with pytest.raises(ECTowerValueError, match="invalid modulus: "):
        PrimeField(1)


def test_representative() -> None:
    for n in range(-20, 20):
        x = F7(n)
        assert 0 <= x.representative < 7
        assert x.representative == n % 7
        assert x == ModInt(n, F7)

    assert F7("0x0a") == F7(3)
    assert F7(b"\x0a") == F7(3)
    assert int(F7(10)) == 3
    assert F7(10).to_int() == 3
    assert str(F7(10)) == "3"
    assert repr(F7(10)) == "ModInt(3, 7)"

    # hashable value type
    assert len({F7(1), F7(8), F7(2)}) == 2


def test_arithmetic() -> None:
    assert F7(3) + F7(5) == F7(1)
    assert F7(2) - F7(5) == F7(4)
    assert F7(0) - F7(1) == F7(6)
    assert F7(3) * F7(5) == F7(1)
    assert -F7(3) == F7(4)
    assert -F7(0) == F7(0)
    assert F7(6) / F7(2) == F7(3)

    # ints are coerced into the field
    assert F7(3) + 5 == F7(1)
    assert 5 + F7(3) == F7(1)
    assert F7(2) - 5 == F7(4)
    assert 2 - F7(5) == F7(4)
    assert 3 * F7(5) == F7(1)

    with pytest.raises(ZeroDivisionError, match="not invertible: 0"):
        F7(1) / F7(0)


def test_zero_identity_characteristic() -> None:
    x = F7(3)
    assert x.zero() == F7(0)
    assert x.identity() == F7(1)
    assert x.characteristic() == 7
    assert x.parent() == F7

    assert F7(0).is_zero()
    assert not F7(3).is_zero()
    assert not F7(0)
    assert F7(3)


def test_mixed_fields() -> None:
    F11 = PrimeField(11)
    assert F7(1) != F11(1)
    with pytest.raises(TypeError):
        F7(1) + F11(1)
    with pytest.raises(TypeError):
        F7(1) * F11(1)
    with pytest.raises(ECTowerTypeError, match="cannot coerce into F_7: "):
        F7.coerce(F11(1))
    with pytest.raises(ECTowerTypeError, match="cannot coerce into F_7: "):
        F7.coerce(True)


def test_power() -> None:
    for p in (7, 11, 13):
        F = PrimeField(p)
        for x in F.elements():
            expected = F.identity()
            for e in range(51):
                assert x.power(e) == expected
                assert x ** e == expected
                expected = expected * x

    F = PrimeField(863)
    for n in (0, 1, 2, 431, 862):
        for e in (0, 1, 2, 3, 861, 862, 2 ** 20 + 7):
            assert F(n).power(e) == square_and_multiply(F(n), e)

    # Fermat's little theorem
    assert F7(3).power(6) == F7(1)
    for n in range(1, 7):
        assert F7(n).power(6) == F7.identity()

    with pytest.raises(ECTowerValueError, match="negative exponent: "):
        F7(3).power(-1)


def test_inverse() -> None:
    for p in (2, 3, 5, 7, 11, 13, 863, 2 ** 31 - 1):
        F = PrimeField(p)
        assert F.zero().inverse() is None
        for n in range(1, min(p, 500)):  # exhausted only for small p
            x = F(n)
            inv = x.inverse()
            assert inv is not None
            assert x * inv == F.identity()

    assert F7(3).inverse() == F7(5)

    # no inverse if gcd(representative, p) != 1
    F9 = PrimeField(9)
    assert F9(3).inverse() is None
    assert F9(6).inverse() is None
    assert F9(0).inverse() is None


def test_random_element() -> None:
    for _ in range(10):
        x = F7.random_element()
        assert x.field == F7
        assert 0 <= x.representative < 7

    assert F7.random_element(lambda n: n - 1) == F7(6)
