#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ectower.number_theory` module."

from ectower.number_theory import is_prime, xgcd

primes = [
    2,
    3,
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    37,
    41,
    43,
    47,
    53,
    59,
    61,
    67,
    71,
    73,
    79,
    83,
    89,
    97,
    101,
    103,
    107,
    109,
    113,
    863,
    2 ** 31 - 1,
]


def test_xgcd() -> None:
    assert xgcd(0, 7) == (7, 0, 1)
    assert xgcd(240, 46)[0] == 2
    for a in range(50):
        for b in range(1, 50):
            g, x, y = xgcd(a, b)
            assert a * x + b * y == g
            assert a % g == 0 and b % g == 0


def test_is_prime() -> None:
    for p in primes:
        assert is_prime(p)

    assert [n for n in range(114) if is_prime(n)] == primes[:-2]

    assert not is_prime(-7)
    assert not is_prime(0)
    assert not is_prime(1)
    assert not is_prime(9)
    assert not is_prime(863 * 863)
    assert not is_prime(2 ** 32 + 1)
