#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ectower.ecdh` module."

import pytest

from ectower.complexification import QuadraticExtension
from ectower.curve import EllipticCurve
from ectower.ecdh import gen_keys, shared_point
from ectower.exceptions import ECTowerRuntimeError, ECTowerValueError
from ectower.modint import PrimeField
from ectower.rational_point import INF, AffinePoint

F7 = PrimeField(7)
C7 = QuadraticExtension(F7)


def test_gen_keys() -> None:
    ec = EllipticCurve(F7, 1, 1)
    G = AffinePoint(F7(0), F7(1))
    n = 5

    assert gen_keys(G, n, ec, 2) == (2, AffinePoint(F7(2), F7(5)))
    for _ in range(10):
        prvkey, pubkey = gen_keys(G, n, ec)
        assert 0 < prvkey < n
        assert pubkey == ec.mult(prvkey, G)
        assert pubkey != INF

    # deterministic randbelow
    assert gen_keys(G, n, ec, randbelow=lambda m: m - 1)[0] == n - 1

    with pytest.raises(ECTowerValueError, match="invalid generator order: "):
        gen_keys(G, 1, ec)
    for prvkey in (0, n, -1):
        with pytest.raises(ECTowerValueError, match="private key not in 1..n-1: "):
            gen_keys(G, n, ec, prvkey)


def test_shared_point() -> None:
    ec = EllipticCurve(C7, 1, 1)
    # an order 55 point
    G = next(Q for Q in ec.points() if ec.order(Q) == 55)
    n = 55

    for _ in range(5):
        d_a, Q_a = gen_keys(G, n, ec)
        d_b, Q_b = gen_keys(G, n, ec)
        if (d_a * d_b) % n == 0:
            continue
        shared_a = shared_point(d_a, Q_b, ec)
        shared_b = shared_point(d_b, Q_a, ec)
        assert shared_a == shared_b
        assert shared_a == ec.mult(d_a * d_b, G)

    d_a, d_b = 3, 5
    Q_a = ec.mult(d_a, G)
    Q_b = ec.mult(d_b, G)
    assert ec.mult(d_b, Q_a) == ec.mult(d_a, Q_b)
    assert ec.mult(d_b, Q_a) == ec.mult((d_a * d_b) % n, G)
    assert shared_point(d_a, Q_b, ec) == shared_point(d_b, Q_a, ec)

    with pytest.raises(ECTowerRuntimeError, match="invalid \\(INF\\) key"):
        shared_point(5, ec.mult(11, G), ec)
