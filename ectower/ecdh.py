#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Diffie-Hellman elliptic curve key agreement scheme.

The two entities must agree on the elliptic curve
and on the generator G (with its order n):

* Alice chooses d_a in [1, n-1] and publishes Q_a = d_a*G
* Bob chooses d_b in [1, n-1] and publishes Q_b = d_b*G
* Alice computes d_a*Q_b, Bob computes d_b*Q_a: they coincide.

The shared point is the end of the exchange:
no key derivation is performed on it.
"""

import secrets
from typing import Optional, Tuple

from ectower.alias import RandBelow
from ectower.curve import EllipticCurve
from ectower.exceptions import ECTowerRuntimeError, ECTowerValueError
from ectower.rational_point import AffinePoint, RationalPoint


def gen_keys(
    G: RationalPoint,
    n: int,
    ec: EllipticCurve,
    prvkey: Optional[int] = None,
    randbelow: RandBelow = secrets.randbelow,
) -> Tuple[int, RationalPoint]:
    """Return a (private key, public key) tuple.

    The private key is a scalar in [1, n-1], n being the order of G,
    randomly chosen if not provided;
    the public key is the curve point prvkey*G.
    """
    if n < 2:
        raise ECTowerValueError(f"invalid generator order: {n}")
    if prvkey is None:
        prvkey = 1 + randbelow(n - 1)
    elif not 0 < prvkey < n:
        raise ECTowerValueError(f"private key not in 1..n-1: {prvkey}")
    return prvkey, ec.mult(prvkey, G)


def shared_point(d: int, Q: RationalPoint, ec: EllipticCurve) -> AffinePoint:
    "Return the shared secret point d*Q."

    P = ec.mult(d, Q)
    if not isinstance(P, AffinePoint):
        raise ECTowerRuntimeError("invalid (INF) key")
    return P
