#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Demonstration of ECDH (Elliptic curve Diffie-Hellman key exchange).

A random curve y^2 = x^3 + a*x + b, with a and b in F_p,
is considered over F_(p^2) = F_p[x]/(x^2 + 1) = F_p(i);
a random rational point G is chosen and its order is found
walking through its multiples.
Then Alice and Bob exchange their public keys
and compute the same shared point.

Run it as:

    python -m ectower --prime 43 --seed 1
"""

import argparse
import logging
import random
import secrets
import sys
from dataclasses import dataclass
from typing import List, Optional

from dataclasses_json import DataClassJsonMixin

from ectower.alias import RandBelow
from ectower.complexification import QuadraticExtension
from ectower.curve import EllipticCurve
from ectower.ecdh import gen_keys
from ectower.exceptions import ECTowerRuntimeError, ECTowerValueError
from ectower.modint import PrimeField
from ectower.number_theory import is_prime

_logger = logging.getLogger(__name__)

# p must be prime, p = 3 (mod 4), and p >= 7
DEFAULT_PRIME = 43


@dataclass
class ExchangeTranscript(DataClassJsonMixin):
    p: int
    a: int
    b: int
    curve: str
    generator: str
    order: int
    alice_prvkey: int
    bob_prvkey: int
    alice_pubkey: str
    bob_pubkey: str
    alice_shared: str
    bob_shared: str

    @property
    def keys_match(self) -> bool:
        return self.alice_shared == self.bob_shared


def check_prime(p: int) -> None:
    "Require p to be a prime = 3 (mod 4) and >= 7."

    if not is_prime(p):
        raise ECTowerValueError(f"p is not prime: {p}")
    if p < 7 or p % 4 != 3:
        raise ECTowerValueError(f"p is not a '3 mod 4' prime >= 7: {p}")


def run_exchange(
    p: int = DEFAULT_PRIME, randbelow: RandBelow = secrets.randbelow
) -> ExchangeTranscript:
    "Run the whole key exchange, returning its transcript."

    check_prime(p)
    field = QuadraticExtension(PrimeField(p))

    # a and b in [1, p-1], with 4*a^3 + 27*b^2 ≠ 0 (mod p)
    while True:
        a = 1 + randbelow(p - 1)
        b = 1 + randbelow(p - 1)
        if (4 * a * a * a + 27 * b * b) % p != 0:
            break
        _logger.debug("zero discriminant for a=%d, b=%d", a, b)
    ec = EllipticCurve(field, a, b)
    _logger.info("curve coefficients: a=%d, b=%d", a, b)

    G = ec.random_point(randbelow)
    _logger.info("generator: %s", G)
    order = ec.order(G)
    if order is None:
        raise ECTowerRuntimeError(f"order not found for {G}")
    _logger.info("generator order: %d", order)

    d_a, Q_a = gen_keys(G, order, ec, randbelow=randbelow)
    d_b, Q_b = gen_keys(G, order, ec, randbelow=randbelow)
    _logger.info("public keys exchanged")

    # d_a*d_b might be a multiple of the (not prime) order:
    # the shared point could then be INF, still printed as O
    shared_ba = ec.mult(d_a, Q_b)
    shared_ab = ec.mult(d_b, Q_a)

    return ExchangeTranscript(
        p=p,
        a=a,
        b=b,
        curve=f"y^2 = {ec.polynomial}",
        generator=str(G),
        order=order,
        alice_prvkey=d_a,
        bob_prvkey=d_b,
        alice_pubkey=str(Q_a),
        bob_pubkey=str(Q_b),
        alice_shared=str(shared_ba),
        bob_shared=str(shared_ab),
    )


def format_transcript(t: ExchangeTranscript) -> str:
    "Return the human-readable account of the key exchange."

    lines: List[str] = [
        "Demonstration of ECDH (Elliptic curve Diffie-Hellman key exchange).",
        "",
        "We consider the elliptic curve",
        f"{t.curve}",
        f"over F_({t.p}^2) = F_{t.p}[x]/(x^2 + 1) = F_{t.p}(i).",
        "",
        f"We start up with the rational point G = {t.generator}.",
        f"The order of G is {t.order}.",
        "",
        f"1a. Alice chooses d_a = {t.alice_prvkey} randomly "
        f"and computes Q_a = d_a G = {t.alice_pubkey}.",
        f"1b. Bob chooses d_b = {t.bob_prvkey} randomly "
        f"and computes Q_b = d_b G = {t.bob_pubkey}.",
        "2. Alice sends Q_a to Bob while Bob sends Q_b to Alice.",
        f"3a. Alice computes d_a Q_b = {t.alice_shared}.",
        f"3b. Bob computes d_b Q_a = {t.bob_shared}.",
        "",
    ]
    if t.keys_match:
        lines.append("They coincide and can be used as a shared key.")
    else:
        lines.append("They do not coincide!")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ectower",
        description="ECDH key exchange demo over F_(p^2) = F_p(i)",
    )
    parser.add_argument(
        "-p",
        "--prime",
        type=int,
        default=DEFAULT_PRIME,
        help=f"field prime, must be '3 mod 4' and >= 7 (default: {DEFAULT_PRIME})",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=None,
        help="seed for a reproducible (not secure) run",
    )
    parser.add_argument(
        "--json", action="store_true", help="print the transcript as JSON"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log each step")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    randbelow = (
        secrets.randbelow if args.seed is None else random.Random(args.seed).randrange
    )
    try:
        transcript = run_exchange(args.prime, randbelow)
    except ECTowerValueError as e:
        _logger.error("%s", e)
        return 1

    if args.json:
        print(transcript.to_json(indent=2))
    else:
        print(format_transcript(transcript))
    return 0 if transcript.keys_match else 2


if __name__ == "__main__":
    sys.exit(main())
