#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ectower.demo` module."

import dataclasses
import json
import random

import pytest

from ectower.demo import (
    ExchangeTranscript,
    check_prime,
    format_transcript,
    main,
    run_exchange,
)
from ectower.exceptions import ECTowerValueError


def test_check_prime() -> None:
    for p in (7, 11, 19, 23, 31, 43, 863):
        check_prime(p)

    for p in (1, 9, 15, 21, 867):
        with pytest.raises(ECTowerValueError, match="p is not prime: "):
            check_prime(p)

    err_msg = "p is not a '3 mod 4' prime >= 7: "
    for p in (2, 3, 5, 13, 17):
        with pytest.raises(ECTowerValueError, match=err_msg):
            check_prime(p)


def test_run_exchange() -> None:
    t = run_exchange(7, random.Random(1).randrange)
    assert t.p == 7
    assert 0 < t.a < 7
    assert 0 < t.b < 7
    assert (4 * t.a ** 3 + 27 * t.b ** 2) % 7 != 0
    assert t.curve.startswith("y^2 = ")
    assert 1 < t.order <= 7 * 7 + 1 + 2 * 7
    assert 0 < t.alice_prvkey < t.order
    assert 0 < t.bob_prvkey < t.order
    assert t.alice_shared == t.bob_shared
    assert t.keys_match

    # reproducible
    assert t == run_exchange(7, random.Random(1).randrange)

    for _ in range(3):
        assert run_exchange(11).keys_match

    with pytest.raises(ECTowerValueError, match="p is not prime: "):
        run_exchange(15)


def test_transcript_json() -> None:
    t = run_exchange(7, random.Random(2).randrange)
    t_dict = t.to_dict()
    assert t_dict["p"] == 7
    assert "keys_match" not in t_dict

    t_json = t.to_json()
    assert json.loads(t_json)["order"] == t.order
    assert ExchangeTranscript.from_json(t_json) == t
    assert ExchangeTranscript.from_dict(t_dict) == t


def test_format_transcript() -> None:
    t = run_exchange(7, random.Random(3).randrange)
    text = format_transcript(t)
    lines = text.splitlines()
    assert lines[0] == (
        "Demonstration of ECDH (Elliptic curve Diffie-Hellman key exchange)."
    )
    assert t.curve in lines
    assert "over F_(7^2) = F_7[x]/(x^2 + 1) = F_7(i)." in lines
    assert f"We start up with the rational point G = {t.generator}." in lines
    assert f"The order of G is {t.order}." in lines
    assert f"3a. Alice computes d_a Q_b = {t.alice_shared}." in lines
    assert f"3b. Bob computes d_b Q_a = {t.bob_shared}." in lines
    assert lines[-1] == "They coincide and can be used as a shared key."

    t = dataclasses.replace(t, bob_shared="(1, 2)", alice_shared="(2, 1)")
    assert not t.keys_match
    assert format_transcript(t).splitlines()[-1] == "They do not coincide!"


def test_main(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--prime", "7", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "We consider the elliptic curve" in out
    assert "They coincide and can be used as a shared key." in out

    # same seed, same run
    assert main(["-p", "7", "-s", "1"]) == 0
    assert capsys.readouterr().out == out

    assert main(["-p", "11", "-s", "1", "--json"]) == 0
    transcript = json.loads(capsys.readouterr().out)
    assert transcript["p"] == 11
    assert transcript["alice_shared"] == transcript["bob_shared"]

    assert main(["-s", "5", "-v"]) == 0
    assert "over F_(43^2)" in capsys.readouterr().out

    assert main(["--prime", "13"]) == 1
    assert capsys.readouterr().out == ""
