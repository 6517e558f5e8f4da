#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecmsg.__main__` command line walkthrough."

import logging
from typing import Iterator

import pytest

from ecmsg.__main__ import main, tamper


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    # each run attaches a handler bound to the current stderr
    yield
    logging.getLogger("ecmsg").handlers.clear()


def test_tamper() -> None:
    assert tamper("hello") == "hellO"
    assert tamper("hellO") == "hello"
    assert tamper("a1") == "a?"
    assert tamper("a?") == "a!"
    assert tamper("") == ""


def test_main(capsys: pytest.CaptureFixture) -> None:
    assert main(["-m", "hello"]) == 0
    out = capsys.readouterr().out
    assert "established safe connection between A and B" in out
    assert "A's signature has been verified, no tampering detected" in out
    assert "Decrypted message: hello" in out


def test_main_tampered(capsys: pytest.CaptureFixture) -> None:
    assert main(["--message", "hello", "--tamper"]) == 2
    out = capsys.readouterr().out
    assert "A's signature has not been verified" in out
    assert "Decrypted message" not in out


def test_main_verbose(capsys: pytest.CaptureFixture) -> None:
    assert main(["-v", "-m", "Satoshi Nakamoto"]) == 0
    out = capsys.readouterr().out
    assert "Decrypted message: Satoshi Nakamoto" in out


def test_main_input(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt: "hello")
    assert main([]) == 0
    assert "Decrypted message: hello" in capsys.readouterr().out

    monkeypatch.setattr("builtins.input", lambda prompt: "")
    assert main([]) == 1


def test_main_empty_message() -> None:
    assert main(["-m", ""]) == 1


def test_main_closed_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    def closed_stdin(prompt: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_stdin)
    assert main([]) == 1


def test_main_log(caplog: pytest.LogCaptureFixture) -> None:
    assert main(["-m", "hello"]) == 0
    assert "A's public key x-coordinate: " in caplog.text
    assert "B's public key x-coordinate: " in caplog.text
    assert "signature r: 0x" in caplog.text
    assert "signature s: 0x" in caplog.text
    assert "ciphertext: " in caplog.text
    assert "private key" not in caplog.text

    caplog.clear()
    assert main(["-v", "-m", "hello"]) == 0
    assert "A's private key: " in caplog.text
    assert "envelope: " in caplog.text
