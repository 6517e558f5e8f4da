#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Walkthrough of one run of the messaging protocol.

1. key-pairs are generated for A and B
2. both sides compute the shared secret, which must agree
3. A signs the message with its private key
4. A encrypts the message with the hashed shared secret
5. B decrypts the message with the hashed shared secret
6. B verifies A's signature with A's public key

    python -m ecmsg -m "hello"
    python -m ecmsg -m "hello" --tamper
"""

import argparse
import logging
import sys
from typing import List, Optional

from ecmsg import dsa
from ecmsg.dh import shared_secret
from ecmsg.keys import KeyPair
from ecmsg.logging_util import setup_logger
from ecmsg.messaging import decrypt, seal


def tamper(msg: str) -> str:
    "Return msg with the case of its last character swapped."
    if not msg:
        return msg
    last = msg[-1].swapcase()
    if last == msg[-1]:
        last = "?" if last != "?" else "!"
    return msg[:-1] + last


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ecmsg",
        description="Signed and encrypted messaging over NIST P-256",
    )
    parser.add_argument("-m", "--message", help="message sent from A to B")
    parser.add_argument(
        "--tamper",
        action="store_true",
        help="alter the decrypted message before verifying the signature",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logger = setup_logger("ecmsg", logging.DEBUG if args.verbose else logging.INFO)

    logger.info("starting protocol")

    logger.info("generating keys for A")
    alice = KeyPair.generate()
    logger.debug("A's private key: %d", alice.prv_key)
    logger.info("A's public key x-coordinate: %d", alice.pub_key.x)

    logger.info("generating keys for B")
    bob = KeyPair.generate()
    logger.debug("B's private key: %d", bob.prv_key)
    logger.info("B's public key x-coordinate: %d", bob.pub_key.x)

    logger.info("checking for safe connection")
    secret_a = shared_secret(alice.prv_key, bob.pub_key)
    secret_b = shared_secret(bob.prv_key, alice.pub_key)
    if secret_a != secret_b:
        print("couldn't establish safe connection between A and B")
        return 1
    print("established safe connection between A and B")

    message = args.message
    if message is None:
        try:
            message = input("Input message: ")
        except EOFError:
            logger.error("no message on standard input")
            return 1
    if message == "":
        logger.error("empty message")
        return 1

    logger.info("signing and encrypting A's message")
    envelope = seal(message, alice, bob.pub_key)
    logger.info("signature r: %s", hex(envelope.sig.r))
    logger.info("signature s: %s", hex(envelope.sig.s))
    logger.info("ciphertext: %s", envelope.ciphertext.hex())
    logger.debug("envelope: %s", envelope.to_json())

    logger.info("decrypting A's message")
    received = decrypt(envelope, bob, alice.pub_key).decode()
    if args.tamper:
        received = tamper(received)
        logger.info("message altered to %r", received)

    logger.info("validating A's signature")
    if not dsa.verify(received, alice.pub_key, envelope.sig):
        print("A's signature has not been verified")
        return 2

    print("A's signature has been verified, no tampering detected")
    print(f"Decrypted message: {received}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
