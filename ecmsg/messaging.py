#!/usr/bin/env python3

# Copyright (C) 2024 The ecmsg developers
#
# This file is part of ecmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Signed and encrypted point-to-point messages.

The sender signs the plaintext with its private key (ECDSA)
and encrypts it with a keystream derived from the ECDH shared secret;
the recipient derives the same keystream from its own private key,
decrypts, and verifies the signature with the sender public key.

The XOR cipher is a toy: it is only meant to show
how the shared secret is consumed, not to protect real data.
"""

import logging
from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin, config

from ecmsg import dsa
from ecmsg.alias import String
from ecmsg.curve import Curve, secp256r1
from ecmsg.dh import shared_secret
from ecmsg.exceptions import ECMsgRuntimeError
from ecmsg.hashes import sha256_hex
from ecmsg.keys import KeyPair
from ecmsg.point import Affine, Point
from ecmsg.utils import bytes_from_string

logger = logging.getLogger(__name__)


def xor_cipher(data: String, key: String) -> bytes:
    """Return data XORed with the repeating key.

    Applying the cipher twice with the same key returns the input;
    an empty key leaves data unchanged.
    """
    data = bytes_from_string(data)
    key = bytes_from_string(key)
    if not key:
        return data
    key_length = len(key)
    return bytes(b ^ key[i % key_length] for i, b in enumerate(data))


def session_key(own_prv: int, other_pub: Point, ec: Curve = secp256r1) -> bytes:
    """Return the symmetric key shared with the owner of other_pub.

    It is the hex-string SHA256 of the decimal representation
    of the shared point x-coordinate.
    """
    shared_point = shared_secret(own_prv, other_pub, ec)
    if not isinstance(shared_point, Affine):
        raise ECMsgRuntimeError("invalid (INF) key")
    return sha256_hex(str(shared_point.x)).encode()


@dataclass(frozen=True)
class Envelope(DataClassJsonMixin):
    "Encrypted message together with the signature of its plaintext."

    ciphertext: bytes = field(
        metadata=config(encoder=lambda v: v.hex(), decoder=bytes.fromhex)
    )
    sig: dsa.Sig


def seal(msg: String, sender: KeyPair, recipient_pub: Point) -> Envelope:
    "Sign msg with the sender private key, then encrypt it for the recipient."

    sig = dsa.sign(msg, sender, sender.ec)
    key = session_key(sender.prv_key, recipient_pub, sender.ec)
    ciphertext = xor_cipher(msg, key)
    logger.debug("sealed %d bytes", len(ciphertext))
    return Envelope(ciphertext, sig)


def decrypt(envelope: Envelope, recipient: KeyPair, sender_pub: Point) -> bytes:
    "Return the plaintext bytes, without checking the signature."

    key = session_key(recipient.prv_key, sender_pub, recipient.ec)
    return xor_cipher(envelope.ciphertext, key)


def open_envelope(envelope: Envelope, recipient: KeyPair, sender_pub: Point) -> str:
    """Decrypt the envelope and verify the sender signature.

    Return the plaintext message, or raise ECMsgRuntimeError
    if the signature does not verify.
    """

    plaintext = decrypt(envelope, recipient, sender_pub)
    if not dsa.verify(plaintext, sender_pub, envelope.sig):
        raise ECMsgRuntimeError("signature verification failed")
    return plaintext.decode()
