# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from typing import Iterable

from bls_min_pk.aggregation import aggregate
from bls_min_pk.verification import verify_aggregate, verify_single


def bls12381_min_pk_verify(sig_bytes: bytes, pk_bytes: bytes, msg: bytes) -> bool:
    """
    Verify a single BLS12-381 min_pk signature.

    Args:
        sig_bytes (bytes): 96-byte compressed G2 signature.
        pk_bytes (bytes): 48-byte compressed G1 public key.
        msg (bytes): Arbitrary-length message.

    Returns:
        bool: True when the signature is valid. False for any malformed,
        identity or mismatched input.
    """
    return verify_single(sig_bytes, pk_bytes, msg)


def bls12381_min_pk_aggregate(sigs_bytes: Iterable[bytes]) -> bytes:
    """
    Aggregate BLS12-381 min_pk signatures into one.

    Args:
        sigs_bytes (Iterable[bytes]): 96-byte compressed G2 signatures.

    Returns:
        bytes: The 96-byte aggregate signature, or `b""` for an empty list
        or any malformed signature.
    """
    return aggregate(sigs_bytes)


def bls12381_min_pk_verify_aggregate(
    pks_bytes: Iterable[bytes], msg: bytes, agg_sig_bytes: bytes
) -> bool:
    """
    Verify an aggregate signature where all signers signed the same message.

    Args:
        pks_bytes (Iterable[bytes]): 48-byte compressed G1 public keys.
        msg (bytes): The shared message.
        agg_sig_bytes (bytes): 96-byte compressed aggregate G2 signature.

    Returns:
        bool: True when the aggregate is valid for exactly these keys.
    """
    return verify_aggregate(pks_bytes, msg, agg_sig_bytes)
