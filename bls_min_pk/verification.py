# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import logging
from typing import Iterable

from py_ecc.fields import optimized_bls12_381_FQ12 as FQ12
from py_ecc.optimized_bls12_381 import (
    G1,
    Z1,
    add,
    final_exponentiate,
    neg,
    pairing,
)

from bls_min_pk.codec import (
    G1Point,
    G2Point,
    collect,
    decode_public_key,
    decode_signature,
)
from bls_min_pk.errors import VALID, Failure, Verdict
from bls_min_pk.hashing import hash_to_signature_group

logger = logging.getLogger(__name__)


def pairing_check(public_key: G1Point, message_point: G2Point, signature: G2Point) -> bool:
    """
    Evaluate e(PK, H) == e(G1, S).

    Both sides share one final exponentiation by checking

        e(S, G1) * e(H, -PK) == 1

    over the Miller loop outputs.

    Args:
        public_key (G1Point): The signer key, or the sum of signer keys.
        message_point (G2Point): The hashed message.
        signature (G2Point): The signature, or the aggregate signature.

    Returns:
        bool: True when the equation holds.
    """
    miller = pairing(signature, G1, final_exponentiate=False) * pairing(
        message_point, neg(public_key), final_exponentiate=False
    )
    return final_exponentiate(miller) == FQ12.one()


def _is_message(msg) -> bool:
    return isinstance(msg, (bytes, bytearray, memoryview))


def check_single(sig_bytes: bytes, pk_bytes: bytes, msg: bytes) -> Verdict:
    """
    Verify one signature and report why it was rejected.

    Args:
        sig_bytes (bytes): 96-byte compressed signature.
        pk_bytes (bytes): 48-byte compressed public key.
        msg (bytes): The signed message.

    Returns:
        Verdict: `VALID` or the failure category.
    """
    if not _is_message(msg):
        return Verdict(Failure.ENCODING_INVALID)

    pk = decode_public_key(pk_bytes)
    if not pk.ok:
        return Verdict(pk.failure)
    sig = decode_signature(sig_bytes)
    if not sig.ok:
        return Verdict(sig.failure)

    if pk.is_identity or sig.is_identity:
        return Verdict(Failure.IDENTITY_REJECTED)

    h = hash_to_signature_group(msg)
    if not pairing_check(pk.point, h, sig.point):
        return Verdict(Failure.MISMATCH)
    return VALID


def check_aggregate(
    pks_bytes: Iterable[bytes], msg: bytes, agg_sig_bytes: bytes
) -> Verdict:
    """
    Verify an aggregate signature where every signer signed `msg`.

    The public keys are summed before pairing, so the cost is two Miller
    loops and one final exponentiation regardless of the number of signers.

    Args:
        pks_bytes (Iterable[bytes]): 48-byte compressed public keys. Any
            iterable is accepted and drained once.
        msg (bytes): The shared message.
        agg_sig_bytes (bytes): 96-byte compressed aggregate signature.

    Returns:
        Verdict: `VALID` or the failure category. `index` is set when a
        public key was rejected.
    """
    keys = collect(pks_bytes)
    if keys is None:
        return Verdict(Failure.ENCODING_INVALID)
    if not keys:
        return Verdict(Failure.EMPTY_INPUT)
    if not _is_message(msg):
        return Verdict(Failure.ENCODING_INVALID)

    aggregate_pk = Z1
    for i, pk_bytes in enumerate(keys):
        pk = decode_public_key(pk_bytes)
        if not pk.ok:
            return Verdict(pk.failure, index=i)
        if pk.is_identity:
            return Verdict(Failure.IDENTITY_REJECTED, index=i)
        aggregate_pk = add(aggregate_pk, pk.point)

    sig = decode_signature(agg_sig_bytes)
    if not sig.ok:
        return Verdict(sig.failure)
    if sig.is_identity:
        return Verdict(Failure.IDENTITY_REJECTED)

    h = hash_to_signature_group(msg)
    if not pairing_check(aggregate_pk, h, sig.point):
        logger.debug("aggregate pairing check failed over %d keys", len(keys))
        return Verdict(Failure.MISMATCH)
    return VALID


def verify_single(sig_bytes: bytes, pk_bytes: bytes, msg: bytes) -> bool:
    verdict = check_single(sig_bytes, pk_bytes, msg)
    if not verdict:
        logger.debug("single verification rejected: %s", verdict.describe())
    return verdict.ok


def verify_aggregate(pks_bytes: Iterable[bytes], msg: bytes, agg_sig_bytes: bytes) -> bool:
    verdict = check_aggregate(pks_bytes, msg, agg_sig_bytes)
    if not verdict:
        logger.debug("aggregate verification rejected: %s", verdict.describe())
    return verdict.ok
