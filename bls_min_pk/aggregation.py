# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import logging
from typing import Iterable

from py_ecc.optimized_bls12_381 import Z2, add

from bls_min_pk.codec import G2Point, collect, decode_signature, encode_signature

logger = logging.getLogger(__name__)


def aggregate_points(points: Iterable[G2Point]) -> G2Point:
    """
    Sum G2 points left to right, starting from the identity.

    Args:
        points (Iterable[G2Point]): Decoded signature points.

    Returns:
        G2Point: The group sum. The identity when `points` is empty.
    """
    total = Z2
    for point in points:
        total = add(total, point)
    return total


def aggregate(sigs_bytes: Iterable[bytes]) -> bytes:
    """
    Aggregate compressed signatures into one compressed signature.

    Identity signatures are accepted and add nothing to the sum. Any
    entry that fails to decode aborts the whole batch.

    Args:
        sigs_bytes (Iterable[bytes]): 96-byte compressed signatures.

    Returns:
        bytes: The 96-byte aggregate, or `b""` when the list is empty or
        any entry is malformed.
    """
    sigs = collect(sigs_bytes)
    if sigs is None:
        return b""
    if not sigs:
        logger.debug("aggregate rejected: empty input")
        return b""

    points = []
    for i, sig_bytes in enumerate(sigs):
        sig = decode_signature(sig_bytes)
        if not sig.ok:
            logger.debug("aggregate rejected: %s at index %d", sig.failure.value, i)
            return b""
        points.append(sig.point)

    return bytes(encode_signature(aggregate_points(points)))
