# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import hashlib

from py_ecc.bls.hash_to_curve import hash_to_G2

from bls_min_pk.codec import G2Point
from bls_min_pk.constants import DST


def hash_to_signature_group(message: bytes) -> G2Point:
    """
    Map a message onto G2 under the package DST.

    Uses expand_message_xmd with SHA-256 and the random-oracle simplified
    SWU map, the suite named by the DST. The same message always maps to
    the same point.

    Args:
        message (bytes): Arbitrary-length message.

    Returns:
        G2Point: The hashed point, already in the prime-order subgroup.
    """
    return hash_to_G2(bytes(message), DST, hashlib.sha256)
