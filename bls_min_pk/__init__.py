# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
"""
BLS12-381 min_pk signature verification and aggregation.

Public keys are 48-byte compressed G1 points, signatures are 96-byte
compressed G2 points, and every hash-to-curve call uses the basic scheme
tag `BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_NUL_`.
"""
from bls_min_pk.api import (
    bls12381_min_pk_aggregate,
    bls12381_min_pk_verify,
    bls12381_min_pk_verify_aggregate,
)
from bls_min_pk.constants import DST, PUBLIC_KEY_SIZE, SIGNATURE_SIZE

__all__ = [
    "DST",
    "PUBLIC_KEY_SIZE",
    "SIGNATURE_SIZE",
    "bls12381_min_pk_aggregate",
    "bls12381_min_pk_verify",
    "bls12381_min_pk_verify_aggregate",
]
