#!/usr/bin/env python3

# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

"""
Walk through the three BLS12-381 min_pk calls with placeholder data.

In practice the bytes come from Walrus storage nodes or a Sui transaction.
All-zero buffers are not valid compressed points, so every call takes its
fail-soft path.

Run from the repository root:
    PYTHONPATH=. python examples/bls_example.py
"""

from bls_min_pk import (
    PUBLIC_KEY_SIZE,
    SIGNATURE_SIZE,
    bls12381_min_pk_aggregate,
    bls12381_min_pk_verify,
    bls12381_min_pk_verify_aggregate,
)


def main() -> None:
    fake_sig = bytes(SIGNATURE_SIZE)
    fake_pk = bytes(PUBLIC_KEY_SIZE)
    msg = bytes([1, 2, 3, 4])

    valid = bls12381_min_pk_verify(fake_sig, fake_pk, msg)
    print(f"Single verify (fake data): {valid}")  # False

    agg_sig = bls12381_min_pk_aggregate([])
    print(f"Aggregate of empty list: {len(agg_sig)} bytes")  # 0

    agg_valid = bls12381_min_pk_verify_aggregate([], msg, fake_sig)
    print(f"Aggregate verify (empty keys): {agg_valid}")  # False


if __name__ == "__main__":
    main()
