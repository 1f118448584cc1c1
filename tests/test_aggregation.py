# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from itertools import permutations

import pytest
from py_ecc.bls import G2Basic
from py_ecc.optimized_bls12_381 import G2, Z2, eq, multiply

from bls_min_pk.aggregation import aggregate, aggregate_points
from bls_min_pk.codec import decode_signature
from bls_min_pk.constants import G2_IDENTITY_BYTES, SIGN_FLAG

shared = b"shared message"
sigs = [G2Basic.Sign(sk, shared) for sk in (1111, 2222, 3333)]


def test_aggregate_points_of_nothing_is_identity():
    assert eq(aggregate_points([]), Z2)


def test_aggregate_points_adds():
    assert eq(aggregate_points([G2, G2, G2]), multiply(G2, 3))


def test_aggregate_empty():
    assert aggregate([]) == b""


def test_aggregate_malformed():
    assert aggregate([bytes(10)]) == b""


def test_aggregate_malformed_in_the_middle():
    assert aggregate([sigs[0], bytes(96), sigs[2]]) == b""


def test_aggregate_single_is_itself():
    agg = aggregate([sigs[0]])
    assert len(agg) == 96
    assert agg == sigs[0]
    assert eq(decode_signature(agg).point, decode_signature(sigs[0]).point)


def test_aggregate_multiple_matches_reference():
    agg = aggregate(sigs)
    assert len(agg) == 96
    assert agg != sigs[0]
    assert agg == G2Basic.Aggregate(sigs)


def test_aggregate_is_order_independent():
    results = {aggregate(list(order)) for order in permutations(sigs)}
    assert len(results) == 1


def test_aggregate_with_identity():
    assert aggregate([sigs[1], G2_IDENTITY_BYTES]) == sigs[1]


def test_aggregate_cancelling_signatures():
    negated = bytes([sigs[0][0] ^ SIGN_FLAG]) + sigs[0][1:]
    assert aggregate([sigs[0], negated]) == G2_IDENTITY_BYTES


def test_aggregate_signature_outside_subgroup(off_subgroup_signature):
    assert aggregate([off_subgroup_signature]) == b""
    assert aggregate([sigs[0], off_subgroup_signature]) == b""


def test_aggregate_from_generator():
    assert aggregate(s for s in sigs) == G2Basic.Aggregate(sigs)
    assert aggregate(s for s in []) == b""
    assert aggregate(None) == b""
    assert aggregate(96) == b""


def test_aggregate_returns_bytes():
    assert type(aggregate([bytearray(sigs[0])])) is bytes


if __name__ == "__main__":
    pytest.main()
