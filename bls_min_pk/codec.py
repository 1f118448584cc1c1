# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import logging
from typing import Callable, Iterable

from eth_typing import BLSPubkey, BLSSignature
from py_ecc.bls.g2_primitives import (
    G1_to_pubkey,
    G2_to_signature,
    is_inf,
    pubkey_to_G1,
    signature_to_G2,
    subgroup_check,
)
from py_ecc.fields import optimized_bls12_381_FQ as FQ
from py_ecc.fields import optimized_bls12_381_FQ2 as FQ2
from py_ecc.typing import Optimized_Point3D

from bls_min_pk.constants import PUBLIC_KEY_SIZE, SIGNATURE_SIZE
from bls_min_pk.errors import DecodeResult, Failure

logger = logging.getLogger(__name__)

G1Point = Optimized_Point3D[FQ]
G2Point = Optimized_Point3D[FQ2]


def _decode(
    data: bytes, size: int, decompress: Callable[[bytes], Optimized_Point3D], group: str
) -> DecodeResult:
    """
    Shared decode path for both groups.

    Order of checks: type, length, point decompression (flags, field range,
    curve equation), then the prime-order subgroup check. The identity
    passes every check and is reported through `is_identity`.

    Args:
        data: The compressed point.
        size: Expected length in bytes for this group.
        decompress: py_ecc decompressor for this group.
        group: Group name, only used for log lines.

    Returns:
        DecodeResult: The decoded point or the failure category.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        logger.debug("%s decode: unsupported input type %s", group, type(data).__name__)
        return DecodeResult.reject(Failure.ENCODING_INVALID)

    raw = bytes(data)
    if len(raw) != size:
        logger.debug("%s decode: expected %d bytes, got %d", group, size, len(raw))
        return DecodeResult.reject(Failure.SIZE_MISMATCH)

    try:
        point = decompress(raw)
    except ValueError as e:
        logger.debug("%s decode: invalid encoding: %s", group, e)
        return DecodeResult.reject(Failure.ENCODING_INVALID)

    if is_inf(point):
        return DecodeResult.success(point, is_identity=True)

    if not subgroup_check(point):
        logger.debug("%s decode: point is outside the prime-order subgroup", group)
        return DecodeResult.reject(Failure.SUBGROUP_INVALID)

    return DecodeResult.success(point, is_identity=False)


def collect(items: Iterable[bytes] | None) -> list[bytes] | None:
    """
    Materialise a caller-supplied collection of encoded points.

    Generators and other one-shot iterables are drained once so emptiness
    and element counts can be checked up front.

    Args:
        items: Encoded points, or None.

    Returns:
        list[bytes] | None: The items as a list (empty for None), or None
        when `items` is not iterable.
    """
    if items is None:
        return []
    try:
        return list(items)
    except TypeError:
        logger.debug("expected an iterable of encoded points, got %s", type(items).__name__)
        return None


def decode_public_key(data: bytes) -> DecodeResult:
    """
    Decode a 48-byte compressed G1 public key.

    Args:
        data: The compressed public key.

    Returns:
        DecodeResult: Holds the G1 point on success.
    """
    return _decode(data, PUBLIC_KEY_SIZE, lambda raw: pubkey_to_G1(BLSPubkey(raw)), "G1")


def decode_signature(data: bytes) -> DecodeResult:
    """
    Decode a 96-byte compressed G2 signature.

    Args:
        data: The compressed signature.

    Returns:
        DecodeResult: Holds the G2 point on success.
    """
    return _decode(
        data, SIGNATURE_SIZE, lambda raw: signature_to_G2(BLSSignature(raw)), "G2"
    )


def encode_public_key(point: G1Point) -> BLSPubkey:
    """
    Compress a G1 point into its canonical 48-byte form.

    Args:
        point (G1Point): The point to compress.

    Returns:
        BLSPubkey: The compressed public key.
    """
    return G1_to_pubkey(point)


def encode_signature(point: G2Point) -> BLSSignature:
    """
    Compress a G2 point into its canonical 96-byte form.

    Args:
        point (G2Point): The point to compress.

    Returns:
        BLSSignature: The compressed signature.
    """
    return G2_to_signature(point)
