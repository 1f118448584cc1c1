# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# domain separation tag, basic (NUL) scheme with signatures in G2
DST = b"BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_NUL_"

# compressed point sizes in bytes
PUBLIC_KEY_SIZE = 48
SIGNATURE_SIZE = 96

# flag bits carried in the first byte of a compressed point
COMPRESSION_FLAG = 0x80
INFINITY_FLAG = 0x40
SIGN_FLAG = 0x20

# canonical encodings of the identity elements
G1_IDENTITY_BYTES = bytes([COMPRESSION_FLAG | INFINITY_FLAG]) + b"\x00" * (PUBLIC_KEY_SIZE - 1)
G2_IDENTITY_BYTES = bytes([COMPRESSION_FLAG | INFINITY_FLAG]) + b"\x00" * (SIGNATURE_SIZE - 1)
