import pytest
from py_ecc.bls import G2Basic
from py_ecc.bls.g2_primitives import is_inf, subgroup_check
from py_ecc.optimized_bls12_381 import eq

from bls_min_pk.codec import encode_signature
from bls_min_pk.constants import DST
from bls_min_pk.hashing import hash_to_signature_group


def test_dst_matches_basic_scheme():
    assert DST == G2Basic.DST
    assert DST == b"BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_NUL_"


def test_hash_is_deterministic():
    assert eq(hash_to_signature_group(b"acab"), hash_to_signature_group(b"acab"))


def test_different_messages_hash_apart():
    assert not eq(hash_to_signature_group(b"acab"), hash_to_signature_group(b"acac"))


def test_hash_lands_in_subgroup():
    h = hash_to_signature_group(b"")
    assert not is_inf(h)
    assert subgroup_check(h)


def test_hash_matches_signature_with_unit_key():
    # a signature under sk = 1 is the hashed point itself
    msg = b"hello walrus"
    assert encode_signature(hash_to_signature_group(msg)) == G2Basic.Sign(1, msg)


def test_bytearray_message():
    assert eq(hash_to_signature_group(bytearray(b"abc")), hash_to_signature_group(b"abc"))


if __name__ == "__main__":
    pytest.main()
