import pytest
from py_ecc.bls.g2_primitives import G2_to_signature, subgroup_check
from py_ecc.bls.point_compression import modular_squareroot_in_FQ2
from py_ecc.fields import optimized_bls12_381_FQ2 as FQ2
from py_ecc.optimized_bls12_381 import b2


def off_subgroup_g2_point():
    """
    First point with x = (i, 0) that lies on the G2 curve but outside the
    prime-order subgroup. Almost every curve point qualifies, since the G2
    cofactor is large.
    """
    for i in range(1, 1000):
        x = FQ2([i, 0])
        y = modular_squareroot_in_FQ2(x**3 + b2)
        if y is None:
            continue
        point = (x, y, FQ2.one())
        if not subgroup_check(point):
            return point
    raise RuntimeError("no off-subgroup G2 point found")


@pytest.fixture(scope="session")
def off_subgroup_signature() -> bytes:
    return bytes(G2_to_signature(off_subgroup_g2_point()))


@pytest.fixture(scope="session")
def off_subgroup_public_key() -> bytes:
    # (0, 2) is on the G1 curve but has order 3
    return b"\x80" + bytes(47)
