# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Failure(Enum):
    """
    Reasons a decode, aggregation or verification can be rejected.

    None of these are raised. They are carried inside `DecodeResult` and
    `Verdict` so tests and logs can tell rejections apart, and the public
    API collapses them to `False` or `b""`.
    """

    SIZE_MISMATCH = "size mismatch"
    ENCODING_INVALID = "encoding invalid"
    SUBGROUP_INVALID = "subgroup invalid"
    IDENTITY_REJECTED = "identity rejected"
    MISMATCH = "cryptographic mismatch"
    EMPTY_INPUT = "empty input"


@dataclass(frozen=True)
class DecodeResult:
    """
    Tagged outcome of decoding a compressed point.

    Exactly one of `point` and `failure` is set. A decoded identity is a
    success with `is_identity` raised, so each caller decides whether the
    identity is acceptable.
    """

    point: Any = None
    failure: Failure | None = None
    is_identity: bool = False

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, point: Any, is_identity: bool) -> "DecodeResult":
        return cls(point=point, is_identity=is_identity)

    @classmethod
    def reject(cls, failure: Failure) -> "DecodeResult":
        return cls(failure=failure)


@dataclass(frozen=True)
class Verdict:
    """
    Outcome of a verification check.

    Truthy only when the pairing equation held. On rejection, `failure`
    names the category and `index` points at the offending list element
    when the input was a list of public keys.
    """

    failure: Failure | None = None
    index: int | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok

    def describe(self) -> str:
        if self.ok:
            return "valid"
        if self.index is None:
            return self.failure.value
        return f"{self.failure.value} at index {self.index}"


VALID = Verdict()
