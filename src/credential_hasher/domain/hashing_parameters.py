"""Key-derivation parameters shared by hashing and verification."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

PositiveInt = Annotated[int, Field(gt=0)]
PrfHashName = Literal["sha512", "sha3_512"]

DEFAULT_ITERATIONS = 65_536
DEFAULT_KEY_LENGTH_BITS = 256
DEFAULT_SALT_LENGTH = 32
DEFAULT_PRF_HASH: PrfHashName = "sha512"


class HashingParameters(BaseModel):
    """PBKDF2 work factor, output sizes and PRF hash for one hasher instance.

    Only hashes with a digest width of at least 512 bits are accepted as the
    HMAC pseudorandom function.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    iterations: PositiveInt = DEFAULT_ITERATIONS
    key_length_bits: PositiveInt = DEFAULT_KEY_LENGTH_BITS
    salt_length: PositiveInt = DEFAULT_SALT_LENGTH
    prf_hash: PrfHashName = DEFAULT_PRF_HASH

    @model_validator(mode="after")
    def _validate_key_length_is_whole_bytes(self) -> HashingParameters:
        """Reject key lengths that cannot be expressed in whole bytes."""

        if self.key_length_bits % 8 != 0:
            raise ValueError("key_length_bits must be a multiple of 8")
        return self

    @property
    def key_length_bytes(self) -> int:
        return self.key_length_bits // 8


DEFAULT_HASHING_PARAMETERS = HashingParameters()
