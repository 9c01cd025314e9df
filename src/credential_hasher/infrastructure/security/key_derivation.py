"""PBKDF2-HMAC key derivation and salt helpers."""

from __future__ import annotations

import hashlib
import logging

from credential_hasher.application.ports.random_source_port import RandomSourcePort
from credential_hasher.domain.credential_record import encode_field
from credential_hasher.domain.errors import AlgorithmUnavailableError
from credential_hasher.domain.hashing_parameters import (
    DEFAULT_HASHING_PARAMETERS,
    HashingParameters,
)

logger = logging.getLogger(__name__)


def generate_salt(length: int, *, random_source: RandomSourcePort) -> bytes:
    """Draw one fresh salt of exactly `length` bytes."""

    salt = random_source.next_bytes(length)
    if len(salt) != length:
        raise AlgorithmUnavailableError(
            f"random source returned {len(salt)} bytes, expected {length}"
        )
    return salt


def encode_password(password: str) -> bytes:
    """Encode one password as UTF-8, replacing lone surrogates with `?`."""

    return password.encode("utf-8", errors="replace")


def derive_key(
    password: str,
    salt: bytes,
    *,
    parameters: HashingParameters = DEFAULT_HASHING_PARAMETERS,
) -> bytes:
    """Derive the raw PBKDF2 key for one password and salt.

    Output is deterministic for a fixed (password, salt, parameters) triple.
    """

    password_bytes = encode_password(password)
    try:
        return hashlib.pbkdf2_hmac(
            parameters.prf_hash,
            password_bytes,
            salt,
            parameters.iterations,
            dklen=parameters.key_length_bytes,
        )
    except ValueError as exc:
        # hashlib raises ValueError for digests the OpenSSL build does not provide.
        logger.error(
            "key_derivation_unavailable prf=%s error=%s",
            parameters.prf_hash,
            exc,
        )
        raise AlgorithmUnavailableError(
            f"PBKDF2 with HMAC-{parameters.prf_hash} is not available"
        ) from exc


def hash_with_salt(
    password: str,
    salt: bytes,
    *,
    parameters: HashingParameters = DEFAULT_HASHING_PARAMETERS,
) -> str:
    """Return the base64 encoded derived key for `password` and `salt`.

    The result carries no salt and must not be stored on its own; use
    `Pbkdf2PasswordHasher.hash_password` to build a complete record.
    """

    return encode_field(derive_key(password, salt, parameters=parameters))
