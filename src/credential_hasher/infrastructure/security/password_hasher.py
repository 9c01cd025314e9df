"""PBKDF2 password hasher adapter."""

from __future__ import annotations

import hmac
import logging

from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort
from credential_hasher.application.ports.random_source_port import RandomSourcePort
from credential_hasher.domain.credential_record import (
    MalformedRecordError,
    build_credential_record,
    parse_credential_record,
)
from credential_hasher.domain.hashing_parameters import (
    DEFAULT_HASHING_PARAMETERS,
    HashingParameters,
)
from credential_hasher.infrastructure.security.key_derivation import (
    derive_key,
    generate_salt,
    hash_with_salt,
)
from credential_hasher.infrastructure.security.random_source import SYSTEM_RANDOM_SOURCE

logger = logging.getLogger(__name__)


class Pbkdf2PasswordHasher(PasswordHasherPort):
    """Password hashing adapter producing `<base64 key>$<base64 salt>` records."""

    def __init__(
        self,
        *,
        parameters: HashingParameters = DEFAULT_HASHING_PARAMETERS,
        random_source: RandomSourcePort = SYSTEM_RANDOM_SOURCE,
    ) -> None:
        self._parameters = parameters
        self._random_source = random_source

    @property
    def parameters(self) -> HashingParameters:
        return self._parameters

    def hash_password(self, password: str) -> str:
        salt = generate_salt(self._parameters.salt_length, random_source=self._random_source)
        record = build_credential_record(
            key=derive_key(password, salt, parameters=self._parameters),
            salt=salt,
        )
        logger.debug(
            "password_hash_created prf=%s iterations=%s",
            self._parameters.prf_hash,
            self._parameters.iterations,
        )
        return record.serialize()

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Return whether `password` matches the stored record.

        Raises `MalformedRecordError` when the record cannot be parsed. A wrong
        password and a tampered salt both return False.
        """

        try:
            record = parse_credential_record(password_hash)
        except MalformedRecordError as exc:
            logger.warning("password_record_malformed reason=%s", exc.reason)
            raise

        candidate = hash_with_salt(password, record.salt, parameters=self._parameters)
        matches = hmac.compare_digest(
            candidate.encode("ascii"),
            record.encoded_key.encode("ascii"),
        )
        if not matches:
            logger.debug("password_verification_failed")
        return matches
