"""Strict codec for persisted `<key>$<salt>` credential records."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

RECORD_DELIMITER = "$"


@dataclass(frozen=True)
class MalformedRecordError(ValueError):
    """Stored record does not parse into two base64 fields."""

    reason: str

    def __str__(self) -> str:
        return self.reason


@dataclass(frozen=True)
class CredentialRecord:
    """Base64 encoded derived key and salt as they appear in storage."""

    encoded_key: str
    encoded_salt: str

    @property
    def key(self) -> bytes:
        return base64.b64decode(self.encoded_key, validate=True)

    @property
    def salt(self) -> bytes:
        return base64.b64decode(self.encoded_salt, validate=True)

    def serialize(self) -> str:
        """Return the persisted text form of this record."""

        return f"{self.encoded_key}{RECORD_DELIMITER}{self.encoded_salt}"


def encode_field(value: bytes) -> str:
    """Encode bytes with the standard padded base64 alphabet."""

    return base64.b64encode(value).decode("ascii")


def build_credential_record(*, key: bytes, salt: bytes) -> CredentialRecord:
    """Build one record from raw derived key and salt bytes."""

    return CredentialRecord(encoded_key=encode_field(key), encoded_salt=encode_field(salt))


def parse_credential_record(record: str) -> CredentialRecord:
    """Split and validate one stored record or raise `MalformedRecordError`."""

    if not record.isascii():
        raise MalformedRecordError("non_ascii_record")

    delimiter_count = record.count(RECORD_DELIMITER)
    if delimiter_count == 0:
        raise MalformedRecordError("missing_delimiter")
    if delimiter_count > 1:
        raise MalformedRecordError("too_many_delimiters")

    encoded_key, encoded_salt = record.split(RECORD_DELIMITER)
    if not encoded_key:
        raise MalformedRecordError("empty_key")
    if not encoded_salt:
        raise MalformedRecordError("empty_salt")

    if not _is_valid_base64(encoded_key):
        raise MalformedRecordError("invalid_key_encoding")
    if not _is_valid_base64(encoded_salt):
        raise MalformedRecordError("invalid_salt_encoding")

    return CredentialRecord(encoded_key=encoded_key, encoded_salt=encoded_salt)


def _is_valid_base64(value: str) -> bool:
    try:
        base64.b64decode(value, validate=True)
    except binascii.Error:
        return False
    return True
