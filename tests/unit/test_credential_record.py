from __future__ import annotations

import pytest

from credential_hasher.domain.credential_record import (
    CredentialRecord,
    MalformedRecordError,
    build_credential_record,
    parse_credential_record,
)


def test_build_and_parse_preserve_fields() -> None:
    record = build_credential_record(key=b"k" * 32, salt=b"s" * 32)

    parsed = parse_credential_record(record.serialize())

    assert parsed == record
    assert parsed.key == b"k" * 32
    assert parsed.salt == b"s" * 32


def test_serialize_joins_fields_with_single_delimiter() -> None:
    record = CredentialRecord(encoded_key="a2V5", encoded_salt="c2FsdA==")

    assert record.serialize() == "a2V5$c2FsdA=="


def test_encoded_fields_never_contain_delimiter() -> None:
    record = build_credential_record(key=bytes(range(256))[:32], salt=bytes(range(224, 256)))

    assert "$" not in record.encoded_key
    assert "$" not in record.encoded_salt
    assert record.serialize().count("$") == 1


@pytest.mark.parametrize(
    ("raw", "reason"),
    [
        ("", "missing_delimiter"),
        ("not-a-valid-record", "missing_delimiter"),
        ("a2V5$c2FsdA==$extra", "too_many_delimiters"),
        ("$$", "too_many_delimiters"),
        ("$c2FsdA==", "empty_key"),
        ("a2V5$", "empty_salt"),
        ("a2V*$c2FsdA==", "invalid_key_encoding"),
        ("a2V5$c2FsdA=", "invalid_salt_encoding"),
        ("a2V5$c2Fs dA==", "invalid_salt_encoding"),
        ("a2V5$c2FsdA==é", "non_ascii_record"),
    ],
)
def test_parse_rejects_malformed_records(raw: str, reason: str) -> None:
    with pytest.raises(MalformedRecordError) as exc_info:
        parse_credential_record(raw)

    assert exc_info.value.reason == reason
    assert str(exc_info.value) == reason


def test_malformed_record_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_credential_record("missing")
