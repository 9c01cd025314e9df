"""Composition helper wiring environment settings into the PBKDF2 hasher."""

from __future__ import annotations

from credential_hasher.application.ports.random_source_port import RandomSourcePort
from credential_hasher.config.settings import Settings, load_settings
from credential_hasher.infrastructure.security.password_hasher import Pbkdf2PasswordHasher
from credential_hasher.infrastructure.security.random_source import SYSTEM_RANDOM_SOURCE


def build_password_hasher(
    settings: Settings | None = None,
    *,
    random_source: RandomSourcePort = SYSTEM_RANDOM_SOURCE,
) -> Pbkdf2PasswordHasher:
    """Build a hasher from environment settings, loading them when omitted."""

    resolved = settings if settings is not None else load_settings()
    return Pbkdf2PasswordHasher(
        parameters=resolved.hashing_parameters(),
        random_source=random_source,
    )
