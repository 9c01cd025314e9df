"""Operating-system CSPRNG adapter for salt generation."""

from __future__ import annotations

import logging
import secrets

from credential_hasher.domain.errors import AlgorithmUnavailableError

logger = logging.getLogger(__name__)


class SystemRandomSource:
    """Random source backed by `os.urandom` through the `secrets` module.

    The platform generator is reentrant, so one instance may be shared by
    every thread in the process.
    """

    def next_bytes(self, length: int) -> bytes:
        if length < 0:
            raise ValueError("length must be non-negative")
        try:
            return secrets.token_bytes(length)
        except (NotImplementedError, OSError) as exc:
            logger.error("secure_random_source_unavailable error=%s", exc)
            raise AlgorithmUnavailableError("secure random source unavailable") from exc


SYSTEM_RANDOM_SOURCE = SystemRandomSource()
