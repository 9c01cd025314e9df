"""Port for the cryptographically secure byte source used for salts."""

from __future__ import annotations

from typing import Protocol


class RandomSourcePort(Protocol):
    """Supplier of unpredictable bytes."""

    def next_bytes(self, length: int) -> bytes:
        """Return exactly `length` random bytes."""
