"""Platform failures raised by the hashing adapters."""

from __future__ import annotations


class AlgorithmUnavailableError(RuntimeError):
    """Raised when the platform lacks a primitive required for hashing."""
