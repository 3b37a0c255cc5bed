from __future__ import annotations

from typing import Protocol, runtime_checkable


# Lookup is the read-only port every adapter implements and wraps.
@runtime_checkable
class Lookup(Protocol):
    def has(self, key: str) -> bool:
        """Return True when `get(key)` would succeed."""
        raise NotImplementedError("Lookup is a port; use a concrete adapter.")

    def get(self, key: str) -> object:
        """Return the value for `key`; raise NotFoundError when absent."""
        raise NotImplementedError("Lookup is a port; use a concrete adapter.")


def require_lookup(candidate: object) -> Lookup:
    # Structural check only; signatures are not inspected.
    if not isinstance(candidate, Lookup):
        raise TypeError(f"Expected a Lookup (has/get), got {type(candidate).__name__}")
    return candidate
