from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from lookup_stack.contract.errors import NotFoundError
from lookup_stack.contract.lookup import Lookup


@dataclass(frozen=True, slots=True)
class Found:
    value: object


@dataclass(frozen=True, slots=True)
class Missing:
    # Keeps the original error so callers can re-raise it unchanged.
    error: NotFoundError

    @property
    def key(self) -> str:
        return self.error.key


LookupResult: TypeAlias = Found | Missing


def try_get(lookup: Lookup, key: str) -> LookupResult:
    # Only NotFoundError becomes a result; any other failure propagates.
    try:
        return Found(lookup.get(key))
    except NotFoundError as exc:
        return Missing(exc)
