from __future__ import annotations

from lookup_stack.contract.errors import ContainerError
from lookup_stack.contract.lookup import Lookup, require_lookup


class ProxyLookup(Lookup):
    # Delegates to a target that can be swapped after construction.
    def __init__(self, inner: Lookup | None = None) -> None:
        self._inner = require_lookup(inner) if inner is not None else None

    def set_inner(self, inner: Lookup) -> None:
        self._inner = require_lookup(inner)

    def has(self, key: str) -> bool:
        return self._require_inner().has(key)

    def get(self, key: str) -> object:
        return self._require_inner().get(key)

    def _require_inner(self) -> Lookup:
        # Missing target is a container failure, never a missing key.
        if self._inner is None:
            raise ContainerError("Inner lookup is not set", container=self)
        return self._inner
