from __future__ import annotations

from collections.abc import Mapping

from lookup_stack.contract.errors import NotFoundError
from lookup_stack.contract.lookup import Lookup


class MappingLookup(Lookup):
    # Flat read-only view over a mapping; the mapping is referenced, not copied.
    def __init__(self, data: Mapping[str, object] | None = None) -> None:
        self._data: Mapping[str, object] = {} if data is None else data

    def has(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str) -> object:
        if key not in self._data:
            raise NotFoundError(key, container=self)
        return self._data[key]
