from __future__ import annotations

from dataclasses import dataclass

from lookup_stack.contract.errors import NotFoundError
from lookup_stack.contract.lookup import Lookup


@dataclass(frozen=True)
class PathLookup(Lookup):
    # Resolves "a/b/c" as inner.get("a").get("b").get("c") over a tree of lookups.
    inner: Lookup
    delimiter: str = "/"

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise ValueError("PathLookup.delimiter must be a non-empty string")

    def has(self, key: str) -> bool:
        node: object = self.inner
        for segment in key.split(self.delimiter):
            if not isinstance(node, Lookup) or not node.has(segment):
                return False
            node = node.get(segment)
        return True

    def get(self, key: str) -> object:
        node: object = self.inner
        for segment in key.split(self.delimiter):
            if not isinstance(node, Lookup):
                raise NotFoundError(key, container=self, message=f"Key '{key}' does not exist: '{segment}' is not under a lookup")
            try:
                node = node.get(segment)
            except NotFoundError as exc:
                raise NotFoundError(key, container=self) from exc
        return node
