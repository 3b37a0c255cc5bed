from __future__ import annotations

from dataclasses import dataclass, field

from lookup_stack.contract.lookup import Lookup
from lookup_stack.contract.result import Found, try_get
from lookup_stack.observability.sinks import LogSink, emit_log


@dataclass(frozen=True)
class PrefixResolvingLookup(Lookup):
    """Lookup whose key space is the inner key space with `prefix` removed.

    Every key is resolved as ``prefix + key`` against `inner`. When `strict` is
    False, a miss on the prefixed key falls back to the raw key, so keys that are
    already prefixed (or coincidentally match) still resolve.

    The adapter never mutates `inner` and keeps no state of its own.
    """

    inner: Lookup
    prefix: str
    strict: bool = True
    log: LogSink | None = field(default=None, compare=False, repr=False)

    def inner_key(self, key: str) -> str:
        return self.prefix + key

    def has(self, key: str) -> bool:
        return self.inner.has(self.inner_key(key)) or (not self.strict and self.inner.has(key))

    def get(self, key: str) -> object:
        result = try_get(self.inner, self.inner_key(key))
        if isinstance(result, Found):
            return result.value
        if self.strict:
            raise result.error
        emit_log(self.log, "debug", "prefix_fallback", key=key, prefix=self.prefix)
        return self.inner.get(key)
