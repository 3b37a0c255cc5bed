from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from lookup_stack.contract.errors import NotFoundError
from lookup_stack.contract.lookup import Lookup
from lookup_stack.observability.sinks import LogSink, emit_log

# dict and list are the array-like containers, SimpleNamespace the plain structured object.
# Other mapping types are treated as opaque values.
NESTED_TYPES = (dict, list, SimpleNamespace)

_ABSENT = object()


class HierarchicalLookup(Lookup):
    """Exposes nested data as a tree of lookups, one level per `get`.

    Nested containers are wrapped the first time their key is read, and the
    wrapper is written back into the same slot. Later reads return that same
    instance, so no copy of the data is ever made and repeated traversal costs
    nothing extra.

    The node takes over the structure it is given: materialization writes into
    it. Pass ``copy.deepcopy(data)`` if the caller still needs the raw form.
    A second HierarchicalLookup over the same data sees the wrappers the first
    one wrote, and with them the first one's log sink.

    Example::

        root = HierarchicalLookup({"config": {"db": {"host": "localhost"}}})
        root.get("config").get("db").get("host")  # "localhost"

    List nodes expose their items under the decimal string of the index.
    """

    def __init__(self, data: dict[str, Any] | list[Any] | SimpleNamespace, *, log: LogSink | None = None) -> None:
        if not isinstance(data, NESTED_TYPES):
            raise TypeError(f"HierarchicalLookup requires dict, list or SimpleNamespace data, got {type(data).__name__}")
        self._data: dict[str, Any] | list[Any] = vars(data) if isinstance(data, SimpleNamespace) else data
        self._log = log

    def has(self, key: str) -> bool:
        return self._slot(key) is not _ABSENT

    def get(self, key: str) -> object:
        slot = self._slot(key)
        if slot is _ABSENT:
            raise NotFoundError(key, container=self)

        value = self._data[slot]  # type: ignore[index]
        if isinstance(value, NESTED_TYPES):
            value = self._data[slot] = HierarchicalLookup(value, log=self._log)  # type: ignore[index]
            emit_log(self._log, "debug", "node_materialized", key=key)
        return value

    def _slot(self, key: str) -> object:
        if isinstance(self._data, list):
            # Canonical decimal indexes only: "01" and "-1" are not list keys.
            if isinstance(key, str) and key.isascii() and key.isdigit() and str(int(key)) == key:
                index = int(key)
                if index < len(self._data):
                    return index
            return _ABSENT
        return key if key in self._data else _ABSENT
