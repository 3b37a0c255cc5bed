"""Composable read-only lookup adapters.

Every adapter implements the same ``has`` / ``get`` contract and can wrap any
other, e.g. a prefix-stripping view over a lazily materialized data tree.
"""

from lookup_stack.adapters import (
    HierarchicalLookup,
    MappingLookup,
    PathLookup,
    PrefixResolvingLookup,
    ProxyLookup,
)
from lookup_stack.contract import ContainerError, Found, Lookup, LookupResult, Missing, NotFoundError, try_get

__version__ = "0.1.0"

__all__ = [
    "Lookup",
    "ContainerError",
    "NotFoundError",
    "Found",
    "Missing",
    "LookupResult",
    "try_get",
    "HierarchicalLookup",
    "MappingLookup",
    "PathLookup",
    "PrefixResolvingLookup",
    "ProxyLookup",
]
