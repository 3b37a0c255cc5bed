# Adapters package: concrete lookups that wrap data or other lookups.

from lookup_stack.adapters.hierarchy import HierarchicalLookup
from lookup_stack.adapters.mapping import MappingLookup
from lookup_stack.adapters.path import PathLookup
from lookup_stack.adapters.prefix import PrefixResolvingLookup
from lookup_stack.adapters.proxy import ProxyLookup

__all__ = [
    "HierarchicalLookup",
    "MappingLookup",
    "PathLookup",
    "PrefixResolvingLookup",
    "ProxyLookup",
]
