# Contract package: the lookup port, its error kinds and result types.

from lookup_stack.contract.errors import ContainerError, NotFoundError
from lookup_stack.contract.lookup import Lookup, require_lookup
from lookup_stack.contract.result import Found, LookupResult, Missing, try_get

__all__ = [
    "ContainerError",
    "NotFoundError",
    "Lookup",
    "require_lookup",
    "Found",
    "Missing",
    "LookupResult",
    "try_get",
]
