from __future__ import annotations


class ContainerError(RuntimeError):
    # General lookup failure; `container` is the adapter that raised it, when known.
    def __init__(self, message: str, *, container: object | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.container = container


class NotFoundError(ContainerError, LookupError):
    # Raised by `get` exactly when `has(key)` would be false.
    def __init__(self, key: str, *, container: object | None = None, message: str | None = None) -> None:
        super().__init__(message or f"Key '{key}' does not exist", container=container)
        self.key = key
