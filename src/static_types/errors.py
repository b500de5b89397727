"""
Exception taxonomy for static containers.

Every error is raised where it is detected and propagated unchanged.
Nothing is retried or silently defaulted.
"""


class StaticTypesError(Exception):
    """Base exception for this package."""


class StaticIndexError(StaticTypesError, IndexError):
    """Raised when a position is outside [0, size) of a sequence."""

    def __init__(self, message: str, *, index=None, size=None):
        super().__init__(message)
        self.index = index
        self.size = size


class StaticKeyError(StaticTypesError, KeyError):
    """Raised when a key is absent from a map's bindings."""

    def __init__(self, message: str, *, key=None):
        super().__init__(message)
        self.key = key

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class DeclarationError(StaticTypesError, TypeError):
    """Raised when a container literal is malformed."""
