"""
Pinned references: literal lookups resolved at declaration.

A pinned reference binds a container to a literal index or key and
resolves it immediately. A lookup that can never succeed fails where
the reference is declared (normally at import), not later when the
value is first needed.

Dynamic indices and keys keep using ConstList.at() and StaticMap.get(),
which check at call time.

Example:
    BEEF_FIRST = pin(GROUPDEFS, "beef", 0)   # raises here if "beef" is unbound
    BEEF_FIRST()                              # -> "baz"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import DeclarationError
from .mapping import StaticMap
from .sequences import ConstList


@dataclass(frozen=True)
class IndexRef:
    """A literal position into a ConstList or StrList."""

    sequence: ConstList
    index: int
    value: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "value", self.sequence.at(self.index))

    def get(self) -> Any:
        return self.value

    def __call__(self) -> Any:
        return self.value


@dataclass(frozen=True)
class KeyRef:
    """A literal key, and optionally a literal position, into a StaticMap."""

    mapping: StaticMap
    key: Any
    index: Optional[int] = None
    value: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "value", self.mapping.get(self.key, self.index))

    def get(self) -> Any:
        return self.value

    def __call__(self) -> Any:
        return self.value


def pin(container: Any, key_or_index: Any, index: Optional[int] = None):
    """
    Declare a pinned reference into a container.

    Args:
        container: ConstList, StrList or StaticMap
        key_or_index: Position for sequences, key for maps
        index: Position inside the map value (maps only)

    Returns:
        IndexRef or KeyRef, already resolved

    Raises:
        StaticIndexError / StaticKeyError: If the literal can never resolve
        DeclarationError: If the container cannot be pinned this way
    """
    if isinstance(container, StaticMap):
        return KeyRef(container, key_or_index, index)
    if isinstance(container, ConstList):
        if index is not None:
            raise DeclarationError("a second index only applies to StaticMap values")
        return IndexRef(container, key_or_index)
    raise DeclarationError(f"cannot pin into {type(container).__name__}")
