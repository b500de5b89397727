"""
Associative map with bindings fixed at declaration.

StaticMap keeps its (key, value) bindings in declaration order and
resolves every lookup by linear scan, stopping at the FIRST equal key.

Consequences:
    - Keys need not be unique
    - A later binding with a repeated key is unreachable
    - Every lookup costs O(number of bindings)

Maps declared this way are meant to stay small. MAP_SIZE_CEILING
documents the intended upper bound; it is reported by the analyzer,
not enforced here.

Map of lists example:
    groups = StaticMap.of(
        str, StrList,
        ("key1", StrList.of("val1_1", "val1_2")),
        ("key2", StrList.of("val2_1", "val2_2")),
    )
    for key in groups.keys():
        print(key, [groups.get(key, i) for i in range(groups.size(key))])
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Tuple

from .errors import DeclarationError, StaticKeyError
from .sequences import ConstList, coerce_literal

logger = logging.getLogger(__name__)

MAP_SIZE_CEILING = 64

_MISSING = object()


@dataclass(frozen=True)
class StaticMap:
    """
    Fixed set of key -> value bindings.

    Properties:
        key_type: Declared type of every key
        value_type: Declared type of every value (may be StrList or ConstList)
        bindings: (key, value) pairs in declaration order

    Lookups:
        size()          -> number of bindings
        size(key)       -> length of the sequence bound to key
        get(key)        -> value bound to key        (also m[key])
        get(key, i)     -> i-th element of that value (also m(key, i))
    """

    key_type: type
    value_type: type
    bindings: Tuple[Tuple[Any, Any], ...] = ()

    def __post_init__(self):
        for name in ("key_type", "value_type"):
            declared = getattr(self, name)
            if not isinstance(declared, type):
                raise DeclarationError(f"{name} must be a type, got {declared!r}")

        if isinstance(self.bindings, (str, bytes, Mapping)):
            raise DeclarationError(
                f"bindings must be a sequence of (key, value) pairs, "
                f"got {type(self.bindings).__name__}"
            )

        checked = []
        for position, binding in enumerate(self.bindings):
            if isinstance(binding, (str, bytes)):
                raise DeclarationError(
                    f"binding {position}: expected a (key, value) pair, got {binding!r}"
                )
            try:
                key, value = binding
            except (TypeError, ValueError):
                raise DeclarationError(
                    f"binding {position}: expected a (key, value) pair, got {binding!r}"
                ) from None
            key = coerce_literal(self.key_type, key, f"binding {position} key")
            value = coerce_literal(self.value_type, value, f"binding {position} value")
            checked.append((key, value))

        object.__setattr__(self, "bindings", tuple(checked))
        logger.debug(
            "declared StaticMap[%s, %s] with %d bindings",
            self.key_type.__name__, self.value_type.__name__, len(checked),
        )

    @classmethod
    def of(cls, key_type: type, value_type: type, *bindings: Tuple[Any, Any]) -> StaticMap:
        return cls(key_type=key_type, value_type=value_type, bindings=bindings)

    def _lookup(self, key: Any) -> Any:
        """Linear scan; the first binding with an equal key wins."""
        for bound_key, value in self.bindings:
            if bound_key == key:
                return value
        logger.debug("key %r not found among %d bindings", key, len(self.bindings))
        raise StaticKeyError(f"key {key!r} not found in StaticMap", key=key)

    def _lookup_sequence(self, key: Any) -> ConstList:
        value = self._lookup(key)
        if not isinstance(value, ConstList):
            raise DeclarationError(
                f"value bound to {key!r} is a {type(value).__name__}, not a sequence"
            )
        return value

    def size(self, key: Any = _MISSING) -> int:
        """
        Without a key: number of bindings.
        With a key: number of elements in the sequence bound to key.

        Raises:
            StaticKeyError: If key is not bound
            DeclarationError: If the bound value is not a sequence
        """
        if key is _MISSING:
            return len(self.bindings)
        return self._lookup_sequence(key).size()

    def get(self, key: Any, index: Any = None) -> Any:
        """
        Resolve a key, optionally indexing into its sequence value.

        Raises:
            StaticKeyError: If key is not bound
            StaticIndexError: If index is out of range for the bound sequence
        """
        if index is None:
            return self._lookup(key)
        return self._lookup_sequence(key).at(index)

    def keys(self) -> Tuple[Any, ...]:
        """Keys in declaration order, duplicates included."""
        return tuple(key for key, _ in self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def __getitem__(self, key: Any) -> Any:
        return self._lookup(key)

    def __call__(self, key: Any, index: int) -> Any:
        return self.get(key, index)

    def __contains__(self, key: Any) -> bool:
        return any(bound_key == key for bound_key, _ in self.bindings)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())
