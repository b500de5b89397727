"""
Fixed-length homogeneous sequences.

Defines:
    - ConstList: ordered values of one scalar type
    - StrList: ordered string literals

Both are frozen dataclasses. Their length and contents are fixed when
they are declared; there is no mutation API.

ARCHITECTURAL RULE:
    Negative positions are out of range. They do NOT wrap around
    the way Python lists do. Valid positions are exactly [0, size).
"""

import logging
import operator
from dataclasses import dataclass, field
from typing import Any, Iterator, Tuple

from .errors import DeclarationError, StaticIndexError

logger = logging.getLogger(__name__)


def check_index(index: Any, size: int, owner: str = "sequence") -> int:
    """
    Validate a position against a fixed size.

    Args:
        index: Position to validate
        size: Number of elements of the owner
        owner: Name used in error messages

    Returns:
        The position as a plain int

    Raises:
        DeclarationError: If index is not an integer
        StaticIndexError: If index is outside [0, size)
    """
    if isinstance(index, bool):
        raise DeclarationError(f"{owner} index must be an integer, got bool")
    try:
        position = operator.index(index)
    except TypeError:
        raise DeclarationError(
            f"{owner} index must be an integer, got {type(index).__name__}"
        ) from None
    if not 0 <= position < size:
        logger.debug("index %d out of range for %s of size %d", position, owner, size)
        raise StaticIndexError(
            f"index {position} out of range for {owner} of size {size}",
            index=position,
            size=size,
        )
    return position


def coerce_literal(value_type: type, value: Any, where: str) -> Any:
    """
    Check one literal against a declared type.

    Integer literals declared as float are widened to float.
    Booleans only satisfy bool.

    Raises:
        DeclarationError: If the literal does not match value_type
    """
    if isinstance(value, bool) and value_type is not bool:
        raise DeclarationError(
            f"{where}: bool is not a valid {value_type.__name__} literal"
        )
    if value_type is float and isinstance(value, int):
        return float(value)
    if not isinstance(value, value_type):
        raise DeclarationError(
            f"{where}: expected {value_type.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class ConstList:
    """
    Fixed-length ordered sequence of values of one scalar type.

    Example:
        ConstList.of(float, 0.5, 0.25)

    Properties:
        value_type: Declared element type (int, float, str, ...)
        values: The literals, in declaration order

    IMPORTANT:
        Integer literals declared for a float list are stored as floats.
        Booleans are never accepted as numbers.
    """

    value_type: type
    values: Tuple[Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.value_type, type):
            raise DeclarationError(f"value_type must be a type, got {self.value_type!r}")
        if isinstance(self.values, (str, bytes)):
            raise DeclarationError(
                f"values must be a sequence of literals, got a bare {type(self.values).__name__}"
            )
        coerced = tuple(
            coerce_literal(self.value_type, value, f"element {position}")
            for position, value in enumerate(self.values)
        )
        object.__setattr__(self, "values", coerced)
        logger.debug(
            "declared %s[%s] of size %d",
            type(self).__name__, self.value_type.__name__, len(coerced),
        )

    @classmethod
    def of(cls, value_type: type, *values: Any) -> "ConstList":
        """Declare a list from positional literals."""
        return cls(value_type=value_type, values=values)

    def size(self) -> int:
        return len(self.values)

    def at(self, index: int) -> Any:
        """
        Return the value at a position.

        Raises:
            StaticIndexError: If index is outside [0, size)
        """
        position = check_index(index, len(self.values), type(self).__name__)
        return self.values[position]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Any:
        return self.at(index)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __contains__(self, value: Any) -> bool:
        return value in self.values


@dataclass(frozen=True)
class StrList(ConstList):
    """
    Fixed-length ordered sequence of string literals.

    Strings are immutable, so at() hands back the stored object itself.
    No copy is made.
    """

    value_type: type = field(default=str, init=False)
    values: Tuple[str, ...] = ()

    @classmethod
    def of(cls, *values: str) -> "StrList":
        return cls(values=values)
