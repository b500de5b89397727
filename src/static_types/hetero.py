"""
Heterogeneous fixed-length sequence with a visitation protocol.

A HeteroList is declared from a list of element types. Each slot owns
one default-constructed instance of its type. Elements are reached by
position only, through a caller-supplied visitor.

Visitation order is part of the contract:
    visit() walks from the LAST slot to the FIRST (N-1 .. 0).
Visitors with order-dependent effects (accumulation, logging) rely on it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Tuple

from .errors import DeclarationError
from .sequences import check_index

logger = logging.getLogger(__name__)


def type_name(factory: Callable[[], Any]) -> str:
    func = getattr(factory, "func", factory)
    return getattr(func, "__name__", repr(factory))


@dataclass(frozen=True, eq=False)
class HeteroList:
    """
    Fixed-length sequence whose slots hold differently typed elements.

    Example:
        HeteroList.of(Calc, partial(Calc2, coefs, ids))

    Properties:
        element_types:
            Zero-argument factories, one per slot, in declaration order.
            A class works; so does functools.partial over a class.

        items:
            The constructed elements. Built once at declaration and
            never replaced.

    IMPORTANT:
        There is no lookup by type. Position is the only selector.
        Elements are owned and may be changed by visitors, so two
        HeteroLists are equal only if they are the same object.
    """

    element_types: Tuple[Callable[[], Any], ...] = ()
    items: Tuple[Any, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        element_types = tuple(self.element_types)
        for position, factory in enumerate(element_types):
            if not callable(factory):
                raise DeclarationError(
                    f"slot {position}: element type must be callable, got {factory!r}"
                )
        object.__setattr__(self, "element_types", element_types)
        object.__setattr__(self, "items", tuple(factory() for factory in element_types))
        logger.debug(
            "declared HeteroList of size %d: %s",
            len(element_types), ", ".join(type_name(t) for t in element_types),
        )

    @classmethod
    def of(cls, *element_types: Callable[[], Any]) -> HeteroList:
        return cls(element_types=element_types)

    def size(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def visit(self, op: Callable[[Any], Any]) -> None:
        """
        Apply op to every element, last slot first.

        op is invoked exactly size() times, in order N-1, N-2, ..., 0.
        """
        for position in range(len(self.items) - 1, -1, -1):
            op(self.items[position])

    def visit_at(self, op: Callable[[Any], Any], index: int) -> Any:
        """
        Apply op to the element at one position.

        Returns:
            Whatever op returns

        Raises:
            StaticIndexError: If index is outside [0, size). op is not called.
        """
        position = check_index(index, len(self.items), "HeteroList")
        return op(self.items[position])
