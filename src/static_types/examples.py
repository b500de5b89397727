"""
Example consumers of the static containers.

Three small calculators read their parameters from containers declared
up front:
    - Calc: sums a list of coefficients
    - Calc2: accumulates every coefficient x id product
    - Calc3: counts a needle in each group's definition via a map of
      string lists, then weighs the count by every coefficient

build_demo_containers() declares the literals used by the demo, and
demo_total() runs all three plus a HeteroList visit over two of them.
"""
from dataclasses import dataclass, field
from functools import partial
from typing import Dict, List

from static_types.hetero import HeteroList
from static_types.mapping import StaticMap
from static_types.sequences import ConstList, StrList


@dataclass
class Calc:
    coefs: ConstList

    def update(self) -> float:
        total = 0.0
        for i in range(self.coefs.size()):
            total += self.coefs.at(i)
        return total


@dataclass
class Calc2:
    coefs: ConstList
    ids: ConstList
    values: List[float] = field(default_factory=list, init=False)

    def update(self) -> float:
        # Running totals, one per (coef, id) pair.
        self.values = []
        total = 0.0
        for i in range(self.coefs.size()):
            for j in range(self.ids.size()):
                total += self.coefs.at(i) * self.ids.at(j)
                self.values.append(total)
        return self.values[-1] if self.values else 0.0


@dataclass
class Calc3:
    groups: StrList
    groupdefs: StaticMap
    coefs: ConstList
    needle: str = "baz"
    values: List[float] = field(default_factory=list, init=False)

    def update(self) -> float:
        self.values = []
        total = 0.0
        for group in self.groups:
            count = 0
            for ni in range(self.groupdefs.size(group)):
                if self.groupdefs.get(group, ni) == self.needle:
                    count += 1
            for j in range(self.coefs.size()):
                total += count * self.coefs.at(j)
                self.values.append(total)
        return self.values[-1] if self.values else 0.0


def build_demo_containers() -> Dict[str, object]:
    """Declare the literals the demo calculators run on."""
    return {
        "CALC_COEFS": ConstList.of(float, 0.9999, 0.998, 0.9333, 0.5),
        "COEFS": ConstList.of(float, 0.5, 0.25),
        "IDS": ConstList.of(int, 1, 2),
        "GROUPS": StrList.of("chicken", "beef"),
        "GROUPDEFS": StaticMap.of(
            str, StrList,
            ("chicken", StrList.of("foo", "bar")),
            ("beef", StrList.of("baz", "bat")),
        ),
    }


def demo_total() -> float:
    """
    Sum of all three calculators plus a visit over a Calc/Calc2 pair.

    Expected: 3.4312 + 2.25 + 0.75 + (3.4312 + 2.25) = 12.1124
    """
    c = build_demo_containers()

    total = Calc(c["CALC_COEFS"]).update()
    total += Calc2(c["COEFS"], c["IDS"]).update()
    total += Calc3(c["GROUPS"], c["GROUPDEFS"], c["COEFS"]).update()

    pair = HeteroList.of(
        partial(Calc, c["CALC_COEFS"]),
        partial(Calc2, c["COEFS"], c["IDS"]),
    )
    visited: List[float] = []
    pair.visit(lambda calc: visited.append(calc.update()))

    return total + sum(visited)
