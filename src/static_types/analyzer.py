"""
Container Analyzer: declaration diagnostics for static containers.

Provides a read-only inventory of a declared container:
    - Kind and size
    - Element type names
    - Duplicate keys and the bindings they shadow
    - Empty sequence values
    - Warning flags for maps that outgrow linear lookup

IMPORTANT: This module does NOT modify containers and never raises
for soft issues. Findings are collected in ContainerReport.warnings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .hetero import HeteroList, type_name
from .mapping import MAP_SIZE_CEILING, StaticMap
from .sequences import ConstList, StrList

logger = logging.getLogger(__name__)


@dataclass
class ContainerReport:
    """Analysis report for one container."""

    kind: str
    size: int = 0
    element_types: List[str] = field(default_factory=list)

    # Map-only findings
    duplicate_keys: List[Any] = field(default_factory=list)
    unreachable_bindings: List[int] = field(default_factory=list)
    empty_values: List[Any] = field(default_factory=list)
    nested_sizes: Dict[Any, int] = field(default_factory=dict)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _kind(container: Any) -> str:
    if isinstance(container, StrList):
        return "str_list"
    if isinstance(container, ConstList):
        return "const_list"
    if isinstance(container, HeteroList):
        return "hetero_list"
    if isinstance(container, StaticMap):
        return "map"
    raise TypeError(f"Unsupported container type: {type(container)}")


def _analyze_map(mapping: StaticMap, report: ContainerReport) -> None:
    # Equality, not hashing, decides which binding a lookup reaches.
    seen: List[Any] = []
    for position, (key, value) in enumerate(mapping.bindings):
        if key in seen:
            report.unreachable_bindings.append(position)
            if key not in report.duplicate_keys:
                report.duplicate_keys.append(key)
            continue
        seen.append(key)
        if isinstance(value, ConstList):
            report.nested_sizes[key] = value.size()
            if value.size() == 0:
                report.empty_values.append(key)


def analyze_container(container: Any) -> ContainerReport:
    """
    Perform analysis of a declared container.

    Returns a ContainerReport with metrics and warnings.
    """
    report = ContainerReport(kind=_kind(container), size=container.size())

    # =========================================================================
    # 1. ELEMENT TYPES
    # =========================================================================

    if isinstance(container, ConstList):
        report.element_types = [container.value_type.__name__]
    elif isinstance(container, HeteroList):
        report.element_types = [type_name(t) for t in container.element_types]
    else:
        report.element_types = [container.key_type.__name__, container.value_type.__name__]

    # =========================================================================
    # 2. BINDINGS (MAPS ONLY)
    # =========================================================================

    if isinstance(container, StaticMap):
        _analyze_map(container, report)

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    if report.size == 0:
        report.add_warning(f"Empty {report.kind}: every lookup will fail")

    if report.duplicate_keys:
        report.add_warning(
            f"Duplicate keys shadow later bindings: {', '.join(repr(k) for k in report.duplicate_keys)}"
        )

    if report.empty_values:
        report.add_warning(
            f"Keys bound to empty sequences: {', '.join(repr(k) for k in report.empty_values)}"
        )

    if report.kind == "map" and report.size > MAP_SIZE_CEILING:
        report.add_warning(
            f"Map has {report.size} bindings; linear lookup is intended for at most {MAP_SIZE_CEILING}"
        )

    logger.debug("analyzed %s: %d warning(s)", report.kind, len(report.warnings))
    return report
