#!/usr/bin/env python3
"""
Demo: Declare the example containers, run the calculators, analyze the
declarations and write them back out as a generated Python module.
"""

import logging

from static_types.analyzer import analyze_container
from static_types.backends import DeclStyle, save_module_file
from static_types.examples import build_demo_containers, demo_total
from static_types.serialization import container_to_yaml


def print_report(name, report):
    """Pretty-print a ContainerReport."""
    print(f"{name} ({report.kind})")
    print(f"  Size:           {report.size}")
    print(f"  Element Types:  {', '.join(report.element_types)}")
    if report.nested_sizes:
        for key, size in report.nested_sizes.items():
            print(f"    {key!r}: {size} element(s)")
    if report.warnings:
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    print()


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    containers = build_demo_containers()

    print("=" * 70)
    print("STATIC CONTAINERS DEMO")
    print("=" * 70)
    print()

    for name, container in containers.items():
        print_report(name, analyze_container(container))

    total = demo_total()
    print(f"Demo total: {total:.4f} (harness result {int(total)})")
    print()

    print(container_to_yaml(containers["GROUPDEFS"]))

    filename = "demo_declarations.py"
    save_module_file(containers, filename, style=DeclStyle.COMPACT)
    print(f"Declarations written to {filename}")


if __name__ == "__main__":
    main()
