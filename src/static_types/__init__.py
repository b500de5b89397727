"""
Static Types Package

Immutable containers whose contents are fixed when they are declared.

Four containers are provided:
    - ConstList: fixed-length sequence of one scalar type
    - StrList: fixed-length sequence of string literals
    - HeteroList: fixed-length sequence of differently typed elements,
      visited by a caller-supplied operation
    - StaticMap: fixed key -> value bindings resolved by first match

ARCHITECTURAL GUARANTEE:
------------------------
Nothing in this package mutates a container after construction.
Every structural mistake detectable from a literal is rejected when
the literal is declared. Runtime errors are reserved for dynamic
indices and keys.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
