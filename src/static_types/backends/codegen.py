"""
Python source generator for static container declarations.

Renders a set of named containers as a Python module in which every
container is re-declared from literals. Importing the generated module
rebuilds identical containers, and the declaration-time checks run again.

Supports two styles:
    - CONSTRUCTOR: Dataclass constructors with keyword arguments
    - COMPACT: The positional .of(...) forms
"""

import keyword
import math
from enum import Enum
from typing import Any, Dict, List, Tuple

from static_types.errors import DeclarationError
from static_types.hetero import HeteroList
from static_types.mapping import StaticMap
from static_types.sequences import ConstList, StrList


class DeclStyle(Enum):
    """Rendering styles for declarations."""
    CONSTRUCTOR = "constructor"  # ConstList(value_type=float, values=(...))
    COMPACT = "compact"          # ConstList.of(float, ...)


_TYPE_NAMES = {int: "int", float: "float", str: "str", bool: "bool",
               StrList: "StrList", ConstList: "ConstList"}


def _type_expr(t: type) -> str:
    if t not in _TYPE_NAMES:
        raise TypeError(f"Cannot render element type: {t}")
    return _TYPE_NAMES[t]


def _literal_expr(value: Any) -> str:
    """Render a scalar literal; non-finite floats have no bare literal form."""
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "float('nan')"
        return "float('inf')" if value > 0 else "float('-inf')"
    return repr(value)


def _tuple_expr(values: Tuple[Any, ...]) -> str:
    items = [_literal_expr(v) for v in values]
    if len(items) == 1:
        return f"({items[0]},)"
    return f"({', '.join(items)})"


def _value_expr(value: Any, style: DeclStyle) -> str:
    if isinstance(value, ConstList):
        return _container_expr(value, style)
    return _literal_expr(value)


def _container_expr(c: Any, style: DeclStyle) -> str:
    """Render one container as a Python expression."""
    if isinstance(c, StrList):
        if style == DeclStyle.COMPACT:
            return f"StrList.of({', '.join(_literal_expr(v) for v in c.values)})"
        return f"StrList(values={_tuple_expr(c.values)})"

    if isinstance(c, ConstList):
        type_expr = _type_expr(c.value_type)
        if style == DeclStyle.COMPACT:
            args = ", ".join([type_expr] + [_literal_expr(v) for v in c.values])
            return f"ConstList.of({args})"
        return f"ConstList(value_type={type_expr}, values={_tuple_expr(c.values)})"

    if isinstance(c, StaticMap):
        key_expr = _type_expr(c.key_type)
        value_expr = _type_expr(c.value_type)
        pairs = [
            f"({_literal_expr(key)}, {_value_expr(value, style)})" for key, value in c.bindings
        ]
        if style == DeclStyle.COMPACT:
            args = ",\n    ".join([key_expr, value_expr] + pairs)
            return f"StaticMap.of(\n    {args},\n)"
        if pairs:
            body = "".join(f"        {pair},\n" for pair in pairs)
            bindings = f"(\n{body}    )"
        else:
            bindings = "()"
        return (
            f"StaticMap(\n"
            f"    key_type={key_expr},\n"
            f"    value_type={value_expr},\n"
            f"    bindings={bindings},\n"
            f")"
        )

    if isinstance(c, HeteroList):
        raise TypeError("HeteroList holds element types and cannot be rendered as literals")
    raise TypeError(f"Unsupported container type: {type(c)}")


def generate_module(declarations: Dict[str, Any], style: DeclStyle = DeclStyle.CONSTRUCTOR) -> str:
    """
    Generate Python source declaring each container.

    Args:
        declarations: Mapping of module-level name -> container
        style: Rendering style (CONSTRUCTOR, COMPACT)

    Returns:
        String containing the module source

    Raises:
        DeclarationError: If a name is not a valid Python identifier
        TypeError: If a container cannot be rendered
    """
    lines: List[str] = []

    # Header
    lines.append('"""Generated static container declarations."""')
    lines.append("")
    lines.append("from static_types.mapping import StaticMap")
    lines.append("from static_types.sequences import ConstList, StrList")
    lines.append("")

    # =========================================================================
    # DECLARATIONS
    # =========================================================================

    for name, container in declarations.items():
        if not name.isidentifier() or keyword.iskeyword(name):
            raise DeclarationError(f"Not a valid declaration name: {name!r}")
        lines.append(f"{name} = {_container_expr(container, style)}")

    return "\n".join(lines) + "\n"


def save_module_file(declarations: Dict[str, Any], filename: str,
                     style: DeclStyle = DeclStyle.CONSTRUCTOR) -> None:
    """
    Generate the module source and save it to a file.

    Args:
        declarations: Mapping of module-level name -> container
        filename: Output file path (.py extension recommended)
        style: Rendering style
    """
    source = generate_module(declarations, style=style)
    with open(filename, 'w') as f:
        f.write(source)


__all__ = ["DeclStyle", "generate_module", "save_module_file"]
