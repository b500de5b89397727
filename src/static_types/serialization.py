"""
Serialization helpers for static containers.

Converts ConstList, StrList and StaticMap to and from a plain-dict
literal form, and dumps that form as JSON or YAML for inspection.

There is deliberately no loader for JSON/YAML text: containers are
declared from literals, never parsed from configuration files.
HeteroList holds code (element types) and is not serializable.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from static_types.hetero import HeteroList
from static_types.mapping import StaticMap
from static_types.sequences import ConstList, StrList


_SCALAR_TYPES = {"int": int, "float": float, "str": str, "bool": bool}
_VALUE_TYPES = {**_SCALAR_TYPES, "str_list": StrList, "const_list": ConstList}


def _type_to_name(t: type) -> str:
    for name, candidate in _VALUE_TYPES.items():
        if candidate is t:
            return name
    raise TypeError(f"Unsupported element type: {t}")


def _type_from_name(name: str) -> type:
    try:
        return _VALUE_TYPES[name]
    except KeyError:
        raise TypeError(f"Unsupported element type name: {name}") from None


def container_to_dict(c: Any) -> Dict[str, Any]:
    if isinstance(c, StrList):
        return {"kind": "str_list", "values": list(c.values)}
    if isinstance(c, ConstList):
        return {
            "kind": "const_list",
            "value_type": _type_to_name(c.value_type),
            "values": list(c.values),
        }
    if isinstance(c, StaticMap):
        return {
            "kind": "map",
            "key_type": _type_to_name(c.key_type),
            "value_type": _type_to_name(c.value_type),
            "bindings": [
                {"key": key, "value": _value_to_dict(value)} for key, value in c.bindings
            ],
        }
    if isinstance(c, HeteroList):
        raise TypeError("HeteroList holds element types and cannot be serialized")
    raise TypeError(f"Unsupported container type: {type(c)}")


def _value_to_dict(value: Any) -> Any:
    if isinstance(value, ConstList):
        return container_to_dict(value)
    return value


def _value_from_dict(value: Any) -> Any:
    if isinstance(value, dict):
        return container_from_dict(value)
    return value


def container_from_dict(d: Dict[str, Any]) -> Any:
    kind = d.get("kind")
    if kind == "str_list":
        return StrList(values=tuple(d.get("values", [])))
    if kind == "const_list":
        return ConstList(
            value_type=_type_from_name(d["value_type"]),
            values=tuple(d.get("values", [])),
        )
    if kind == "map":
        return StaticMap(
            key_type=_type_from_name(d["key_type"]),
            value_type=_type_from_name(d["value_type"]),
            bindings=tuple(
                (b["key"], _value_from_dict(b["value"])) for b in d.get("bindings", [])
            ),
        )
    raise TypeError(f"Unsupported container dict kind: {kind}")


def container_to_json(c: Any) -> str:
    return json.dumps(container_to_dict(c), sort_keys=True)


def container_to_yaml(c: Any) -> str:
    return yaml.safe_dump(container_to_dict(c), sort_keys=False)
