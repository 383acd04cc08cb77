"""Parsing and type-checked traversal of a simplestreams JSON document.

The four ``get_*`` accessors are the only sanctioned way to read the parsed
tree. Each one fails loudly with the offending key instead of substituting a
default, since the document comes from an external publisher.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from simplestream.core.errors import EmptyError, ParseError, SchemaError

Node = Mapping[str, Any]


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def _freeze_object(pairs: list[tuple[str, Any]]) -> Node:
    return MappingProxyType({key: _freeze(value) for key, value in pairs})


def _reject_constant(name: str) -> Any:
    raise ParseError(f"invalid constant {name}")


@dataclass(frozen=True, eq=False)
class Document:
    """Owner of a parsed, read-only tree.

    Views keep a reference to the ``Document`` that produced their node, so the
    tree lives as long as any view into it.
    """

    root: Node


def parse_document(text: str | bytes) -> Document:
    try:
        root = json.loads(text, object_pairs_hook=_freeze_object, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(f"{e.msg} (line {e.lineno}, column {e.colno})") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"document is not valid UTF-8: {e.reason}") from e
    if not isinstance(root, Mapping):
        raise ParseError(f"document root must be an object, got {type(root).__name__}")
    return Document(root=root)


def get_object(node: Node, key: str) -> Node:
    value = node.get(key)
    if not isinstance(value, Mapping):
        raise SchemaError(key, "not an object")
    return value


def get_string(node: Node, key: str) -> str:
    value = node.get(key)
    if not isinstance(value, str):
        raise SchemaError(key, "not a string")
    return value


def get_bool(node: Node, key: str) -> bool:
    value = node.get(key)
    if not isinstance(value, bool):
        raise SchemaError(key, "not a boolean")
    return value


def get_last_member_name(node: Node, label: str = "object") -> str:
    """Return the name of the member inserted last into ``node``."""
    if not node:
        raise EmptyError(label)
    return next(reversed(node.keys()))


def member_names(node: Node) -> list[str]:
    return list(node.keys())
