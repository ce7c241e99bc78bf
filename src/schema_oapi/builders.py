"""Factories for building schema trees.

Typical use::

    from schema_oapi import builders as s

    user = s.obj({
        "name": s.string().min(1).max(100),
        "email": s.string().email(),
        "age": s.number().min(0).optional(),
    })
"""
from typing import Any, Dict, List

from .models.nodes import (
    ArrayNode,
    BooleanNode,
    DateNode,
    DefaultNode,
    EnumNode,
    LiteralNode,
    LiteralValue,
    NullableNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    SchemaNode,
    StringNode,
    UnionNode,
)


def string() -> StringNode:
    return StringNode()


def number() -> NumberNode:
    return NumberNode()


def boolean() -> BooleanNode:
    return BooleanNode()


def date() -> DateNode:
    return DateNode()


def obj(shape: Dict[str, SchemaNode]) -> ObjectNode:
    """Build an object node. Field order follows ``shape``'s insertion order."""
    return ObjectNode(shape=dict(shape))


def array(element: SchemaNode) -> ArrayNode:
    return ArrayNode(element=element)


def literal(*values: LiteralValue) -> LiteralNode:
    return LiteralNode(values=list(values))


def enum(values: List[str]) -> EnumNode:
    return EnumNode(values=list(values))


def union(*options: SchemaNode) -> UnionNode:
    return UnionNode(options=list(options))


def nullable(node: SchemaNode) -> NullableNode:
    return NullableNode(inner=node)


def optional(node: SchemaNode) -> OptionalNode:
    return OptionalNode(inner=node)


def default(node: SchemaNode, value: Any) -> DefaultNode:
    return node.default(value)
