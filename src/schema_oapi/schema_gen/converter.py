"""
Converts validation-schema trees into OpenAPI-style schema descriptions.

``convert`` dispatches on the node class. Supporting a new node kind means
registering one more handler; unregistered kinds fall back to
``{"type": "string"}`` so description generation never fails.
"""
import copy
from functools import singledispatch
from typing import List

from ..models.description import DescriptionNode
from ..models.nodes import (
    ArrayNode,
    BooleanNode,
    DateNode,
    DefaultNode,
    EnumNode,
    ExactLength,
    Format,
    LiteralNode,
    Max,
    MaxLength,
    Min,
    MinLength,
    NullableNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    Pattern,
    SchemaNode,
    StringNode,
    UnionNode,
)


def is_field_required(node: SchemaNode) -> bool:
    """A field is required unless its outermost node is Optional or Default."""
    return not isinstance(node, (OptionalNode, DefaultNode))


def required_fields(node: SchemaNode) -> List[str]:
    """Ordered names of the required fields of an object node ([] otherwise)."""
    if not isinstance(node, ObjectNode):
        return []
    return [name for name, field in node.shape.items() if is_field_required(field)]


@singledispatch
def convert(node: SchemaNode) -> DescriptionNode:
    """Convert a schema node to a description node."""
    return {"type": "string"}


@convert.register
def _convert_boolean(node: BooleanNode) -> DescriptionNode:
    return {"type": "boolean"}


@convert.register
def _convert_date(node: DateNode) -> DescriptionNode:
    return {"type": "string", "format": "date-time"}


@convert.register
def _convert_string(node: StringNode) -> DescriptionNode:
    result: DescriptionNode = {"type": "string"}
    # Checks apply in order; a later check overwrites an earlier one for the same key.
    for check in node.checks:
        if isinstance(check, MinLength):
            result["minLength"] = check.value
        elif isinstance(check, MaxLength):
            result["maxLength"] = check.value
        elif isinstance(check, ExactLength):
            result["minLength"] = check.value
            result["maxLength"] = check.value
        elif isinstance(check, Format):
            result["format"] = check.format
        elif isinstance(check, Pattern):
            result["pattern"] = check.pattern
    return result


@convert.register
def _convert_number(node: NumberNode) -> DescriptionNode:
    result: DescriptionNode = {"type": "number"}
    for check in node.checks:
        if isinstance(check, Min):
            result["minimum"] = check.value
        elif isinstance(check, Max):
            result["maximum"] = check.value
    return result


@convert.register
def _convert_object(node: ObjectNode) -> DescriptionNode:
    return {
        "type": "object",
        "properties": {name: convert(field) for name, field in node.shape.items()},
        "required": required_fields(node),  # always present, possibly empty
    }


@convert.register
def _convert_array(node: ArrayNode) -> DescriptionNode:
    return {"type": "array", "items": convert(node.element)}


@convert.register
def _convert_literal(node: LiteralNode) -> DescriptionNode:
    return {"enum": list(node.values)}


@convert.register
def _convert_enum(node: EnumNode) -> DescriptionNode:
    return {"type": "string", "enum": list(node.values)}


@convert.register
def _convert_union(node: UnionNode) -> DescriptionNode:
    return {"oneOf": [convert(option) for option in node.options]}


@convert.register
def _convert_nullable(node: NullableNode) -> DescriptionNode:
    return {**convert(node.inner), "nullable": True}


@convert.register
def _convert_optional(node: OptionalNode) -> DescriptionNode:
    # Optionality is recorded by the parent object's required list only.
    return convert(node.inner)


@convert.register
def _convert_default(node: DefaultNode) -> DescriptionNode:
    return {**convert(node.inner), "default": copy.deepcopy(node.default_value)}
