"""
Unit tests for Pydantic models in src/schema_oapi/models/
"""
import pytest
from pydantic import ValidationError

from schema_oapi import builders as s
from schema_oapi.models.description import LocationSchemaResult, ParameterDescriptor
from schema_oapi.models.diagnostics import Diagnostic, DiagnosticCode, DiagnosticSeverity
from schema_oapi.models.nodes import (
    ArrayNode,
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
    StringNode,
    UnionNode,
)

# --- Schema nodes ---

def test_builders_produce_tagged_nodes():
    """Builders return the node class for each kind."""
    assert s.string().kind == "string"
    assert s.number().kind == "number"
    assert s.boolean().kind == "boolean"
    assert s.date().kind == "date"
    assert s.obj({}).kind == "object"
    assert s.array(s.string()).kind == "array"
    assert s.literal(1).kind == "literal"
    assert s.enum(["a"]).kind == "enum"
    assert s.union(s.string(), s.number()).kind == "union"
    assert isinstance(s.nullable(s.string()), NullableNode)
    assert isinstance(s.optional(s.string()), OptionalNode)
    assert isinstance(s.default(s.string(), "x"), DefaultNode)


def test_string_checks_are_typed_and_ordered():
    node = s.string().min(1).max(10).length(5).email().url().regex("^a")
    assert node.checks == (
        MinLength(value=1),
        MaxLength(value=10),
        ExactLength(value=5),
        Format(format="email"),
        Format(format="uri"),
        Pattern(pattern="^a"),
    )


def test_number_checks_are_typed_and_ordered():
    assert s.number().min(0).lte(9).checks == (Min(value=0), Max(value=9))


def test_chaining_does_not_mutate():
    base = s.string()
    longer = base.min(3)
    assert base.checks == ()
    assert longer.checks == (MinLength(value=3),)


def test_nodes_are_frozen():
    node = StringNode()
    with pytest.raises(ValidationError):
        node.checks = (MinLength(value=1),)


def test_wrappers():
    inner = NumberNode()
    assert inner.optional() == OptionalNode(inner=inner)
    assert inner.nullable() == NullableNode(inner=inner)
    assert inner.default(3) == DefaultNode(inner=inner, default_value=3)
    assert inner.array() == ArrayNode(element=inner)


def test_object_shape_keeps_declaration_order():
    node = s.obj({"z": s.string(), "a": s.number(), "m": s.boolean()})
    assert list(node.shape) == ["z", "a", "m"]
    assert isinstance(node, ObjectNode)


def test_literal_values_keep_their_types():
    node = LiteralNode(values=[True, 1, 1.5, "a", None])
    assert node.values == [True, 1, 1.5, "a", None]
    assert type(node.values[0]) is bool


@pytest.mark.parametrize("build", [
    lambda: LiteralNode(values=[]),
    lambda: EnumNode(values=[]),
    lambda: EnumNode(values=["a", "a"]),
    lambda: UnionNode(options=[StringNode()]),
    lambda: MinLength(value=-1),
    lambda: Format(format="uuid"),
])
def test_invalid_nodes_raise(build):
    with pytest.raises(ValidationError):
        build()


# --- Output models ---

def test_parameter_descriptor_aliases():
    descriptor = ParameterDescriptor(name="page", location="query", required=True, schema_={"type": "number"})
    assert descriptor.to_openapi() == {"name": "page", "in": "query", "required": True, "schema": {"type": "number"}}

    by_alias = ParameterDescriptor.model_validate({"name": "id", "in": "param", "required": True, "schema": {}})
    assert by_alias.location == "param"


def test_location_schema_result_fragment():
    unsupported = LocationSchemaResult(
        location="xml",
        diagnostics=[Diagnostic(code=DiagnosticCode.UNSUPPORTED_LOCATION, severity=DiagnosticSeverity.WARNING, message="nope")],
    )
    assert not unsupported.is_supported
    assert unsupported.to_openapi() == {}

    empty_params = LocationSchemaResult(location="query", parameters=[])
    assert empty_params.is_supported
    assert empty_params.to_openapi() == []
