"""
Pydantic models for schema-oapi.
"""
from .common import (
    BODY_LOCATIONS,
    PARAMETER_LOCATIONS,
    BasePydanticModel,
    FrozenPydanticModel,
    ParseLocation,
)
from .description import DescriptionNode, LocationSchemaResult, ParameterDescriptor
from .diagnostics import Diagnostic, DiagnosticCode, DiagnosticSeverity, DiagnosticsSink
from .nodes import (
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
    NumberCheck,
    NumberNode,
    ObjectNode,
    OptionalNode,
    Pattern,
    SchemaNode,
    StringCheck,
    StringNode,
    UnionNode,
)

__all__ = [
    "ArrayNode",
    "BODY_LOCATIONS",
    "BasePydanticModel",
    "BooleanNode",
    "DateNode",
    "DefaultNode",
    "DescriptionNode",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticSeverity",
    "DiagnosticsSink",
    "EnumNode",
    "ExactLength",
    "Format",
    "FrozenPydanticModel",
    "LiteralNode",
    "LocationSchemaResult",
    "Max",
    "MaxLength",
    "Min",
    "MinLength",
    "NullableNode",
    "NumberCheck",
    "NumberNode",
    "ObjectNode",
    "OptionalNode",
    "PARAMETER_LOCATIONS",
    "ParameterDescriptor",
    "ParseLocation",
    "Pattern",
    "SchemaNode",
    "StringCheck",
    "StringNode",
    "UnionNode",
]
