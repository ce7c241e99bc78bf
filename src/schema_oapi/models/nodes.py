"""Validation-schema node model.

A schema is an immutable tree of ``SchemaNode`` subclasses. Each subclass is
tagged with a ``kind`` literal; primitive nodes carry ordered, typed check
lists instead of opaque metadata. Nodes are built either directly or through
the chainable helpers below and in :mod:`schema_oapi.builders`.
"""
import re
from typing import Annotated, Any, Dict, List, Literal, Tuple, Union

from pydantic import Field, field_validator

from .common import FrozenPydanticModel


# --- Checks ---

class MinLength(FrozenPydanticModel):
    kind: Literal["min_length"] = "min_length"
    value: int = Field(..., ge=0)

class MaxLength(FrozenPydanticModel):
    kind: Literal["max_length"] = "max_length"
    value: int = Field(..., ge=0)

class ExactLength(FrozenPydanticModel):
    kind: Literal["exact_length"] = "exact_length"
    value: int = Field(..., ge=0)

class Format(FrozenPydanticModel):
    kind: Literal["format"] = "format"
    format: Literal["email", "uri"]

class Pattern(FrozenPydanticModel):
    kind: Literal["pattern"] = "pattern"
    pattern: str = Field(..., description="Regular expression source.")

class Min(FrozenPydanticModel):
    kind: Literal["min"] = "min"
    value: Union[int, float]

class Max(FrozenPydanticModel):
    kind: Literal["max"] = "max"
    value: Union[int, float]


StringCheck = Annotated[
    Union[MinLength, MaxLength, ExactLength, Format, Pattern],
    Field(discriminator="kind"),
]
NumberCheck = Annotated[Union[Min, Max], Field(discriminator="kind")]

LiteralValue = Union[str, int, float, bool, None]


# --- Nodes ---

class SchemaNode(FrozenPydanticModel):
    """Base of every schema node. Subclasses override ``kind``."""
    kind: str = "unknown"

    def optional(self) -> "OptionalNode":
        return OptionalNode(inner=self)

    def nullable(self) -> "NullableNode":
        return NullableNode(inner=self)

    def default(self, value: Any) -> "DefaultNode":
        return DefaultNode(inner=self, default_value=value)

    def array(self) -> "ArrayNode":
        return ArrayNode(element=self)


class StringNode(SchemaNode):
    kind: Literal["string"] = "string"
    checks: Tuple[StringCheck, ...] = ()

    def _with_check(self, check: Any) -> "StringNode":
        return self.model_copy(update={"checks": self.checks + (check,)})

    def min(self, length: int) -> "StringNode":
        return self._with_check(MinLength(value=length))

    def max(self, length: int) -> "StringNode":
        return self._with_check(MaxLength(value=length))

    def length(self, length: int) -> "StringNode":
        return self._with_check(ExactLength(value=length))

    def email(self) -> "StringNode":
        return self._with_check(Format(format="email"))

    def url(self) -> "StringNode":
        return self._with_check(Format(format="uri"))

    def regex(self, pattern: Union[str, "re.Pattern[str]"]) -> "StringNode":
        source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        return self._with_check(Pattern(pattern=source))


class NumberNode(SchemaNode):
    kind: Literal["number"] = "number"
    checks: Tuple[NumberCheck, ...] = ()

    def _with_check(self, check: Any) -> "NumberNode":
        return self.model_copy(update={"checks": self.checks + (check,)})

    def min(self, value: Union[int, float]) -> "NumberNode":
        return self._with_check(Min(value=value))

    def max(self, value: Union[int, float]) -> "NumberNode":
        return self._with_check(Max(value=value))

    gte = min
    lte = max


class BooleanNode(SchemaNode):
    kind: Literal["boolean"] = "boolean"


class DateNode(SchemaNode):
    kind: Literal["date"] = "date"


class ObjectNode(SchemaNode):
    kind: Literal["object"] = "object"
    shape: Dict[str, SchemaNode] = Field(default_factory=dict, description="Fields in declaration order.")


class ArrayNode(SchemaNode):
    kind: Literal["array"] = "array"
    element: SchemaNode


class LiteralNode(SchemaNode):
    kind: Literal["literal"] = "literal"
    values: List[LiteralValue] = Field(..., min_length=1)


class EnumNode(SchemaNode):
    kind: Literal["enum"] = "enum"
    values: List[str] = Field(..., min_length=1)

    @field_validator("values")
    @classmethod
    def validate_unique(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError("enum values must be unique")
        return v


class UnionNode(SchemaNode):
    kind: Literal["union"] = "union"
    options: List[SchemaNode] = Field(..., min_length=2)


class NullableNode(SchemaNode):
    kind: Literal["nullable"] = "nullable"
    inner: SchemaNode


class OptionalNode(SchemaNode):
    kind: Literal["optional"] = "optional"
    inner: SchemaNode


class DefaultNode(SchemaNode):
    kind: Literal["default"] = "default"
    inner: SchemaNode
    default_value: Any = None
