"""Output models: schema descriptions, parameter descriptors and location results."""
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from .common import BasePydanticModel
from .diagnostics import Diagnostic

# JSON-Schema-like mapping produced by the converter, e.g.
# {"type": "string", "minLength": 1}. Always a fresh value per call.
DescriptionNode = Dict[str, Any]


class ParameterDescriptor(BasePydanticModel):
    """One OpenAPI parameter built from a top-level object field."""
    name: str
    location: str = Field(..., alias="in")
    required: bool
    schema_: DescriptionNode = Field(..., alias="schema")

    def to_openapi(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class LocationSchemaResult(BasePydanticModel):
    """Description fragment for one request location.

    Exactly one of ``body`` and ``parameters`` is set for a supported
    location; both are ``None`` when the location is unsupported.
    """
    location: str
    body: Optional[Dict[str, Any]] = None
    parameters: Optional[List[ParameterDescriptor]] = None
    diagnostics: List[Diagnostic] = Field(default_factory=list)

    @property
    def is_supported(self) -> bool:
        return self.body is not None or self.parameters is not None

    def to_openapi(self) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
        if self.body is not None:
            return self.body
        if self.parameters is not None:
            return [p.to_openapi() for p in self.parameters]
        return {}
