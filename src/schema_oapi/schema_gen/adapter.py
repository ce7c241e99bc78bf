"""
Wraps converter output for a request location.

Body locations (``json``, ``form``) produce a media-type keyed body schema;
parameter locations (``query``, ``header``, ``cookie``, ``param``) produce one
parameter descriptor per top-level object field. Anything else yields an empty
result and an ``UNSUPPORTED_LOCATION`` diagnostic; nothing here raises.
"""
from typing import List, Optional, Union

from ..models.common import BODY_LOCATIONS, PARAMETER_LOCATIONS, ParseLocation
from ..models.description import LocationSchemaResult, ParameterDescriptor
from ..models.diagnostics import Diagnostic, DiagnosticCode, DiagnosticSeverity, DiagnosticsSink
from ..models.nodes import ObjectNode, SchemaNode
from .converter import convert, is_field_required, required_fields

JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"

SUPPORTED_LOCATIONS = tuple(loc.value for loc in ParseLocation)
_BODY_LOCATIONS = tuple(loc.value for loc in BODY_LOCATIONS)
_PARAMETER_LOCATIONS = tuple(loc.value for loc in PARAMETER_LOCATIONS)


def generate_parameters(schema: ObjectNode, location: str) -> List[ParameterDescriptor]:
    """Build one parameter descriptor per field, in declaration order."""
    return [
        ParameterDescriptor(
            name=name,
            location=location,
            required=is_field_required(field),
            schema_=convert(field),
        )
        for name, field in schema.shape.items()
    ]


def _emit(result: LocationSchemaResult, diagnostic: Diagnostic, sink: Optional[DiagnosticsSink]) -> None:
    result.diagnostics.append(diagnostic)
    if sink is not None:
        sink(diagnostic)


def build_location_schema(
    location: Union[str, ParseLocation],
    schema: SchemaNode,
    sink: Optional[DiagnosticsSink] = None,
) -> LocationSchemaResult:
    """
    Build the description fragment for ``schema`` parsed from ``location``.

    Diagnostics are appended to the returned result and, when ``sink`` is
    given, also passed to it as they are produced.
    """
    location = location.value if isinstance(location, ParseLocation) else str(location)
    result = LocationSchemaResult(location=location)

    if location in _BODY_LOCATIONS:
        description = convert(schema)
        if location == ParseLocation.JSON.value:
            # Keep the list convert() derived for a wrapped object; attach one otherwise.
            description.setdefault("required", required_fields(schema))
            result.body = {JSON_MEDIA_TYPE: {"schema": description}}
        else:
            result.body = {FORM_MEDIA_TYPE: {"schema": description}}
    elif location in _PARAMETER_LOCATIONS:
        if isinstance(schema, ObjectNode):
            result.parameters = generate_parameters(schema, location)
        else:
            result.parameters = []
            _emit(
                result,
                Diagnostic(
                    code=DiagnosticCode.NON_OBJECT_SCHEMA,
                    severity=DiagnosticSeverity.WARNING,
                    message=f"The {location} location expects an object schema; no parameters were generated.",
                    details={"location": location, "schema_kind": schema.kind},
                ),
                sink,
            )
    else:
        _emit(
            result,
            Diagnostic(
                code=DiagnosticCode.UNSUPPORTED_LOCATION,
                severity=DiagnosticSeverity.WARNING,
                message=(
                    f"The {location} type is not supported. The only supported types are: "
                    f"{', '.join(SUPPORTED_LOCATIONS)}."
                ),
                details={"location": location, "supported_locations": list(SUPPORTED_LOCATIONS)},
            ),
            sink,
        )

    return result
