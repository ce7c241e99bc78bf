"""
Schema description generation for schema-oapi.

Converts validation-schema trees into OpenAPI-style descriptions and wraps
them per request location (body schemas or parameter lists).
"""
from .adapter import (
    FORM_MEDIA_TYPE,
    JSON_MEDIA_TYPE,
    SUPPORTED_LOCATIONS,
    build_location_schema,
    generate_parameters,
)
from .converter import convert, is_field_required, required_fields
from .service import SchemaDescriptionService

__all__ = [
    "FORM_MEDIA_TYPE",
    "JSON_MEDIA_TYPE",
    "SUPPORTED_LOCATIONS",
    "SchemaDescriptionService",
    "build_location_schema",
    "convert",
    "generate_parameters",
    "is_field_required",
    "required_fields",
]
