"""schema-oapi - OpenAPI descriptions from validation schemas.

Converts composable validation-schema trees into JSON-Schema-like
descriptions and builds request body schemas or parameter lists for each
HTTP request location.
"""

__version__ = "0.1.0"

from . import builders
from .config import Config
from .models import LocationSchemaResult, ParameterDescriptor, ParseLocation, SchemaNode
from .schema_gen import SchemaDescriptionService, build_location_schema, convert, required_fields

__all__ = [
    "Config",
    "LocationSchemaResult",
    "ParameterDescriptor",
    "ParseLocation",
    "SchemaDescriptionService",
    "SchemaNode",
    "build_location_schema",
    "builders",
    "convert",
    "required_fields",
]
