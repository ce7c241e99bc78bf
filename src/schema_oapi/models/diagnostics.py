"""Diagnostics reported while building location schemas."""
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .common import BasePydanticModel


class DiagnosticSeverity(str, Enum):
    """Diagnostic severity levels."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class DiagnosticCode(str, Enum):
    UNSUPPORTED_LOCATION = "unsupported_location"
    NON_OBJECT_SCHEMA = "non_object_schema"


class Diagnostic(BasePydanticModel):
    """A non-fatal issue found while describing a schema."""
    code: DiagnosticCode
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    message: str
    details: Optional[Dict[str, Any]] = None


DiagnosticsSink = Callable[[Diagnostic], None]
