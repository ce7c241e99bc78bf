"""
Service that produces location schema descriptions for route registration,
logging diagnostics and caching results per schema object.
"""
import threading
from typing import Any, Dict, List, Tuple, Union

import structlog

from ..config import Config
from ..models.common import ParseLocation
from ..models.description import DescriptionNode, LocationSchemaResult
from ..models.diagnostics import Diagnostic, DiagnosticCode, DiagnosticSeverity
from ..models.nodes import SchemaNode
from .adapter import build_location_schema
from .converter import convert

logger = structlog.get_logger(__name__)


class SchemaDescriptionService:
    """
    Describes validation schemas for request locations.

    Schemas are immutable once an endpoint defines them, so results are cached
    by schema identity for the life of the process. The cache is read without
    locking; only inserts are serialised.
    """

    def __init__(self, app_config: Config):
        self.app_config = app_config
        self.logger = logger.bind(service="SchemaDescriptionService")
        self._cache: Dict[Tuple[str, int], Tuple[SchemaNode, LocationSchemaResult]] = {}
        self._cache_lock = threading.Lock()

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        with self._cache_lock:
            self._cache.clear()

    def _log_diagnostic(self, diagnostic: Diagnostic) -> None:
        if not self.app_config.converter.log_diagnostics:
            return
        log_method = getattr(self.logger, DiagnosticSeverity(diagnostic.severity).value)
        log_method(diagnostic.message, code=DiagnosticCode(diagnostic.code).value, **(diagnostic.details or {}))

    def convert(self, schema: SchemaNode) -> DescriptionNode:
        self.logger.debug("Converting schema.", schema_kind=schema.kind)
        return convert(schema)

    def describe(self, location: Union[str, ParseLocation], schema: SchemaNode) -> LocationSchemaResult:
        """Return the location schema for ``schema``, using the cache when enabled."""
        location = location.value if isinstance(location, ParseLocation) else str(location)
        if not self.app_config.converter.cache_enabled:
            return build_location_schema(location, schema, sink=self._log_diagnostic)

        key = (location, id(schema))
        entry = self._cache.get(key)
        if entry is not None and entry[0] is schema:
            cached = entry[1]
            for diagnostic in cached.diagnostics:
                self._log_diagnostic(diagnostic)
            return cached.model_copy(deep=True)

        result = build_location_schema(location, schema, sink=self._log_diagnostic)
        with self._cache_lock:
            # The schema is kept in the entry so its id cannot be reused.
            self._cache.setdefault(key, (schema, result))
        self.logger.debug("Cached location schema.", location=location, schema_kind=schema.kind)
        return result.model_copy(deep=True)

    def describe_openapi(
        self, location: Union[str, ParseLocation], schema: SchemaNode
    ) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
        return self.describe(location, schema).to_openapi()
