from enum import Enum

from pydantic import BaseModel


class BasePydanticModel(BaseModel):
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "use_enum_values": True,
    }


class FrozenPydanticModel(BaseModel):
    """Immutable base for schema nodes and their checks."""
    model_config = {
        "extra": "forbid",
        "frozen": True,
    }


class ParseLocation(str, Enum):
    JSON = "json"
    FORM = "form"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"
    PARAM = "param"


BODY_LOCATIONS = (ParseLocation.JSON, ParseLocation.FORM)
PARAMETER_LOCATIONS = (
    ParseLocation.QUERY,
    ParseLocation.HEADER,
    ParseLocation.COOKIE,
    ParseLocation.PARAM,
)
