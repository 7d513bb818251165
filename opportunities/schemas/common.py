
from typing import Optional, List, Generic, TypeVar, Any
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# camelCase on the wire, snake_case in Python; either spelling accepted on input
class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

# Paginated response wrapper used by every list endpoint
class Page(CamelModel, Generic[T]):
    items: List[T]
    total: int

class MessageResponse(BaseModel):
    message: str

# Error responses
class FieldError(BaseModel):
    field: str
    message: str
    type: str

class ErrorResponse(BaseModel):
    message: str
    errors: Optional[List[FieldError]] = None


def check_options(values: Any, allowed: List[str], field: str):
    """Reject values outside an enumerated option list."""
    if values is None:
        return values
    items = values if isinstance(values, list) else [values]
    unknown = [v for v in items if v not in allowed]
    if unknown:
        raise ValueError(f"Unsupported {field}: {', '.join(map(str, unknown))}")
    return values
