"""Book Schemas — Pydantic request/response models for the books API.

Invariants:
    - BookCreate declares the eight required book fields, in error-report order
    - Text fields are StrictStr: numbers, booleans and null are type errors
    - pages/year are 32-bit integers; integral floats (100.0) become int,
      fractional floats, strings and booleans are rejected
    - Unknown payload keys are ignored and never reach model_dump()
    - BookResponse carries exactly the eight book fields
    - Envelopes wrap payloads under "book" / "books" / "message"

Design Decisions:
    - One error-type → message mapping (validation_messages) serves both the
      route layer (RequestValidationError) and validate_book()
    - validate_book returns a SchemaResult instead of raising, for callers
      outside FastAPI's request parsing
"""

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
)
from pydantic_core import PydanticCustomError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _whole_number(value: Any) -> Any:
    """Accept JSON integers and integral floats; reject everything else."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise PydanticCustomError(
                "int_from_float",
                "Input should be a valid integer, got a number with a fractional part",
            )
        return int(value)
    return value


Int32 = Annotated[
    int,
    BeforeValidator(_whole_number),
    Field(strict=True, ge=INT32_MIN, le=INT32_MAX),
]


# ─── Request ─────────────────────────────────────────────────────

class BookCreate(BaseModel):
    """Full book payload for POST and PUT."""
    model_config = ConfigDict(extra="ignore")

    isbn: StrictStr
    amazon_url: StrictStr
    author: StrictStr
    language: StrictStr
    pages: Int32
    publisher: StrictStr
    title: StrictStr
    year: Int32


BOOK_FIELDS: tuple[str, ...] = tuple(BookCreate.model_fields)


# ─── Response ────────────────────────────────────────────────────

class BookResponse(BaseModel):
    """Public-facing book record."""
    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookEnvelope(BaseModel):
    book: BookResponse


class BookListEnvelope(BaseModel):
    books: list[BookResponse]


class MessageEnvelope(BaseModel):
    message: str


# ─── Error messages ──────────────────────────────────────────────

_STRING_ERRORS = {"string_type"}
_INTEGER_ERRORS = {"int_type", "int_from_float", "int_parsing"}
_RANGE_ERRORS = {"greater_than_equal", "less_than_equal", "int_parsing_size"}
_OBJECT_ERRORS = {"model_type", "model_attributes_type", "dict_type"}


def describe_error(error: dict) -> str:
    """Render one Pydantic error dict as a client-facing message."""
    kind = error.get("type")
    if kind == "json_invalid":
        return "request body is not valid JSON"

    # FastAPI prefixes body errors with "body"
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(loc)

    if not field:
        if kind == "missing":
            return "book payload is required"
        return "book payload must be a JSON object"
    if kind == "missing":
        return f"{field} is required"
    if kind in _STRING_ERRORS:
        return f"{field} must be of type string"
    if kind in _INTEGER_ERRORS:
        return f"{field} must be of type integer"
    if kind in _RANGE_ERRORS:
        return f"{field} must be a 32-bit integer"
    if kind in _OBJECT_ERRORS:
        return "book payload must be a JSON object"
    return f"{field}: {error.get('msg', 'invalid value')}"


def validation_messages(errors: list[dict]) -> list[str]:
    """Map ValidationError.errors() to messages, in field order."""
    return [describe_error(error) for error in errors]


@dataclass(frozen=True)
class SchemaResult:
    """Outcome of validating a payload: errors, or the normalized record."""
    errors: tuple[str, ...] = ()
    record: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_book(payload: Any) -> SchemaResult:
    """Validate a decoded JSON value against BookCreate."""
    try:
        book = BookCreate.model_validate(payload)
    except ValidationError as e:
        return SchemaResult(errors=tuple(validation_messages(e.errors())))
    return SchemaResult(record=book.model_dump())
