"""
Pydantic schemas for book records.

Clients speak camelCase JSON (``pageCount``, ``readPage``,
``insertedAt``) while the Python side uses snake_case attributes.  An
alias generator maps one onto the other and both spellings are
accepted on input.  Unknown fields in a payload are ignored, which
means clients cannot smuggle in ``id``, ``finished`` or timestamps.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookPayload(CamelModel):
    """Schema for creating a book or replacing its mutable fields.

    Every field is optional at the schema level.  A missing ``name`` is
    reported by the service with a dedicated message rather than a
    generic validation error, so it cannot be required here.

    Validation is strict: ``true`` is not a page count and ``"yes"`` is
    not a boolean.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, strict=True)

    name: Optional[str] = Field(None, description="Title of the book")
    year: Optional[int] = Field(None, description="Publication year")
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    page_count: Optional[int] = Field(None, ge=0, description="Total number of pages")
    read_page: Optional[int] = Field(None, ge=0, description="Last page read; may not exceed pageCount")
    reading: Optional[bool] = Field(None, description="Whether the book is currently being read")


class BookRead(CamelModel):
    """A stored book as returned by ``GET /books/{id}``."""

    id: str
    name: str
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    page_count: Optional[int] = None
    read_page: Optional[int] = None
    reading: Optional[bool] = None
    finished: bool = False
    inserted_at: str
    updated_at: str


class BookSummary(CamelModel):
    """Reduced projection of a book used in list responses."""

    id: str
    name: str
    publisher: Optional[str] = None


class Envelope(BaseModel):
    """Uniform response body of every endpoint."""

    status: Literal["success", "fail", "error"]
    message: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    def to_content(self) -> Dict[str, Any]:
        """Return the JSON body, leaving out ``message`` and ``data`` when unset."""
        content: Dict[str, Any] = {"status": self.status}
        if self.message is not None:
            content["message"] = self.message
        if self.data is not None:
            content["data"] = self.data
        return content


def summaries_data(books: List[BookSummary]) -> Dict[str, Any]:
    """Build the ``data`` member of a list response."""
    return {"books": [book.model_dump(by_alias=True) for book in books]}
