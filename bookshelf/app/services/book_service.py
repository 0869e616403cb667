"""
Service layer for the bookshelf.

``BookService`` implements the five book operations on top of an
injected ``BookStore``.  Operations never raise for expected failures;
they return a ``ServiceResult`` whose ``error`` member is a
``BookError`` (or ``None`` on success) and whose ``message`` is the
user-facing text the API sends back.  The endpoint layer turns the
result into an HTTP status code and response envelope.

Messages are kept in Indonesian, as existing clients of the service
expect them.
"""

from __future__ import annotations

import logging
import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, List, Optional

from bookshelf.app.core.store import BookStore
from bookshelf.app.schemas.book import BookPayload, BookRead, BookSummary

logger = logging.getLogger(__name__)

ID_ALPHABET = string.ascii_letters + string.digits + "_-"
ID_LENGTH = 16


class BookError(str, Enum):
    """Kinds of failure an operation can report."""

    MISSING_NAME = "MissingName"
    PAGE_COUNT_EXCEEDED = "PageCountExceeded"
    NOT_FOUND = "NotFound"
    INTERNAL_INSERT_FAILURE = "InternalInsertFailure"


@dataclass
class ServiceResult:
    """Outcome of a service operation."""

    value: Any = None
    error: Optional[BookError] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def generate_book_id() -> str:
    """Return a random 16 character URL-safe identifier."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as ISO-8601 UTC with milliseconds, e.g. ``2024-05-01T10:00:00.000Z``."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def is_finished(page_count: Optional[int], read_page: Optional[int]) -> bool:
    """A book is finished once no pages are left to read."""
    if page_count is None or read_page is None:
        return False
    return page_count - read_page <= 0


class BookService:
    """Create, list, fetch, update and delete books held in a ``BookStore``.

    Parameters
    ----------
    store : BookStore
        Collection the service operates on.
    clock : Callable[[], datetime], optional
        Source of the current time, timezone aware.  Defaults to UTC
        wall-clock time.
    id_factory : Callable[[], str], optional
        Generator of candidate book ids.  Defaults to
        ``generate_book_id``.
    """

    def __init__(
        self,
        store: BookStore,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self.store = store
        self._clock = clock or utc_now
        self._id_factory = id_factory or generate_book_id

    async def create_book(self, payload: BookPayload) -> ServiceResult:
        """Validate ``payload`` and append a new book.

        On success ``value`` is the id of the new book.
        """
        error = self._validate(payload)
        if error is not None:
            message = {
                BookError.MISSING_NAME: "Gagal menambahkan buku. Mohon isi nama buku",
                BookError.PAGE_COUNT_EXCEEDED: (
                    "Gagal menambahkan buku. readPage tidak boleh lebih besar dari pageCount"
                ),
            }[error]
            logger.info("Rejected new book: %s", error.value)
            return ServiceResult(error=error, message=message)

        book_id = self.store.reserve_id(self._id_factory)
        inserted_at = format_timestamp(self._clock())
        book = BookRead(
            id=book_id,
            name=payload.name,
            year=payload.year,
            author=payload.author,
            summary=payload.summary,
            publisher=payload.publisher,
            page_count=payload.page_count,
            read_page=payload.read_page,
            reading=payload.reading,
            finished=is_finished(payload.page_count, payload.read_page),
            inserted_at=inserted_at,
            updated_at=inserted_at,
        )
        self.store.append(book)

        if self.store.get(book_id) is None:
            logger.error("Book %s was not found right after insertion", book_id)
            return ServiceResult(
                error=BookError.INTERNAL_INSERT_FAILURE,
                message="Buku gagal ditambahkan",
            )
        logger.info("Created book %s", book_id)
        return ServiceResult(value=book_id, message="Buku berhasil ditambahkan")

    async def list_summaries(self) -> ServiceResult:
        """Return ``{id, name, publisher}`` of every book in collection order."""
        summaries: List[BookSummary] = [
            BookSummary(id=book.id, name=book.name, publisher=book.publisher)
            for book in self.store.all()
        ]
        return ServiceResult(value=summaries)

    async def get_book(self, book_id: str) -> ServiceResult:
        book = self.store.get(book_id)
        if book is None:
            return ServiceResult(error=BookError.NOT_FOUND, message="Buku tidak ditemukan")
        return ServiceResult(value=book)

    async def update_book(self, book_id: str, payload: BookPayload) -> ServiceResult:
        """Replace every mutable field of an existing book.

        Payload validation is reported before a missing id, so a bad
        payload sent to an unknown id yields the validation error.
        ``id`` and ``inserted_at`` never change.
        """
        error = self._validate(payload)
        if error is not None:
            message = {
                BookError.MISSING_NAME: "Gagal memperbarui buku. Mohon isi nama buku",
                BookError.PAGE_COUNT_EXCEEDED: (
                    "Gagal memperbarui buku. readPage tidak boleh lebih besar dari pageCount"
                ),
            }[error]
            logger.info("Rejected update of book %s: %s", book_id, error.value)
            return ServiceResult(error=error, message=message)

        changes = {
            "name": payload.name,
            "year": payload.year,
            "author": payload.author,
            "summary": payload.summary,
            "publisher": payload.publisher,
            "page_count": payload.page_count,
            "read_page": payload.read_page,
            "reading": payload.reading,
            "finished": is_finished(payload.page_count, payload.read_page),
            "updated_at": format_timestamp(self._clock()),
        }
        updated = self.store.update(book_id, changes)
        if updated is None:
            return ServiceResult(
                error=BookError.NOT_FOUND,
                message="Gagal memperbarui buku. Id tidak ditemukan",
            )
        logger.info("Updated book %s", book_id)
        return ServiceResult(value=updated, message="Buku berhasil diperbarui")

    async def delete_book(self, book_id: str) -> ServiceResult:
        if not self.store.delete(book_id):
            return ServiceResult(
                error=BookError.NOT_FOUND,
                message="Buku gagal dihapus. Id tidak ditemukan",
            )
        logger.info("Deleted book %s", book_id)
        return ServiceResult(message="Buku berhasil dihapus")

    @staticmethod
    def _validate(payload: BookPayload) -> Optional[BookError]:
        if payload.name is None or not payload.name.strip():
            return BookError.MISSING_NAME
        if (
            payload.page_count is not None
            and payload.read_page is not None
            and payload.read_page > payload.page_count
        ):
            return BookError.PAGE_COUNT_EXCEEDED
        return None
