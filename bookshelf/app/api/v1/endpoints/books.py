"""
Book endpoints.

Routes for creating, listing, fetching, updating and deleting books.
Every response, successful or not, uses the envelope
``{"status", "message", "data"}``.  Failures reported by
``BookService`` are mapped to a status code here; the service itself
knows nothing about HTTP.

The list is served at both ``/`` and ``/books`` since older clients
read it from the root path.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from bookshelf.app.schemas.book import BookPayload, Envelope, summaries_data
from bookshelf.app.services.book_service import BookError, BookService, ServiceResult

router = APIRouter()

_ERROR_STATUS_CODES = {
    BookError.MISSING_NAME: status.HTTP_400_BAD_REQUEST,
    BookError.PAGE_COUNT_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    BookError.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    BookError.INTERNAL_INSERT_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_FAILURE_RESPONSES: Dict[int, Dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": Envelope},
    status.HTTP_404_NOT_FOUND: {"model": Envelope},
}


def get_book_service(request: Request) -> BookService:
    """Return the service attached to the application by ``create_app``."""
    return request.app.state.book_service


def envelope_response(
    status_code: int,
    outcome: str,
    message: Optional[str] = None,
    data: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    body = Envelope(status=outcome, message=message, data=data)
    return JSONResponse(status_code=status_code, content=body.to_content())


def failure_response(result: ServiceResult) -> JSONResponse:
    """Convert a failed ``ServiceResult`` into an envelope response."""
    status_code = _ERROR_STATUS_CODES[result.error]
    outcome = "error" if status_code >= 500 else "fail"
    return envelope_response(status_code, outcome, result.message)


@router.post(
    "/books",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope,
    responses=_FAILURE_RESPONSES,
)
async def create_book(
    payload: BookPayload,
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    """Add a book to the shelf and return its new id as ``data.bookId``."""
    result = await service.create_book(payload)
    if not result.ok:
        return failure_response(result)
    return envelope_response(
        status.HTTP_201_CREATED, "success", result.message, {"bookId": result.value}
    )


@router.get("/", response_model=Envelope)
@router.get("/books", response_model=Envelope)
async def list_books(service: BookService = Depends(get_book_service)) -> JSONResponse:
    """Return id, name and publisher of every book."""
    result = await service.list_summaries()
    return envelope_response(status.HTTP_200_OK, "success", data=summaries_data(result.value))


@router.get("/books/{book_id}", response_model=Envelope, responses=_FAILURE_RESPONSES)
async def get_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    result = await service.get_book(book_id)
    if not result.ok:
        return failure_response(result)
    return envelope_response(
        status.HTTP_200_OK, "success", data={"book": result.value.model_dump(by_alias=True)}
    )


@router.put("/books/{book_id}", response_model=Envelope, responses=_FAILURE_RESPONSES)
async def update_book(
    book_id: str,
    payload: BookPayload,
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    """Replace all mutable fields of a book."""
    result = await service.update_book(book_id, payload)
    if not result.ok:
        return failure_response(result)
    return envelope_response(status.HTTP_200_OK, "success", result.message)


@router.delete("/books/{book_id}", response_model=Envelope, responses=_FAILURE_RESPONSES)
async def delete_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    result = await service.delete_book(book_id)
    if not result.ok:
        return failure_response(result)
    return envelope_response(status.HTTP_200_OK, "success", result.message)
