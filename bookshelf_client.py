"""Bookshelf API client.

A thin wrapper around the bookshelf REST API built on the ``requests``
library.  It exposes one method per operation:

* :meth:`add_book` – create a book and return its new id.
* :meth:`list_books` – return ``{id, name, publisher}`` of every book.
* :meth:`get_book` – fetch a single book by its identifier.
* :meth:`update_book` – replace the mutable fields of a book.
* :meth:`delete_book` – remove a book.

No method raises on HTTP or network failures.  Each returns a tuple
``(result, error)`` where ``error`` is ``None`` on success or a
dictionary with ``status_code`` and ``message`` keys.  ``message`` is
taken from the server's response envelope when there is one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BookshelfAPI:
    """Client for the bookshelf API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:9000``.
                Include ``API_PREFIX`` here if the server uses one.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for the server on each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/books``).
            json_body: JSON body to send with the request (for POST/PUT).
        Returns:
            A tuple ``(envelope, error)``.  ``envelope`` is the parsed
            JSON body on success.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return {}, None
        except requests.HTTPError as exc:
            # A Response with an error status is falsy, compare with None.
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _book_path(book_id: str) -> str:
        return f"/books/{quote(str(book_id), safe='')}"

    @staticmethod
    def _data(envelope: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        data = (envelope or {}).get("data")
        return data if isinstance(data, dict) else {}

    # ------------------------------------------------------------------
    # Book operations
    # ------------------------------------------------------------------
    def add_book(self, payload: Dict[str, Any]) -> Tuple[Optional[str], Optional[Error]]:
        """Create a book.

        Args:
            payload: Book fields in camelCase (``name``, ``pageCount``, ...).
        Returns:
            A tuple ``(book_id, error)``.
        """
        envelope, error = self._request("POST", "/books", json_body=payload)
        if error:
            return None, error
        return self._data(envelope).get("bookId"), None

    def list_books(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the summaries of all books.

        Returns:
            A tuple ``(books, error)``.  ``books`` is empty on failure.
        """
        envelope, error = self._request("GET", "/books")
        if error:
            return [], error
        books = self._data(envelope).get("books")
        return (books if isinstance(books, list) else []), None

    def get_book(self, book_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single book by id.

        Returns:
            A tuple ``(book, error)``.
        """
        envelope, error = self._request("GET", self._book_path(book_id))
        if error:
            return None, error
        return self._data(envelope).get("book"), None

    def update_book(self, book_id: str, payload: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Replace the mutable fields of a book.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("PUT", self._book_path(book_id), json_body=payload)
        if error:
            return False, error
        return True, None

    def delete_book(self, book_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a book.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._book_path(book_id))
        if error:
            return False, error
        return True, None
