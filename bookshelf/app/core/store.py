"""
In-memory book store.

``BookStore`` keeps books in insertion order and guards every access
with a single lock, so a lookup followed by a write (find the index,
then replace or remove) happens in one critical section.  Readers get
copies of the stored models and can never modify the collection
behind the lock's back.

Identifiers handed out by ``reserve_id`` are remembered for the
lifetime of the store, including after deletion, so an id never
resolves to a second book.

A store instance is created by ``create_app`` and injected into the
service layer; to persist books elsewhere, provide another object with
the same methods.
"""

import threading
from typing import Callable, Dict, List, Optional, Set

from bookshelf.app.schemas.book import BookRead


class BookStore:
    """Ordered, lock-guarded collection of ``BookRead`` records."""

    def __init__(self) -> None:
        self._books: List[BookRead] = []
        self._issued_ids: Set[str] = set()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def reserve_id(self, factory: Callable[[], str]) -> str:
        """Draw ids from ``factory`` until one was never issued before."""
        with self._lock:
            book_id = factory()
            while book_id in self._issued_ids:
                book_id = factory()
            self._issued_ids.add(book_id)
            return book_id

    def append(self, book: BookRead) -> None:
        with self._lock:
            self._issued_ids.add(book.id)
            self._books.append(book.model_copy())

    def all(self) -> List[BookRead]:
        """Return copies of all books in collection order."""
        with self._lock:
            return [book.model_copy() for book in self._books]

    def get(self, book_id: str) -> Optional[BookRead]:
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return None
            return self._books[index].model_copy()

    def update(self, book_id: str, changes: Dict[str, object]) -> Optional[BookRead]:
        """Replace fields of a stored book.

        ``changes`` maps snake_case field names to new values.  Returns
        the updated book or ``None`` when no book has this id.
        """
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return None
            updated = self._books[index].model_copy(update=changes)
            self._books[index] = updated
            return updated.model_copy()

    def delete(self, book_id: str) -> bool:
        """Remove a book; ``False`` if no book has this id."""
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return False
            del self._books[index]
            return True

    def _index_of(self, book_id: str) -> Optional[int]:
        # Linear scan; callers must hold the lock.
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None
