"""Test doubles shared by the bookshelf tests."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, Iterator


class FakeClock:
    """Clock that moves forward by ``step`` every time it is read."""

    def __init__(
        self,
        start: datetime = datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


def sequence_ids(ids: Iterable[str]) -> Callable[[], str]:
    """Id factory returning the given ids in order."""
    iterator: Iterator[str] = iter(ids)
    return lambda: next(iterator)
