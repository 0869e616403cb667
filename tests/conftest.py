"""Shared fixtures for the bookshelf tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookshelf.app.core.store import BookStore
from bookshelf.app.main import create_app
from bookshelf.app.services.book_service import BookService

from .helpers import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> BookStore:
    return BookStore()


@pytest.fixture
def service(store: BookStore, clock: FakeClock) -> BookService:
    return BookService(store, clock=clock)


@pytest.fixture
def app(service: BookService) -> FastAPI:
    return create_app(service)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
