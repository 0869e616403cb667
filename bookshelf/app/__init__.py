"""
Application package initializer.

The service is organised into small pieces: ``core`` holds settings,
logging and the in-memory store, ``schemas`` the pydantic models,
``services`` the book operations and ``api`` the versioned routes.
"""

from .main import app  # noqa: F401
