"""
Top‑level package for the Bookshelf API.

All functionality lives in submodules under ``app``; the ASGI
application is ``bookshelf.app.main:app``.
"""

__all__ = []
