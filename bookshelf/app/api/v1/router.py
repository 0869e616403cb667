"""
Top‑level router for version 1 of the API.

When new resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

# The books router defines its own "/books" paths (plus the root list
# route), so it is included without a prefix.
router.include_router(books.router, tags=["books"])
