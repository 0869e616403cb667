"""
Version 1 of the bookshelf API.

Paths in this version are kept compatible with the original service
(``/books`` and ``/books/{id}`` at the root), so the router is mounted
without a version prefix unless ``API_PREFIX`` says otherwise.
"""
