"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store so that the JSON representation
can change without touching how books are held in memory.
"""
