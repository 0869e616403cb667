"""
Service layer abstraction.

Services encapsulate the business rules of a domain.  They work on an
injected store so the in-memory collection used today can be replaced
without changing the API handlers.
"""
