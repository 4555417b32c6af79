"""
Shared error handling package.

Centralizes the internal error taxonomy and its translation into
HTTP responses so that store, validation and downstream failures
are consistently reported by every service.
"""
