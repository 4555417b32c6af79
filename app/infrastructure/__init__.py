"""
Infrastructure layer package.

Concrete adapters: the in-memory resource store and the HTTP client
used to reach downstream services.
"""
