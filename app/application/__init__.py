"""
Application layer package.

Request validation, the resource handler and the aggregation use case.
This layer depends on domain ports, never on the HTTP framework.
"""
