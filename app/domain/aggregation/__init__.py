"""
Aggregation bounded context — domain layer.

Composition of a boat from the boat service with its brand from
the brand service.
"""
