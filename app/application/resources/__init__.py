"""
Application layer for the resources bounded context.

Request validation and the handler that runs each CRUD operation
against a ResourceStore port.
"""
