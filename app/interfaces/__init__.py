"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas and dependency
wiring. No business logic belongs here.
Routes call handlers and use cases and return responses.
"""
