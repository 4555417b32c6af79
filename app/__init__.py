"""
Vehicle Services — keyed vehicle resources and a boat aggregation gateway.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - resources: CRUD over bicycles and boats kept in memory.
    - aggregation: A boat merged with its brand from two downstream services.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Request validation, handlers and use cases.
    - infrastructure: Adapters (in-memory store, HTTP client) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (error taxonomy, security, logging).
"""
