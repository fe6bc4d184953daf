"""
Book Catalog: a CRUD service for books identified by ISBN.

Application package root. This is a small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - books: Validation, persistence and REST exposure of the catalogue.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (database) implementing domain ports.
    - interfaces: FastAPI routers, validation contract, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
