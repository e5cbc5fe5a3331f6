"""Infrastructure Layer: external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All external calls wrapped with timeout and error mapping

Design Decisions:
    - Thin client classes over a shared AsyncClient (ADR: single responsibility)
"""
