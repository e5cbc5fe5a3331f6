"""Pydantic Schemas: wire shapes for upstream services and API responses.

Invariants:
    - Schemas validate at system boundary (upstream JSON in, envelope out)
    - Core domain logic never depends on upstream field names

Design Decisions:
    - Upstream payloads decoded by Pydantic: a schema mismatch is a decode failure (ADR: fold into lookup error)
"""
