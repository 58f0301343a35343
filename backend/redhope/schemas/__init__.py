"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Wire names are camelCase; Python attributes are snake_case
    - Domain enums from core/ used for role/status fields
"""
