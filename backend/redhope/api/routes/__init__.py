"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain business logic (delegate to services)
    - Every route body runs inside operation_guard with its fixed failure message
"""
