"""RedHope Application Package: blood-donation coordination API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
