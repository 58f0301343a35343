"""User Rules: pure helpers for registration defaults and self-service updates.

Invariants:
    - Self-service patches can never touch email, role or status
    - Role lookup never fails: missing user or missing role means donor
"""

from redhope.core.domain_types import DEFAULT_ROLE

PROTECTED_PROFILE_FIELDS = frozenset({"email", "role", "status"})


def strip_protected_fields(patch: dict) -> dict:
    """Drop identity and privilege keys from a profile patch."""
    return {k: v for k, v in patch.items() if k not in PROTECTED_PROFILE_FIELDS}


def resolve_role(stored_role: str | None) -> str:
    return stored_role or DEFAULT_ROLE.value
