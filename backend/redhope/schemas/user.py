"""User Schemas: registration, self-service profile and admin updates.

Invariants:
    - Registration requires a syntactically valid email
    - Profile patches may carry email/role/status; the service strips them
    - Admin updates only accept values of the closed Role/UserStatus enums
"""

from pydantic import EmailStr

from redhope.core.domain_types import Role, UserStatus
from redhope.schemas.common import OpenDocument, WireModel


class UserRegister(OpenDocument):
    """Body of POST /users."""
    email: EmailStr
    name: str | None = None
    avatar: str | None = None
    blood_group: str | None = None
    district: str | None = None
    upazila: str | None = None


class ProfileUpdate(OpenDocument):
    """Body of PATCH /users/profile/{email}."""
    name: str | None = None
    avatar: str | None = None
    blood_group: str | None = None
    district: str | None = None
    upazila: str | None = None


class StatusUpdate(WireModel):
    status: UserStatus


class RoleUpdate(WireModel):
    role: Role


class RoleResponse(WireModel):
    role: str
