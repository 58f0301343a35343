"""User Routes: registration, search, profile and admin role/status endpoints.

Invariants:
    - POST /users is the only user route without the token check (called at sign-up)
    - GET /users/{email}/role never returns 404; unknown users are donors
    - Admin PATCH bodies are validated against the Role/UserStatus enums
"""

from fastapi import APIRouter, Depends, Query

from redhope.api.dependencies import get_user_directory
from redhope.api.guards import operation_guard, require_token
from redhope.schemas.user import (
    ProfileUpdate, RoleResponse, RoleUpdate, StatusUpdate, UserRegister,
)
from redhope.services.user_directory import UserDirectory

router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
async def register_user(
    body: UserRegister,
    users: UserDirectory = Depends(get_user_directory),
):
    """Register a user; a repeated email is answered with 'user exists'."""
    with operation_guard("Failed to save user"):
        return await users.register(body.to_wire())


@router.get("", dependencies=[Depends(require_token)])
async def list_users(
    status: str | None = Query(None),
    role: str | None = Query(None),
    blood_group: str | None = Query(None, alias="bloodGroup"),
    district: str | None = Query(None),
    upazila: str | None = Query(None),
    users: UserDirectory = Depends(get_user_directory),
):
    """List users (admin panel, donor search), newest first."""
    with operation_guard("Failed to get users"):
        return await users.list_users({
            "status": status,
            "role": role,
            "bloodGroup": blood_group,
            "district": district,
            "upazila": upazila,
        })


@router.get("/profile/{email}", dependencies=[Depends(require_token)])
async def get_profile(
    email: str, users: UserDirectory = Depends(get_user_directory),
):
    with operation_guard("Failed to get profile"):
        return await users.get_profile(email)


@router.patch("/profile/{email}", dependencies=[Depends(require_token)])
async def update_profile(
    email: str,
    body: ProfileUpdate,
    users: UserDirectory = Depends(get_user_directory),
):
    """Self-service profile update; email, role and status are ignored."""
    with operation_guard("Failed to update profile"):
        return await users.update_profile(email, body.to_wire())


@router.get(
    "/{email}/role",
    response_model=RoleResponse,
    dependencies=[Depends(require_token)],
)
async def get_user_role(
    email: str, users: UserDirectory = Depends(get_user_directory),
):
    with operation_guard("Failed to get user role"):
        return RoleResponse(role=await users.get_role(email))


@router.patch("/{user_id}/status", dependencies=[Depends(require_token)])
async def update_user_status(
    user_id: str,
    body: StatusUpdate,
    users: UserDirectory = Depends(get_user_directory),
):
    with operation_guard("Failed to update status"):
        return await users.set_status(user_id, body.status)


@router.patch("/{user_id}/role", dependencies=[Depends(require_token)])
async def update_user_role(
    user_id: str,
    body: RoleUpdate,
    users: UserDirectory = Depends(get_user_directory),
):
    with operation_guard("Failed to update role"):
        return await users.set_role(user_id, body.role)
