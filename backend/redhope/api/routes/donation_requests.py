"""Donation Request Routes: create, search, fetch, update and delete.

Invariants:
    - GET filters: email (requester), status, bloodGroup, district/upazila (recipient)
    - PATCH writes only the fields present in the body
    - Unknown or malformed ids: GET → 404, PATCH/DELETE → zero counts
"""

from fastapi import APIRouter, Depends, Query

from redhope.api.dependencies import get_donation_registry
from redhope.api.guards import operation_guard, require_token
from redhope.schemas.donation_request import (
    DonationRequestCreate, DonationRequestUpdate,
)
from redhope.services.donation_registry import DonationRegistry

router = APIRouter(
    prefix="/donation-requests",
    tags=["donation-requests"],
    dependencies=[Depends(require_token)],
)


@router.get("")
async def list_donation_requests(
    email: str | None = Query(None),
    status: str | None = Query(None),
    blood_group: str | None = Query(None, alias="bloodGroup"),
    district: str | None = Query(None),
    upazila: str | None = Query(None),
    registry: DonationRegistry = Depends(get_donation_registry),
):
    """List donation requests for dashboards and search, newest first."""
    with operation_guard("Failed to get donation requests"):
        return await registry.list_requests({
            "email": email,
            "status": status,
            "bloodGroup": blood_group,
            "district": district,
            "upazila": upazila,
        })


@router.get("/{request_id}")
async def get_donation_request(
    request_id: str,
    registry: DonationRegistry = Depends(get_donation_registry),
):
    with operation_guard("Failed to get donation request"):
        return await registry.get_by_id(request_id)


@router.patch("/{request_id}")
async def update_donation_request(
    request_id: str,
    body: DonationRequestUpdate,
    registry: DonationRegistry = Depends(get_donation_registry),
):
    with operation_guard("Failed to update donation request"):
        return await registry.update(request_id, body.to_wire())


@router.delete("/{request_id}")
async def delete_donation_request(
    request_id: str,
    registry: DonationRegistry = Depends(get_donation_registry),
):
    with operation_guard("Failed to delete donation request"):
        return await registry.delete(request_id)


@router.post("")
async def create_donation_request(
    body: DonationRequestCreate,
    registry: DonationRegistry = Depends(get_donation_registry),
):
    with operation_guard("Failed to create donation request"):
        return await registry.create(body.to_wire())
