"""Organization API routes"""

from fastapi import APIRouter, Depends, HTTPException, Response

from ..database.organizations import OrganizationRegistry
from ..models.organization import (
    Organization,
    OrganizationCreateRequest,
    OrganizationUpdateRequest,
)
from ..security.caller import Caller, get_caller
from .dependencies import get_registry

router = APIRouter(prefix="/api/organizations", tags=["Organizations"])


@router.post("", response_model=Organization, status_code=201)
async def create_organization(
    request: OrganizationCreateRequest,
    registry: OrganizationRegistry = Depends(get_registry),
):
    """Create an organization"""
    if not request.name:
        raise HTTPException(status_code=400, detail="Organization name is required")

    return registry.create(
        name=request.name,
        logo_url=request.logo_url,
        settings=request.settings,
    )


@router.get("", response_model=list[Organization])
async def list_organizations(
    caller: Caller = Depends(get_caller),
    registry: OrganizationRegistry = Depends(get_registry),
):
    """
    List organizations.

    Super admins see every organization; everyone else sees only the
    organizations they belong to.
    """
    return registry.list_for(caller)


@router.put("/{org_id}", response_model=Organization)
async def update_organization(
    org_id: str,
    request: OrganizationUpdateRequest,
    registry: OrganizationRegistry = Depends(get_registry),
):
    """Update an organization"""
    updated = registry.update(
        org_id,
        name=request.name,
        logo_url=request.logo_url,
        settings=request.settings,
    )
    if not updated:
        raise HTTPException(status_code=404, detail="Organization not found")
    return updated


@router.delete("/{org_id}", status_code=204)
async def delete_organization(
    org_id: str,
    registry: OrganizationRegistry = Depends(get_registry),
):
    """Delete an organization"""
    if not registry.delete(org_id):
        raise HTTPException(status_code=404, detail="Organization not found")
    return Response(status_code=204)
