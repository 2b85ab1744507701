"""Organization models"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel


class Organization(BaseModel):
    """Tenant company using the system"""
    id: str
    name: str
    created_at: datetime
    logo_url: Optional[str] = None
    settings: Optional[dict[str, Any]] = None


class OrganizationCreateRequest(BaseModel):
    """Request to create an organization"""
    name: Optional[str] = None
    logo_url: Optional[str] = None
    settings: Optional[dict[str, Any]] = None


class OrganizationUpdateRequest(BaseModel):
    """Request to update an organization; empty values are ignored"""
    name: Optional[str] = None
    logo_url: Optional[str] = None
    settings: Optional[dict[str, Any]] = None
