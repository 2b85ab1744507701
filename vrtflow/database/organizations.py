"""Organization storage"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from ..models.organization import Organization
from ..security.caller import Caller

logger = logging.getLogger(__name__)


class OrganizationRegistry:
    """
    In-memory registry of tenant organizations.

    Contents live only as long as the process. One registry is created at
    application start-up and handed to request handlers.
    """

    def __init__(self):
        self.organizations: dict[str, Organization] = {}

    def create(
        self,
        name: str,
        logo_url: Optional[str] = None,
        settings: Optional[dict[str, Any]] = None,
    ) -> Organization:
        """Create an organization"""
        if not name:
            raise ValueError("Organization name is required")

        org = Organization(
            id=f"org-{uuid.uuid4()}",
            name=str(name),
            created_at=datetime.now(timezone.utc),
            logo_url=str(logo_url) if logo_url else None,
            settings=settings or None,
        )
        self.organizations[org.id] = org
        logger.info(f"Organization {org.id} created: {org.name}")
        return org

    def get(self, org_id: str) -> Optional[Organization]:
        """Get an organization by ID"""
        return self.organizations.get(org_id)

    def list_all(self) -> list[Organization]:
        """All organizations in creation order"""
        return list(self.organizations.values())

    def list_for(self, caller: Caller) -> list[Organization]:
        """Organizations the caller may see"""
        if caller.is_super_admin:
            return self.list_all()
        return [
            org for org in self.organizations.values()
            if org.id in caller.organizations
        ]

    def update(
        self,
        org_id: str,
        name: Optional[str] = None,
        logo_url: Optional[str] = None,
        settings: Optional[dict[str, Any]] = None,
    ) -> Optional[Organization]:
        """
        Update an organization.

        Only non-empty values are applied; everything else keeps its value.

        Returns:
            The updated organization, or None if it does not exist
        """
        org = self.get(org_id)
        if not org:
            return None

        changes: dict[str, Any] = {}
        if name:
            changes["name"] = str(name)
        if logo_url:
            changes["logo_url"] = str(logo_url)
        if settings:
            changes["settings"] = settings

        updated = org.model_copy(update=changes)
        self.organizations[org_id] = updated
        return updated

    def delete(self, org_id: str) -> bool:
        """Delete an organization"""
        if org_id in self.organizations:
            del self.organizations[org_id]
            logger.info(f"Organization {org_id} deleted")
            return True
        return False
