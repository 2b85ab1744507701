"""
Caller identity

The auth context lives outside this service. Upstream puts the caller's role
and permitted organization ids on the request as headers; this module turns
them into a Caller for the handlers.
"""

from dataclasses import dataclass, field
from typing import Optional

from fastapi import Header

ROLE_SUPER_ADMIN = "super_admin"


@dataclass(frozen=True)
class Caller:
    """Identity of the user behind a request"""
    role: Optional[str] = None
    organizations: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_super_admin(self) -> bool:
        return self.role == ROLE_SUPER_ADMIN


def parse_organizations(raw: Optional[str]) -> frozenset[str]:
    """Split a comma-separated organization header"""
    if not raw:
        return frozenset()
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


def get_caller(
    x_user_role: Optional[str] = Header(None),
    x_user_organizations: Optional[str] = Header(None),
) -> Caller:
    """Dependency that extracts the caller from request headers"""
    return Caller(
        role=x_user_role,
        organizations=parse_organizations(x_user_organizations),
    )
