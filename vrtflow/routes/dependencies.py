"""Shared route dependencies"""

from fastapi import Depends, HTTPException, Request

from ..database.organizations import OrganizationRegistry
from ..services.storefront import SessionManager, StorefrontSession


def get_session_manager(request: Request) -> SessionManager:
    """Session manager created during application start-up"""
    return request.app.state.sessions


def get_registry(request: Request) -> OrganizationRegistry:
    """Organization registry created during application start-up"""
    return request.app.state.organizations


def get_storefront_session(
    session_id: str,
    sessions: SessionManager = Depends(get_session_manager),
) -> StorefrontSession:
    """Resolve the session named in the path"""
    session = sessions.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session
