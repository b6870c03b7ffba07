# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, Header, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.services.device_gatekeeper import DeviceGateKeeper, SessionIdentity
from ...di.base_container import BaseContainer

INGESTION_API_KEY_HEADER = "X-API-Key"

# auto_error=False so a missing header goes through the gatekeeper (401 with our body)
security_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> BaseContainer:
    """Container built at startup and attached to the application state"""
    return request.app.state.container


def get_gatekeeper(container: BaseContainer = Depends(get_container)) -> DeviceGateKeeper:
    return container.get(DeviceGateKeeper)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    gatekeeper: DeviceGateKeeper = Depends(get_gatekeeper),
) -> SessionIdentity:
    """
    FastAPI dependency for user routes: session token from the Authorization header

    Raises:
        UnauthorizedError: If the token is missing, malformed, expired, or its user is gone
    """
    token = credentials.credentials if credentials is not None else None
    return await gatekeeper.authenticate(token)


async def require_ingestion_secret(
    api_key: Optional[str] = Header(None, alias=INGESTION_API_KEY_HEADER),
    gatekeeper: DeviceGateKeeper = Depends(get_gatekeeper),
) -> None:
    """
    FastAPI dependency for device routes: shared ingestion secret

    Raises:
        ForbiddenError: If the header is missing or does not match
    """
    gatekeeper.check_ingestion_secret(api_key)
