"""
Access control for device routes.

Device-originated writes are authorized by a shared ingestion secret that is
independent of any user. User-originated calls carry a session token, and any
call naming a specific device is additionally checked against the ownership
links. A device the caller does not own is reported exactly like a device
that does not exist.
"""

# Standard library imports
import hmac
import logging
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ...core.security import SessionTokenIssuer
from ...domain.exceptions import ForbiddenError, NotFoundError, UnauthorizedError
from ...domain.models.device import Device
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.ownership_registry import OwnershipRegistry
from ...domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

DEVICE_NOT_FOUND = "Device not found"


@dataclass(frozen=True)
class SessionIdentity:
    """Authenticated caller, produced by the session gate"""
    user_id: str
    email: str


class DeviceGateKeeper:
    """Ingestion gate, session gate and ownership check"""

    def __init__(
        self,
        ingestion_secret: str,
        token_issuer: SessionTokenIssuer,
        user_repository: UserRepository,
        device_repository: DeviceRepository,
        ownership_registry: OwnershipRegistry,
    ) -> None:
        self._ingestion_secret = ingestion_secret.encode("utf-8")
        self.token_issuer = token_issuer
        self.user_repository = user_repository
        self.device_repository = device_repository
        self.ownership_registry = ownership_registry

    def check_ingestion_secret(self, supplied_secret: Optional[str]) -> None:
        """
        Raises:
            ForbiddenError: If the secret is absent, wrong, or none is configured
        """
        if not self._ingestion_secret or not supplied_secret:
            logger.warning("Ingestion request rejected: missing API key")
            raise ForbiddenError()
        if not hmac.compare_digest(supplied_secret.encode("utf-8"), self._ingestion_secret):
            logger.warning("Ingestion request rejected: invalid API key")
            raise ForbiddenError()

    async def authenticate(self, token: Optional[str]) -> SessionIdentity:
        """
        Verify a session token and confirm its user still exists

        Raises:
            UnauthorizedError: TokenExpiredError, MalformedTokenError, or a
                token whose user is gone
        """
        if not token:
            raise UnauthorizedError("Not authenticated")

        claims = self.token_issuer.verify(token)

        user = await self.user_repository.find_by_id(claims.user_id)
        if user is None:
            raise UnauthorizedError("Invalid token")

        return SessionIdentity(user_id=claims.user_id, email=user.email)

    async def require_ownership(self, user_id: str, device_id: str) -> None:
        """
        Check the ownership link only; a link whose device row is already gone
        still passes, so an interrupted delete can be re-run.

        Raises:
            NotFoundError: If user_id is not linked to device_id
        """
        if not await self.ownership_registry.is_owner(user_id, device_id):
            raise NotFoundError(DEVICE_NOT_FOUND)

    async def owned_device_by_serial(self, user_id: str, serial_number: str) -> Device:
        """
        Raises:
            NotFoundError: If the device does not exist or user_id does not own it
        """
        device = await self.device_repository.find_by_serial_number(serial_number)
        if device is None or device.id is None:
            raise NotFoundError(DEVICE_NOT_FOUND)

        await self.require_ownership(user_id, device.id)
        return device
