from datetime import timedelta
from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import PasswordHasher, SessionTokenIssuer
from ...application.services.device_gatekeeper import DeviceGateKeeper
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.ownership_registry import OwnershipRegistry

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the password hasher, token issuer and device gatekeeper as singletons"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings: Settings = container.get(Settings)

        container.register_singleton(
            PasswordHasher,
            PasswordHasher(rounds=settings.bcrypt_rounds)
        )

        container.register_singleton(
            SessionTokenIssuer,
            SessionTokenIssuer(
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                ttl=timedelta(minutes=settings.access_token_expire_minutes),
            )
        )

        container.register_singleton(
            DeviceGateKeeper,
            DeviceGateKeeper(
                ingestion_secret=settings.ingestion_api_key,
                token_issuer=container.get(SessionTokenIssuer),
                user_repository=container.get(UserRepository),
                device_repository=container.get(DeviceRepository),
                ownership_registry=container.get(OwnershipRegistry),
            )
        )
