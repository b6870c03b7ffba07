# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ConflictError
from ....core.security import PasswordHasher, SessionTokenIssuer
from ...dto.auth_dto import UserRegistrationRequest, TokenResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user and issuing their first session token"""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: SessionTokenIssuer,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    async def execute(self, request: UserRegistrationRequest) -> TokenResponse:
        """
        Register a new user

        Args:
            request: Registration request with email and password

        Returns:
            TokenResponse with a session token for the new user

        Raises:
            ConflictError: If user with email already exists
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ConflictError("User already exists")

        hashed_password = self.password_hasher.hash(request.password)

        new_user = User(
            id=None,  # Will be set by repository
            email=request.email,
            hashed_password=hashed_password,
        )

        # A concurrent registration of the same email surfaces here as ConflictError
        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Registered user {saved_user.id}")

        token = self.token_issuer.issue(saved_user.id or "", saved_user.email)
        return TokenResponse(
            token=token,
            expires_in=int(self.token_issuer.ttl.total_seconds()),
        )
