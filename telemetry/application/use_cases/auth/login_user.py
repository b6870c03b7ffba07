# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import PasswordHasher, SessionTokenIssuer
from ...dto.auth_dto import UserLoginRequest, TokenResponse


class LoginUserUseCase:
    """Use case for authenticating a user and generating a session token"""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: SessionTokenIssuer,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    async def execute(self, request: UserLoginRequest) -> Optional[TokenResponse]:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse if authentication successful, None otherwise.
            Unknown email and wrong password are indistinguishable.
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            self.password_hasher.verify_dummy(request.password)
            return None

        if not self.password_hasher.verify(request.password, user.hashed_password):
            return None

        token = self.token_issuer.issue(user.id or "", user.email)
        return TokenResponse(
            token=token,
            expires_in=int(self.token_issuer.ttl.total_seconds()),
        )
