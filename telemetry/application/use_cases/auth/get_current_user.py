# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UnauthorizedError
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for loading the profile of the authenticated user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Raises:
            UnauthorizedError: If the user was removed after the token was issued
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UnauthorizedError("User not found")

        return UserResponse(
            id=user.id or "",
            email=user.email,
            created_at=user.created_at,
        )
