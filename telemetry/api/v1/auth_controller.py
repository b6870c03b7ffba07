# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from ...application.dto.user_dto import UserResponse
from ...application.services.device_gatekeeper import SessionIdentity
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...di.base_container import BaseContainer
from .dependencies import get_container, get_current_identity


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    request: UserRegistrationRequest,
    container: BaseContainer = Depends(get_container),
) -> TokenResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        TokenResponse with a session token for the new user (409 if the email is taken)
    """
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)


@router.post("/login", response_model=TokenResponse)
async def login_user(
    request: UserLoginRequest,
    container: BaseContainer = Depends(get_container),
) -> TokenResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        TokenResponse with access token
    """
    login_use_case = container.get(LoginUserUseCase)

    token_response = await login_use_case.execute(request)
    if token_response is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email or password incorrect",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token_response


@router.get("/me", response_model=UserResponse)
async def get_me(
    identity: SessionIdentity = Depends(get_current_identity),
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """
    Get current authenticated user information

    Args:
        identity: Current authenticated user (from dependency)

    Returns:
        UserResponse with user information
    """
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(identity.user_id)
