"""API routes for registration, login and the user profile."""

from fastapi import APIRouter, Depends, HTTPException, status

from forked.dependencies import get_account_service, get_current_user
from forked.documents import UserContext
from forked.errors import ForkedError, to_http_exception
from forked.logging_config import get_logger
from forked.schemas import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    ProfileResponse,
    ProfileUpdateRequest,
    RegisterRequest,
    UserSummary,
)
from forked.services.accounts import AccountService

logger = get_logger(__name__)

router = APIRouter(prefix="/forked", tags=["users"])


@router.post(
    "/auth/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    service: AccountService = Depends(get_account_service),
) -> AuthResponse:
    """Create an account and return a bearer token for it."""
    try:
        token, user = await service.register(request.email, request.password, request.name)
        return AuthResponse(token=token, user=UserSummary.from_context(user))
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Registration failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@router.post("/auth/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: AccountService = Depends(get_account_service),
) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    try:
        token, user = await service.login(request.email, request.password)
        return AuthResponse(token=token, user=UserSummary.from_context(user))
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Login failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@router.get("/users/profile", response_model=ProfileResponse)
async def get_profile(
    user: UserContext = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> ProfileResponse:
    try:
        account = await service.get_profile(user)
        return ProfileResponse.from_account(account)
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Failed to fetch profile of user {user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch profile",
        )


@router.put("/users/profile", response_model=MessageResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    user: UserContext = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> MessageResponse:
    try:
        await service.update_profile(user, name=request.name, email=request.email)
        return MessageResponse(message="Profile updated")
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Failed to update profile of user {user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update profile",
        )
