"""
Authentication Routes

Endpoints:
- POST /auth/register - Create an account
- POST /auth/login - Exchange username/password for a session
- POST /auth/logout - Clear session
- GET /auth/me - Get current user profile

Passwords are opaque tokens compared for equality. The session JWT only
identifies the acting user between requests.
"""

from fastapi import APIRouter, Response, status

from classroom.api.deps import CurrentUser, Service, create_access_token
from classroom.config import get_settings
from classroom.schemas.auth import LoginRequest, TokenResponse
from classroom.schemas.user import UserCreate, UserRead, role_from_name

router = APIRouter(prefix="/auth", tags=["auth"])


def _cookie_options() -> dict:
    settings = get_settings()
    return {
        "httponly": True,
        "secure": settings.cookie_cross_domain or settings.environment != "development",
        "samesite": "none" if settings.cookie_cross_domain else "lax",
    }


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register(data: UserCreate, service: Service) -> UserRead:
    """
    Register a new account.

    Returns 409 if the username is already taken (case-sensitive).
    """
    user = service.register(data.username, data.password, role_from_name(data.role))
    return UserRead.model_validate(user)


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    response: Response,
    service: Service,
) -> TokenResponse:
    """
    Exchange credentials for a session JWT.

    The token is returned in the body and set as an HttpOnly cookie.
    Returns 401 on an unknown username or wrong password.
    """
    user = service.login(request.username, request.password)

    access_token = create_access_token(user.id)
    expires_in = get_settings().jwt_expire_minutes * 60

    response.set_cookie(
        key="access_token",
        value=access_token,
        max_age=expires_in,
        **_cookie_options(),
    )

    return TokenResponse(
        access_token=access_token,
        expires_in=expires_in,
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(response: Response) -> None:
    """
    Clear the authentication session.

    Note: This only clears the cookie. A JWT kept elsewhere by the client
    stays valid until expiry.
    """
    response.delete_cookie(key="access_token", **_cookie_options())


@router.get("/me", response_model=UserRead)
async def get_me(current_user: CurrentUser) -> UserRead:
    """Get the current authenticated user's profile."""
    return UserRead.model_validate(current_user)
