"""Auth Routes — register, login, logout, and current-user lookup.

Invariants:
    - register/login set the session cookie (httponly, samesite=lax) and return the token
    - logout requires a valid session and clears the cookie
    - Password fields never echoed back
"""

from fastapi import APIRouter, Depends, Request, Response, status

from taskdesk.api.deps import extract_token, get_auth_service, get_current_user
from taskdesk.config import get_settings
from taskdesk.core.domain_types import AuthenticatedUser
from taskdesk.schemas.auth import (
    LoginRequest, RegisterRequest, SessionResponse, UserResponse,
)
from taskdesk.schemas.task import MutationResult
from taskdesk.services.auth_service import AuthService, IssuedSession

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


def _session_response(response: Response, issued: IssuedSession) -> SessionResponse:
    settings = get_settings()
    response.set_cookie(
        settings.session_cookie_name,
        issued.token,
        max_age=settings.session_ttl_hours * 3600,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return SessionResponse(
        user=UserResponse(
            id=issued.user.id, email=issued.user.email, name=issued.user.name,
        ),
        token=issued.token,
        expires_at=issued.expires_at,
    )


@router.post(
    "/register", response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
):
    """Create an account and sign it in."""
    issued = await auth.register(
        body.name, body.email, body.password,
        user_agent=request.headers.get("user-agent"),
    )
    return _session_response(response, issued)


@router.post("/login", response_model=SessionResponse)
async def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
):
    issued = await auth.login(
        body.email, body.password,
        user_agent=request.headers.get("user-agent"),
    )
    return _session_response(response, issued)


@router.post("/logout", response_model=MutationResult)
async def logout(
    request: Request,
    response: Response,
    user: AuthenticatedUser = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    """End the current session."""
    await auth.logout(extract_token(request))
    response.delete_cookie(get_settings().session_cookie_name)
    return {"success": True}


@router.get("/me", response_model=UserResponse)
async def me(user: AuthenticatedUser = Depends(get_current_user)):
    return UserResponse(id=user.id, email=user.email, name=user.name)
