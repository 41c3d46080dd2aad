from fastapi import APIRouter, Depends, Request, Response, status

from ..auth.entities.user import Principal
from ..dependencies.auth_dependencies import get_auth_service, get_bearer_token, get_current_principal
from ..dto.auth import AuthResponse, LoginRequest, PasswordResetRequest, RegisterRequest
from ..dto.common import MessageResponse
from ..services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
async def register(
    request: Request,
    payload: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    client_ip = request.client.host if request.client else "unknown"
    return await auth_service.register(payload, client_ip)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    return await auth_service.login(payload)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    principal: Principal = Depends(get_current_principal),
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
):
    await auth_service.logout(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/password-reset", response_model=MessageResponse)
async def request_password_reset(
    payload: PasswordResetRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    return await auth_service.request_password_reset(payload)
