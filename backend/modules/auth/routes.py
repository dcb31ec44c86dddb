"""
Authentication API endpoints.

Registration and login. Failures are raised as CinelistError subclasses
and rendered by the API error handlers.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.responses import envelope

from .interfaces import IAuthService
from .models import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse

router = APIRouter()


@router.post("/register", status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
):
    """
    Create an account and its profile record.

    Returns 201 with the new user ID.
    """
    user_id = await service.register(request.email, request.password, request.name)
    body = RegisterResponse(user_id=user_id)
    return envelope(201, body.model_dump(by_alias=True))


@router.post("/login")
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
):
    """
    Exchange email and password for session tokens.
    """
    tokens = await service.login(request.email, request.password)
    body = LoginResponse(
        token=tokens.id_token,
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
    )
    return envelope(200, body.model_dump(by_alias=True))
