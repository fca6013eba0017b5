"""User and token routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from margin.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
    SetUserTypeRequest,
    SetUserTypeUseCase,
    VerifyUserRequest,
    VerifyUserUseCase,
)
from margin.interface.api.request import extract_token
from margin.interface.api.response import success

router = APIRouter(prefix="/api", tags=["users"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    display_name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)
    url: str | None = None


@router.post("/user")
async def register(
    request: Request,
    body: RegisterAPIRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
    lang: str | None = None,
) -> dict[str, Any]:
    """Register an account.

    The first account becomes the administrator. When mail is configured
    later accounts must follow the emailed confirmation link.
    """
    payload = await register_user_use_case.execute(
        RegisterUserRequest(
            display_name=body.display_name,
            email=body.email,
            password=body.password,
            url=body.url,
            lang=lang,
            server_url=str(request.base_url),
        )
    )
    return success(payload)


@router.get("/verification")
async def verify(
    email: str,
    token: str,
    verify_user_use_case: FromDishka[VerifyUserUseCase],
) -> dict[str, Any]:
    """Confirmation link target."""
    await verify_user_use_case.execute(VerifyUserRequest(email=email, token=token))
    return success()


class LoginAPIRequest(BaseModel):
    email: str
    password: str
    code: str | None = None


@router.post("/token")
async def login(
    body: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> dict[str, Any]:
    """Password login; returns the profile with a bearer token."""
    payload = await login_use_case.execute(
        LoginRequest(email=body.email, password=body.password, code=body.code)
    )
    return success(payload)


@router.get("/token")
async def current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> dict[str, Any]:
    """Profile of the signed-in account."""
    payload = await get_current_user_use_case.execute(
        GetCurrentUserRequest(auth_token=extract_token(request))
    )
    return success(payload)


@router.delete("/token")
async def logout() -> dict[str, Any]:
    """Tokens are stateless; clients simply drop theirs."""
    return success()


class SetUserTypeAPIRequest(BaseModel):
    type: str


@router.put("/user/{user_id}")
async def set_user_type(
    user_id: int,
    request: Request,
    body: SetUserTypeAPIRequest,
    set_user_type_use_case: FromDishka[SetUserTypeUseCase],
) -> dict[str, Any]:
    """Promote or demote an account. Administrators only."""
    await set_user_type_use_case.execute(
        SetUserTypeRequest(
            user_id=user_id, type=body.type, auth_token=extract_token(request)
        )
    )
    return success()
