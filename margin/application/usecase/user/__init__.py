"""User account use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .profile import UserProfile
from .register_user import RegisterUserRequest, RegisterUserUseCase
from .set_user_type import SetUserTypeRequest, SetUserTypeUseCase
from .verify_user import VerifyUserRequest, VerifyUserUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterUserRequest",
    "RegisterUserUseCase",
    "SetUserTypeRequest",
    "SetUserTypeUseCase",
    "UserProfile",
    "VerifyUserRequest",
    "VerifyUserUseCase",
]
