"""
User API Schemas - Pydantic models for request/response
"""

from pydantic import BaseModel, Field, SecretStr

from src.service.cinema.domain.enum.user_role import UserRole


class SignupRequest(BaseModel):
    model_config = {
        'json_schema_extra': {'example': {'username': 'moviegoer', 'password': 'P@ssw0rd'}}
    }

    username: str = Field(..., min_length=1, max_length=150)
    password: SecretStr = Field(
        ...,
        min_length=6,
        max_length=72,
        description='Password must be 6-72 characters (bcrypt limit)',
    )


class LoginRequest(BaseModel):
    model_config = {
        'json_schema_extra': {'example': {'username': 'moviegoer', 'password': 'P@ssw0rd'}}
    }

    username: str = Field(..., min_length=1, max_length=150)
    password: SecretStr = Field(..., min_length=1, max_length=72)


class TokenResponse(BaseModel):
    token: str
    token_type: str = 'bearer'
    role: UserRole


class UserResponse(BaseModel):
    id: int
    username: str
    role: UserRole
