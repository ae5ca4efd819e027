"""
Authentication module data models.

Request bodies for signup/signin and the token-bearing responses.
"""

from pydantic import BaseModel, Field, EmailStr


class SignupRequest(BaseModel):
    """Request to create a new account."""

    email: EmailStr = Field(..., description="Email address, unique across accounts")
    password: str = Field(..., min_length=1, description="Raw password")
    user_role: str = Field(..., description="USER or ADMIN")


class SigninRequest(BaseModel):
    """Request to exchange credentials for a token."""

    email: EmailStr = Field(..., description="Registered email address")
    password: str = Field(..., min_length=1, description="Raw password")


class SignupResponse(BaseModel):
    """Token issued for a newly created account."""

    bearer_token: str = Field(..., description="Bearer token for the new account")


class SigninResponse(BaseModel):
    """Token issued for a successful signin."""

    bearer_token: str = Field(..., description="Bearer token for the account")
