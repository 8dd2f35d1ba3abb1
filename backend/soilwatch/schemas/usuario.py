"""User schemas for registration, login and profile."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from .common import TokenResponse


class UserRegister(BaseModel):
    """Registration body. Emptiness is checked by the endpoint."""
    username: Optional[str] = None
    gmail: Optional[str] = None
    password: Optional[str] = None
    tokenExpo: Optional[str] = None


class UserLogin(BaseModel):
    """Login body. All three fields are required by the endpoint."""
    username: Optional[str] = None
    password: Optional[str] = None
    tokenExpo: Optional[str] = None


class UserProfile(BaseModel):
    id: int
    username: str
    gmail: str
    createdAt: Optional[datetime] = None


class UserProfileResponse(TokenResponse):
    usuario: UserProfile
