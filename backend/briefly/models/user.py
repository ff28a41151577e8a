"""Briefly User Model

Account record used by the identity collaborator.
The credit balance lives in the ledger, not on the user.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone
import uuid


class BrieflyUser(BaseModel):
    """Registered Briefly user."""
    user_id: str = Field(default_factory=lambda: f"USR-{uuid.uuid4().hex[:12].upper()}")
    name: str
    email: str
    password_hash: str
    plan: str = "free"

    # Stored as given; validity is never checked
    referral_code: Optional[str] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_login_at: Optional[datetime] = None

    model_config = {"extra": "ignore"}


class UserCreate(BaseModel):
    """Registration request"""
    name: str = ""
    email: str = ""
    password: str = ""
    referral_code: Optional[str] = Field(default=None, alias="referralCode")

    model_config = {"extra": "ignore", "populate_by_name": True}


class UserLogin(BaseModel):
    """Login request"""
    email: str = ""
    password: str = ""


class UserResponse(BaseModel):
    """Safe user response (no password hash)"""
    id: str
    name: str
    email: str
    plan: str


class TokenResponse(BaseModel):
    """Auth response with token and current balance"""
    success: bool = True
    user: UserResponse
    credits: int
    token: str
