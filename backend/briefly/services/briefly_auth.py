"""Briefly Authentication Service

Registration, login and bearer-token resolution. This is the identity
collaborator of the generation gateway: it only has to turn request
credentials into a stable user id.

New accounts get WELCOME_CREDITS, plus REFERRAL_BONUS_CREDITS when a
non-blank referral code is supplied. Referral codes are not validated.
"""

from datetime import datetime, timezone
from typing import Optional
import logging

from auth import (
    create_access_token,
    decode_access_token,
    extract_bearer_token,
    hash_password,
    validate_registration,
    verify_password,
)
from briefly.errors import Unauthorized
from briefly.models.credits import (
    CreditTransactionType,
    REFERRAL_BONUS_CREDITS,
    WELCOME_CREDITS,
)
from briefly.models.user import (
    BrieflyUser,
    TokenResponse,
    UserCreate,
    UserLogin,
    UserResponse,
)
from briefly.services.credit_ledger import CreditLedger
from briefly.services.user_store import UserStore

logger = logging.getLogger(__name__)

TOKEN_PRODUCT = "briefly"


class BrieflyAuthService:
    """Authentication service for Briefly users."""

    def __init__(self, users: UserStore, ledger: CreditLedger):
        self.users = users
        self.ledger = ledger

    async def register(self, data: UserCreate) -> TokenResponse:
        """Register a new user, grant starting credits and log them in."""
        is_valid, message = validate_registration(data.name, data.email, data.password)
        if not is_valid:
            raise ValueError(message)

        email = data.email.strip().lower()
        if await self.users.find_by_email(email):
            logger.info(f"User already exists: {email}")
            raise ValueError("User already exists with this email")

        user = BrieflyUser(
            name=data.name.strip(),
            email=email,
            password_hash=hash_password(data.password),
            referral_code=data.referral_code,
        )
        # Grants land before the user record; a failed grant leaves no account
        credits = await self.ledger.grant(
            user.user_id,
            WELCOME_CREDITS,
            reason=f"Welcome bonus: {WELCOME_CREDITS} free credits to get started",
            transaction_type=CreditTransactionType.REGISTRATION_GRANT,
            reference_id=user.user_id,
        )
        if data.referral_code and data.referral_code.strip():
            credits = await self.ledger.grant(
                user.user_id,
                REFERRAL_BONUS_CREDITS,
                reason=f"Referral bonus: {REFERRAL_BONUS_CREDITS} credits",
                transaction_type=CreditTransactionType.REFERRAL_BONUS,
                reference_id=data.referral_code.strip(),
            )

        await self.users.insert(user)

        logger.info(f"User registered: {email} with {credits} credits")
        return self._token_response(user, credits)

    async def login(self, data: UserLogin) -> TokenResponse:
        """Authenticate user and return token."""
        if not data.email or not data.password:
            raise ValueError("Email and password are required")

        user = await self.users.find_by_email(data.email.strip().lower())
        if not user or not verify_password(data.password, user.password_hash):
            logger.info(f"Invalid credentials: {data.email}")
            raise ValueError("Invalid email or password")

        await self.users.touch_login(user.user_id, datetime.now(timezone.utc))
        credits = await self.ledger.get_balance(user.user_id)

        logger.info(f"User logged in: {user.email} with {credits} credits")
        return self._token_response(user, credits)

    def resolve_user_id(self, authorization: Optional[str]) -> str:
        """User id from an Authorization header, or Unauthorized."""
        token = extract_bearer_token(authorization)
        if not token:
            raise Unauthorized("Authentication required")

        payload = decode_access_token(token)
        if not payload or payload.get("product") != TOKEN_PRODUCT or not payload.get("sub"):
            raise Unauthorized("Invalid or expired token")

        return payload["sub"]

    def _token_response(self, user: BrieflyUser, credits: int) -> TokenResponse:
        token = create_access_token({
            "sub": user.user_id,
            "email": user.email,
            "product": TOKEN_PRODUCT,
        })
        return TokenResponse(
            user=UserResponse(id=user.user_id, name=user.name, email=user.email, plan=user.plan),
            credits=credits,
            token=token,
        )
