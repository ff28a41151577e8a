"""Briefly Credit Models

Credit scope:
- Integer balance per user (absence means zero, never negative)
- Debit of 1 credit per brief generation
- Refund when generation fails after the debit
- Welcome grant at registration (+ referral bonus)

Explicitly excluded:
- Payments (top-ups are plain grants)
- Credit expiry
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone
from enum import Enum
import uuid


class CreditTransactionType(str, Enum):
    """Types of credit transactions"""
    # Additions
    REGISTRATION_GRANT = "REGISTRATION_GRANT"  # Welcome credits
    REFERRAL_BONUS = "REFERRAL_BONUS"          # Signed up with a referral code
    GRANT = "GRANT"                            # Manual / promotional grant
    REFUND = "REFUND"                          # Credits returned after a failed generation

    # Deductions
    GENERATION = "GENERATION"                  # Used for brief generation


class CreditTransaction(BaseModel):
    """Individual credit movement.

    Every ledger operation is recorded for audit.
    """
    transaction_id: str = Field(default_factory=lambda: f"CTX-{uuid.uuid4().hex[:12].upper()}")
    user_id: str

    transaction_type: CreditTransactionType
    amount: int  # Positive for additions, negative for deductions
    balance_after: int

    reason: str
    reference_id: Optional[str] = None  # e.g. brief_id

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"extra": "ignore"}


class CreditAccount(BaseModel):
    """Balance snapshot for a user"""
    user_id: str
    balance: int = Field(default=0, ge=0)
    updated_at: Optional[datetime] = None

    model_config = {"extra": "ignore"}


# Credits granted on registration
WELCOME_CREDITS = 5

# Extra credits when a (non-blank) referral code is supplied
REFERRAL_BONUS_CREDITS = 5

# Credits consumed by one brief generation
GENERATION_CREDIT_COST = 1
