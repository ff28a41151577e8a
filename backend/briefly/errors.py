"""Briefly error taxonomy.

Services raise these; routes translate them into HTTP responses.
Failures raised after a successful debit are refunded by the generation
gateway before they reach the caller.
"""

from typing import List, Optional


class BrieflyError(Exception):
    """Base exception for Briefly operations."""
    error_code = "BRIEFLY_ERROR"
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class Unauthorized(BrieflyError):
    """Missing or invalid credentials."""
    error_code = "UNAUTHORIZED"
    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InsufficientCredit(BrieflyError):
    """Balance is lower than the amount required."""
    error_code = "INSUFFICIENT_CREDIT"
    status_code = 402

    def __init__(self, user_id: str, required: int, balance: int):
        self.user_id = user_id
        self.required = required
        self.balance = balance
        super().__init__(
            f"Insufficient credits. You need at least {required} credit"
            f"{'s' if required != 1 else ''} to generate a brief."
        )


class InvalidIntake(BrieflyError):
    """Intake form is missing required fields or is malformed."""
    error_code = "INVALID_INTAKE"
    status_code = 400

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        self.fields = fields or []
        super().__init__(message)


class CompositionFailure(BrieflyError):
    """Internal fault while resolving templates or heuristics."""
    error_code = "COMPOSITION_FAILURE"


class StoreError(BrieflyError):
    """Persistence backend unavailable or write rejected."""
    error_code = "STORE_ERROR"
