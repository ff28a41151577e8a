"""Briefly Credit Routes

Endpoints:
- GET /api/user/credits - Current balance
- GET /api/user/credits/history - Transaction history
"""

from fastapi import APIRouter, Depends, Query
import logging

from briefly.container import BrieflyServices
from briefly.routes.auth import get_current_user_id, get_services

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user/credits", tags=["Briefly Credits"])


@router.get("")
async def get_credits(
    user_id: str = Depends(get_current_user_id),
    services: BrieflyServices = Depends(get_services),
):
    """Get simple credit balance."""
    credits = await services.gateway.get_balance(user_id)
    logger.info(f"Credits check for user {user_id}: {credits}")
    return {"success": True, "credits": credits}


@router.get("/history")
async def get_history(
    limit: int = Query(50, ge=1, le=100),
    user_id: str = Depends(get_current_user_id),
    services: BrieflyServices = Depends(get_services),
):
    """Get credit transaction history, newest first."""
    transactions = await services.ledger.get_transactions(user_id, limit=limit)
    return {
        "success": True,
        "transactions": [t.model_dump(mode="json") for t in transactions],
        "limit": limit,
    }
