"""Briefly Authentication Routes

Endpoints:
- POST /api/auth/register - Register new user (5 credits, +5 with referral code)
- POST /api/auth/login - User login
"""

from fastapi import APIRouter, HTTPException, Depends, Header, Request
from typing import Optional
import logging

from briefly.container import BrieflyServices
from briefly.errors import Unauthorized
from briefly.models.user import TokenResponse, UserCreate, UserLogin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Briefly Auth"])


def get_services(request: Request) -> BrieflyServices:
    """Dependency returning the service container built at startup."""
    return request.app.state.briefly


async def get_current_user_id(
    authorization: Optional[str] = Header(None),
    services: BrieflyServices = Depends(get_services),
) -> str:
    """Dependency to get the caller's user id from a bearer token."""
    try:
        return services.auth.resolve_user_id(authorization)
    except Unauthorized as e:
        logger.info(f"Rejected request: {e.message}")
        raise HTTPException(status_code=401, detail=e.message)


@router.post("/register", response_model=TokenResponse)
async def register(data: UserCreate, services: BrieflyServices = Depends(get_services)):
    """Register a new user.

    Returns auth token, user info and starting credit balance.
    """
    logger.info(f"Registration attempt: {data.email}")
    try:
        return await services.auth.register(data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/login", response_model=TokenResponse)
async def login(data: UserLogin, services: BrieflyServices = Depends(get_services)):
    """Login to Briefly."""
    logger.info(f"Login attempt: {data.email}")
    try:
        return await services.auth.login(data)
    except ValueError as e:
        raise HTTPException(status_code=401, detail=str(e))
