"""Briefly Brief Routes

Endpoints:
- GET /api/briefs/categories - Project categories with defaults
- POST /api/briefs/generate - Generate a brief (costs 1 credit)
- GET /api/user/briefs - Current user's briefs
- GET /api/user/briefs/{brief_id} - Brief details
"""

from fastapi import APIRouter, Body, Depends, HTTPException
from typing import Any, Dict
import logging

from briefly.container import BrieflyServices
from briefly.models.brief import BriefListItem
from briefly.routes.auth import get_current_user_id, get_services
from briefly.services import category_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/briefs", tags=["Briefly Briefs"])
user_router = APIRouter(prefix="/api/user/briefs", tags=["Briefly Briefs"])


@router.get("/categories")
async def get_categories():
    """Project categories with their default timeline and budget.

    No auth required.
    """
    return {"success": True, "categories": category_catalog.list_categories()}


@router.post("/generate")
async def generate_brief(
    body: Dict[str, Any] = Body(...),
    user_id: str = Depends(get_current_user_id),
    services: BrieflyServices = Depends(get_services),
):
    """Generate a brief from intake form data.

    Accepts {"formData": {...}} or the intake fields at the top level.
    Briefly errors (insufficient credit, invalid intake, failures) are
    rendered by the application error handler.
    """
    intake = body.get("formData", body)
    result = await services.gateway.generate_brief(user_id, intake)
    return {
        "success": True,
        "data": result.brief.model_dump(mode="json"),
        "creditsRemaining": result.credits_remaining,
    }


@user_router.get("")
async def list_briefs(
    user_id: str = Depends(get_current_user_id),
    services: BrieflyServices = Depends(get_services),
):
    """List the user's briefs, newest first."""
    briefs = await services.gateway.list_briefs(user_id)
    return {
        "success": True,
        "briefs": [
            BriefListItem(
                brief_id=b.brief_id,
                title=b.title,
                category=b.category,
                created_at=b.created_at,
            ).model_dump(mode="json")
            for b in briefs
        ],
    }


@user_router.get("/{brief_id}")
async def get_brief(
    brief_id: str,
    user_id: str = Depends(get_current_user_id),
    services: BrieflyServices = Depends(get_services),
):
    """Get a single brief."""
    brief = await services.gateway.get_brief(user_id, brief_id)
    if not brief:
        raise HTTPException(status_code=404, detail="Brief not found")
    return {"success": True, "data": brief.model_dump(mode="json")}
