"""Briefly Routes"""

from .auth import router as auth_router
from .briefs import router as briefs_router
from .briefs import user_router as user_briefs_router
from .credits import router as credits_router

__all__ = [
    "auth_router",
    "briefs_router",
    "user_briefs_router",
    "credits_router",
]
