"""Briefly Data Models"""

from .intake import ProjectIntake
from .catalog import (
    ProjectCategory,
    PersonalityBucket,
    ProjectPhase,
    CategoryTemplate,
    resolve_personality,
)
from .brief import (
    Brief,
    BriefSections,
    BriefListItem,
    BudgetLine,
    PalettePick,
    TypographyPick,
)
from .credits import (
    CreditAccount,
    CreditTransaction,
    CreditTransactionType,
    GENERATION_CREDIT_COST,
    REFERRAL_BONUS_CREDITS,
    WELCOME_CREDITS,
)
from .user import (
    BrieflyUser,
    UserCreate,
    UserLogin,
    UserResponse,
    TokenResponse,
)

__all__ = [
    # Intake
    "ProjectIntake",
    # Catalog
    "ProjectCategory",
    "PersonalityBucket",
    "ProjectPhase",
    "CategoryTemplate",
    "resolve_personality",
    # Brief
    "Brief",
    "BriefSections",
    "BriefListItem",
    "BudgetLine",
    "PalettePick",
    "TypographyPick",
    # Credits
    "CreditAccount",
    "CreditTransaction",
    "CreditTransactionType",
    "GENERATION_CREDIT_COST",
    "REFERRAL_BONUS_CREDITS",
    "WELCOME_CREDITS",
    # User
    "BrieflyUser",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "TokenResponse",
]
