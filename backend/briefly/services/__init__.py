"""Briefly Services"""

from .brief_composer import BriefComposer
from .brief_store import BriefStore, InMemoryBriefStore, MongoBriefStore
from .briefly_auth import BrieflyAuthService
from .credit_ledger import CreditLedger, InMemoryCreditLedger, MongoCreditLedger
from .generation_service import GenerationGateway, GenerationResult
from .user_store import UserStore, InMemoryUserStore, MongoUserStore

__all__ = [
    "BriefComposer",
    "BriefStore",
    "InMemoryBriefStore",
    "MongoBriefStore",
    "BrieflyAuthService",
    "CreditLedger",
    "InMemoryCreditLedger",
    "MongoCreditLedger",
    "GenerationGateway",
    "GenerationResult",
    "UserStore",
    "InMemoryUserStore",
    "MongoUserStore",
]
