"""Briefly service wiring.

Services are constructed once at application start and handed to routes
through app.state, so tests can build an isolated in-memory set.
"""

from dataclasses import dataclass
import logging

from briefly.services.brief_composer import BriefComposer
from briefly.services.brief_store import BriefStore, InMemoryBriefStore, MongoBriefStore
from briefly.services.briefly_auth import BrieflyAuthService
from briefly.services.credit_ledger import CreditLedger, InMemoryCreditLedger, MongoCreditLedger
from briefly.services.generation_service import GenerationGateway
from briefly.services.user_store import InMemoryUserStore, MongoUserStore, UserStore

logger = logging.getLogger(__name__)

STORAGE_MEMORY = "memory"
STORAGE_MONGO = "mongo"


@dataclass
class BrieflyServices:
    storage: str
    ledger: CreditLedger
    briefs: BriefStore
    users: UserStore
    auth: BrieflyAuthService
    gateway: GenerationGateway


def _assemble(storage: str, ledger: CreditLedger, briefs: BriefStore, users: UserStore) -> BrieflyServices:
    auth = BrieflyAuthService(users=users, ledger=ledger)
    gateway = GenerationGateway(
        ledger=ledger,
        store=briefs,
        composer=BriefComposer(),
        identity=auth,
    )
    logger.info(f"Briefly services ready (storage={storage})")
    return BrieflyServices(
        storage=storage,
        ledger=ledger,
        briefs=briefs,
        users=users,
        auth=auth,
        gateway=gateway,
    )


def build_memory_services() -> BrieflyServices:
    return _assemble(STORAGE_MEMORY, InMemoryCreditLedger(), InMemoryBriefStore(), InMemoryUserStore())


def build_mongo_services(db) -> BrieflyServices:
    return _assemble(STORAGE_MONGO, MongoCreditLedger(db), MongoBriefStore(db), MongoUserStore(db))
