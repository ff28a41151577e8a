"""Briefly Brief Store

Persistence for generated briefs behind a pluggable interface.

- InMemoryBriefStore: process-local list, for tests and local runs
- MongoBriefStore: `briefly_briefs` collection via motor

append() failures surface as StoreError so the gateway can refund.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from briefly.errors import StoreError
from briefly.models.brief import Brief

logger = logging.getLogger(__name__)

BRIEFS_COLLECTION = "briefly_briefs"


class BriefStore(ABC):
    """Abstract base class for brief persistence."""

    @abstractmethod
    async def append(self, brief: Brief) -> None:
        """Durably store a brief. Raises StoreError on failure."""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[Brief]:
        """All briefs owned by a user, newest first."""
        pass

    @abstractmethod
    async def get(self, user_id: str, brief_id: str) -> Optional[Brief]:
        """A single brief, only if owned by user_id."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class InMemoryBriefStore(BriefStore):
    """List-backed store."""

    def __init__(self):
        self._briefs: List[Brief] = []

    async def append(self, brief: Brief) -> None:
        self._briefs.append(brief)

    async def list_by_user(self, user_id: str) -> List[Brief]:
        owned = [b for b in self._briefs if b.user_id == user_id]
        return sorted(reversed(owned), key=lambda b: b.created_at, reverse=True)

    async def get(self, user_id: str, brief_id: str) -> Optional[Brief]:
        return next(
            (b for b in self._briefs if b.brief_id == brief_id and b.user_id == user_id),
            None,
        )

    async def count(self) -> int:
        return len(self._briefs)


class MongoBriefStore(BriefStore):
    """MongoDB-backed store."""

    def __init__(self, db):
        self.db = db

    async def append(self, brief: Brief) -> None:
        try:
            await self.db[BRIEFS_COLLECTION].insert_one(brief.model_dump())
        except PyMongoError as e:
            logger.error(f"Failed to store brief {brief.brief_id}: {e}")
            raise StoreError(f"Brief storage unavailable: {e}") from e

    async def list_by_user(self, user_id: str) -> List[Brief]:
        try:
            cursor = self.db[BRIEFS_COLLECTION].find(
                {"user_id": user_id},
                {"_id": 0},
            ).sort("created_at", DESCENDING)
            return [Brief(**doc) async for doc in cursor]
        except PyMongoError as e:
            raise StoreError(f"Brief storage unavailable: {e}") from e

    async def get(self, user_id: str, brief_id: str) -> Optional[Brief]:
        try:
            doc = await self.db[BRIEFS_COLLECTION].find_one(
                {"brief_id": brief_id, "user_id": user_id},
                {"_id": 0},
            )
        except PyMongoError as e:
            raise StoreError(f"Brief storage unavailable: {e}") from e
        if doc:
            return Brief(**doc)
        return None

    async def count(self) -> int:
        return await self.db[BRIEFS_COLLECTION].count_documents({})
