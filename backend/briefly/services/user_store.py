"""Briefly User Store

Account records for the identity collaborator. Email is unique
(stored lower-cased).
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Optional

from briefly.models.user import BrieflyUser

USERS_COLLECTION = "briefly_users"


class UserStore(ABC):

    @abstractmethod
    async def insert(self, user: BrieflyUser) -> None:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[BrieflyUser]:
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[BrieflyUser]:
        pass

    @abstractmethod
    async def touch_login(self, user_id: str, when: datetime) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class InMemoryUserStore(UserStore):

    def __init__(self):
        self._users: Dict[str, BrieflyUser] = {}

    async def insert(self, user: BrieflyUser) -> None:
        self._users[user.user_id] = user

    async def find_by_email(self, email: str) -> Optional[BrieflyUser]:
        return next((u for u in self._users.values() if u.email == email), None)

    async def find_by_id(self, user_id: str) -> Optional[BrieflyUser]:
        return self._users.get(user_id)

    async def touch_login(self, user_id: str, when: datetime) -> None:
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(update={"last_login_at": when})

    async def count(self) -> int:
        return len(self._users)


class MongoUserStore(UserStore):

    def __init__(self, db):
        self.db = db

    async def insert(self, user: BrieflyUser) -> None:
        await self.db[USERS_COLLECTION].insert_one(user.model_dump())

    async def find_by_email(self, email: str) -> Optional[BrieflyUser]:
        doc = await self.db[USERS_COLLECTION].find_one({"email": email}, {"_id": 0})
        return BrieflyUser(**doc) if doc else None

    async def find_by_id(self, user_id: str) -> Optional[BrieflyUser]:
        doc = await self.db[USERS_COLLECTION].find_one({"user_id": user_id}, {"_id": 0})
        return BrieflyUser(**doc) if doc else None

    async def touch_login(self, user_id: str, when: datetime) -> None:
        await self.db[USERS_COLLECTION].update_one(
            {"user_id": user_id},
            {"$set": {"last_login_at": when}},
        )

    async def count(self) -> int:
        return await self.db[USERS_COLLECTION].count_documents({})
