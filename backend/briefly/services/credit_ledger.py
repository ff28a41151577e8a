"""Briefly Credit Ledger

Integer credit balance per user with atomic debit, refund and grant.

- Absence of an account means a balance of zero
- check_and_debit never takes a balance below zero
- Operations for one user are linearizable with each other
- Every movement is recorded as a CreditTransaction

Backends:
- InMemoryCreditLedger: per-user asyncio.Lock
- MongoCreditLedger: conditional find_one_and_update on the account document
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional
import asyncio
import logging

from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from briefly.errors import InsufficientCredit
from briefly.models.credits import CreditTransaction, CreditTransactionType

logger = logging.getLogger(__name__)

ACCOUNTS_COLLECTION = "briefly_credit_accounts"
TRANSACTIONS_COLLECTION = "briefly_credit_transactions"


def _require_positive(amount: int, operation: str) -> None:
    if amount <= 0:
        raise ValueError(f"Amount must be positive for {operation}")


class CreditLedger(ABC):
    """Credit balance store used by the generation gateway."""

    @abstractmethod
    async def get_balance(self, user_id: str) -> int:
        """Current balance; 0 for unknown users."""
        pass

    @abstractmethod
    async def check_and_debit(
        self,
        user_id: str,
        amount: int = 1,
        reason: str = "Brief generation",
        reference_id: Optional[str] = None,
    ) -> int:
        """Atomically subtract amount and return the new balance.

        Raises InsufficientCredit (balance unchanged) when balance < amount.
        """
        pass

    @abstractmethod
    async def _credit(
        self,
        user_id: str,
        amount: int,
        transaction_type: CreditTransactionType,
        reason: str,
        reference_id: Optional[str],
    ) -> int:
        pass

    @abstractmethod
    async def get_transactions(self, user_id: str, limit: int = 50) -> List[CreditTransaction]:
        """Newest-first transaction history."""
        pass

    async def grant(
        self,
        user_id: str,
        amount: int,
        reason: str,
        transaction_type: CreditTransactionType = CreditTransactionType.GRANT,
        reference_id: Optional[str] = None,
    ) -> int:
        """Add credits; returns the new balance."""
        _require_positive(amount, "grant")
        balance = await self._credit(user_id, amount, transaction_type, reason, reference_id)
        logger.info(f"Granted {amount} credits to user {user_id} ({reason}). New balance: {balance}")
        return balance

    async def refund(
        self,
        user_id: str,
        amount: int,
        reason: str = "Refund for failed generation",
        reference_id: Optional[str] = None,
    ) -> int:
        """Return credits taken by a debit whose generation failed."""
        _require_positive(amount, "refund")
        balance = await self._credit(user_id, amount, CreditTransactionType.REFUND, reason, reference_id)
        logger.info(f"Refunded {amount} credits to user {user_id}. New balance: {balance}")
        return balance


class InMemoryCreditLedger(CreditLedger):
    """Process-local ledger for tests and single-instance deployments."""

    def __init__(self):
        self._balances: Dict[str, int] = {}
        self._transactions: List[CreditTransaction] = []
        self._locks: Dict[str, asyncio.Lock] = {}

    def _lock_for(self, user_id: str) -> asyncio.Lock:
        return self._locks.setdefault(user_id, asyncio.Lock())

    def _record(self, user_id, transaction_type, amount, balance_after, reason, reference_id):
        self._transactions.append(CreditTransaction(
            user_id=user_id,
            transaction_type=transaction_type,
            amount=amount,
            balance_after=balance_after,
            reason=reason,
            reference_id=reference_id,
        ))

    async def get_balance(self, user_id: str) -> int:
        return self._balances.get(user_id, 0)

    async def check_and_debit(
        self,
        user_id: str,
        amount: int = 1,
        reason: str = "Brief generation",
        reference_id: Optional[str] = None,
    ) -> int:
        _require_positive(amount, "debit")
        async with self._lock_for(user_id):
            balance = self._balances.get(user_id, 0)
            if balance < amount:
                logger.warning(f"Insufficient credits for user {user_id}. Has {balance}, needs {amount}")
                raise InsufficientCredit(user_id, required=amount, balance=balance)

            new_balance = balance - amount
            self._balances[user_id] = new_balance
            self._record(user_id, CreditTransactionType.GENERATION, -amount, new_balance, reason, reference_id)

        logger.info(f"Deducted {amount} credits from user {user_id}. New balance: {new_balance}")
        return new_balance

    async def _credit(self, user_id, amount, transaction_type, reason, reference_id) -> int:
        async with self._lock_for(user_id):
            new_balance = self._balances.get(user_id, 0) + amount
            self._balances[user_id] = new_balance
            self._record(user_id, transaction_type, amount, new_balance, reason, reference_id)
        return new_balance

    async def get_transactions(self, user_id: str, limit: int = 50) -> List[CreditTransaction]:
        history = [t for t in self._transactions if t.user_id == user_id]
        return list(reversed(history))[:limit]


class MongoCreditLedger(CreditLedger):
    """MongoDB-backed ledger.

    Account documents: {user_id, balance, updated_at}. The debit filter
    requires balance >= amount, so the check and the subtraction are a single
    atomic server-side operation.
    """

    def __init__(self, db):
        self.db = db

    async def _record(self, user_id, transaction_type, amount, balance_after, reason, reference_id):
        """Append the audit row for a balance change that has already been applied.

        The account document is the source of truth, so a failed insert is logged
        and does not undo or hide the balance change.
        """
        transaction = CreditTransaction(
            user_id=user_id,
            transaction_type=transaction_type,
            amount=amount,
            balance_after=balance_after,
            reason=reason,
            reference_id=reference_id,
        )
        try:
            await self.db[TRANSACTIONS_COLLECTION].insert_one(transaction.model_dump())
        except PyMongoError as e:
            logger.error(
                f"Failed to record {transaction_type.value} of {amount} for user {user_id} "
                f"(balance now {balance_after}): {e}"
            )

    async def get_balance(self, user_id: str) -> int:
        account = await self.db[ACCOUNTS_COLLECTION].find_one({"user_id": user_id}, {"_id": 0})
        if not account:
            return 0
        return account.get("balance", 0)

    async def check_and_debit(
        self,
        user_id: str,
        amount: int = 1,
        reason: str = "Brief generation",
        reference_id: Optional[str] = None,
    ) -> int:
        _require_positive(amount, "debit")
        account = await self.db[ACCOUNTS_COLLECTION].find_one_and_update(
            {"user_id": user_id, "balance": {"$gte": amount}},
            {
                "$inc": {"balance": -amount},
                "$set": {"updated_at": datetime.now(timezone.utc)},
            },
            projection={"_id": 0},
            return_document=ReturnDocument.AFTER,
        )
        if account is None:
            balance = await self.get_balance(user_id)
            logger.warning(f"Insufficient credits for user {user_id}. Has {balance}, needs {amount}")
            raise InsufficientCredit(user_id, required=amount, balance=balance)

        new_balance = account["balance"]
        await self._record(user_id, CreditTransactionType.GENERATION, -amount, new_balance, reason, reference_id)

        logger.info(f"Deducted {amount} credits from user {user_id}. New balance: {new_balance}")
        return new_balance

    async def _credit(self, user_id, amount, transaction_type, reason, reference_id) -> int:
        account = await self.db[ACCOUNTS_COLLECTION].find_one_and_update(
            {"user_id": user_id},
            {
                "$inc": {"balance": amount},
                "$set": {"updated_at": datetime.now(timezone.utc)},
            },
            projection={"_id": 0},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        new_balance = account["balance"]
        await self._record(user_id, transaction_type, amount, new_balance, reason, reference_id)
        return new_balance

    async def get_transactions(self, user_id: str, limit: int = 50) -> List[CreditTransaction]:
        cursor = self.db[TRANSACTIONS_COLLECTION].find(
            {"user_id": user_id},
            {"_id": 0},
        ).sort("created_at", DESCENDING).limit(limit)
        return [CreditTransaction(**doc) async for doc in cursor]
