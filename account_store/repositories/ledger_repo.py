"""
Ledger Repositories

Append-only usage logs and payment records. Neither repository
offers update or delete; rows disappear only when the owning user
is deleted and the database cascade removes them.
"""

import uuid
from typing import List

from sqlalchemy import literal_column, select
from sqlalchemy.ext.asyncio import AsyncSession

from account_store.models.payment_transaction import PaymentTransaction
from account_store.models.token_usage_log import TokenUsageLog
from account_store.repositories.base import BaseRepository
from account_store.schemas.ledger import PaymentCreate, TokenUsageCreate


class TokenUsageLogRepository(BaseRepository[TokenUsageLog]):
    """Repository for TokenUsageLog model."""

    def __init__(self, db: AsyncSession):
        super().__init__(TokenUsageLog, db)

    async def append(self, usage: TokenUsageCreate) -> TokenUsageLog:
        return await self.create(id=str(uuid.uuid4()), **usage.model_dump())

    async def get_all_for_user(
        self,
        user_id: str,
        skip: int = 0,
        limit: int = 100
    ) -> List[TokenUsageLog]:
        """
        Get usage logs for a user, newest first.

        Args:
            user_id: The owner's user ID
            skip: Number of records to skip (pagination)
            limit: Maximum number of records to return
        """
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), literal_column("rowid").desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())


class PaymentRepository(BaseRepository[PaymentTransaction]):
    """Repository for PaymentTransaction model."""

    def __init__(self, db: AsyncSession):
        super().__init__(PaymentTransaction, db)

    async def append(self, payment: PaymentCreate) -> PaymentTransaction:
        return await self.create(id=str(uuid.uuid4()), **payment.model_dump())

    async def get_all_for_user(
        self,
        user_id: str,
        skip: int = 0,
        limit: int = 100
    ) -> List[PaymentTransaction]:
        """Get payments for a user, newest first."""
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), literal_column("rowid").desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
