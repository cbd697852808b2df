"""
Token Repository

Data access layer for the per-user token balance.
"""

from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from account_store.models.user_token import UserToken
from account_store.repositories.base import BaseRepository

# Balance every new account starts with
STARTING_TOKEN_BALANCE = 50


class TokenRepository(BaseRepository[UserToken]):
    """Repository for UserToken model."""

    def __init__(self, db: AsyncSession):
        super().__init__(UserToken, db)

    async def get_for_user(self, user_id: str) -> Optional[UserToken]:
        result = await self.db.execute(
            select(UserToken).where(UserToken.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def create_account(self, user_id: str) -> UserToken:
        """
        Open the token account of a new user.

        The account shares the user's id and starts with the signup
        balance, counted as purchased.
        """
        return await self.create(
            id=user_id,
            user_id=user_id,
            tokens_available=STARTING_TOKEN_BALANCE,
            tokens_used=0,
            total_purchased=STARTING_TOKEN_BALANCE,
        )

    async def debit(self, user_id: str, tokens: int) -> int:
        """
        Move tokens from available to used.

        The balance check is part of the UPDATE, so the row is only
        changed when enough tokens remain.

        Returns:
            Number of rows updated (0 if the balance is too low or the account is missing)
        """
        result = await self.db.execute(
            update(UserToken)
            .where(
                UserToken.user_id == user_id,
                UserToken.tokens_available >= tokens,
            )
            .values(
                tokens_available=UserToken.tokens_available - tokens,
                tokens_used=UserToken.tokens_used + tokens,
                updated_at=func.current_timestamp(),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def credit(self, user_id: str, tokens: int) -> int:
        """Add purchased tokens to the balance."""
        result = await self.db.execute(
            update(UserToken)
            .where(UserToken.user_id == user_id)
            .values(
                tokens_available=UserToken.tokens_available + tokens,
                total_purchased=UserToken.total_purchased + tokens,
                updated_at=func.current_timestamp(),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
