"""
User Repository

Data access layer for User model.
All user-related database operations.
"""

from typing import Any, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from account_store.models import User
from account_store.repositories.base import BaseRepository
from account_store.schemas.user import UserCreate


class UserRepository(BaseRepository[User]):
    """Repository for User model."""

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    # =================
    # Get by email
    # =================
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address."""
        result = await self.db.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    # =================
    # Email taken?
    # =================
    async def email_exists(self, email: str) -> bool:
        result = await self.db.execute(
            select(User.id).where(User.email == email)
        )
        return result.first() is not None

    # =================
    # Create user
    # =================
    async def create_user(self, user_data: UserCreate) -> User:
        """Insert a user row. Booleans are stored as 1/0."""
        return await self.create(
            id=user_data.id,
            email=user_data.email,
            password=user_data.password,
            name=user_data.name,
            verified=1 if user_data.verified else 0,
        )

    # =================
    # Onboarding
    # =================
    async def mark_onboarded(self, user_id: Any, exam_data: str) -> int:
        """
        Store exam data and flag onboarding as complete.

        Returns:
            Number of rows updated (0 when the user does not exist)
        """
        result = await self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(
                exam_data=exam_data,
                onboarding_completed=1,
                updated_at=func.current_timestamp(),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
