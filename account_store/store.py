"""
Account Store

Persists user accounts, token balances, usage logs and payments in
one SQLite database file.

Usage:
    store = Store()
    await store.initialize()
    user = await store.find_user_by_email("student@example.com")
    await store.close_connections()

The store is constructed explicitly and passed to whoever needs it;
there is no module-level connection.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from account_store.core.config import settings
from account_store.core.exceptions import (
    InsufficientTokensError,
    NotInitializedError,
    RequiredFieldMissingError,
    TokenAccountNotFoundError,
    UserAlreadyExistsError,
)
from account_store.db.database import (
    check_db_connection,
    create_engine_for_path,
    create_session_factory,
)
from account_store.models import (
    PAYMENT_STATUS_COMPLETED,
    Base,
    PaymentTransaction,
    TokenUsageLog,
    User,
    UserToken,
)
from account_store.repositories import (
    PaymentRepository,
    TokenRepository,
    TokenUsageLogRepository,
    UserRepository,
)
from account_store.schemas.ledger import PaymentCreate, TokenUsageCreate
from account_store.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class Store:
    """
    Owner of the single database handle and entry point for all
    account operations.
    """

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        """
        Args:
            db_path: Database file. Defaults to Settings.DATABASE_PATH,
                then to database.sqlite beside the package.
        """
        self.db_path = Path(db_path) if db_path else settings.database_file
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    async def __aenter__(self) -> "Store":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close_connections()

    # ============================================================
    # Lifecycle
    # ============================================================
    async def initialize(self) -> bool:
        """
        Open (or create) the database file and make sure every table exists.

        Safe to call more than once.

        Raises:
            sqlalchemy.exc.OperationalError: If the file cannot be opened
                or a CREATE TABLE statement fails
        """
        try:
            if self._engine is None:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
                self._engine = create_engine_for_path(self.db_path)
                self._session_factory = create_session_factory(self._engine)

            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info(f"SQLite database connection established: {self.db_path}")
            logger.info("Database tables initialized")
            return True
        except Exception as e:
            logger.error(f"Database initialization failed: {e}")
            raise

    def get_connection(self) -> AsyncEngine:
        """
        Get the open database handle.

        Raises:
            NotInitializedError: If initialize() has not been called
        """
        if self._engine is None:
            raise NotInitializedError()
        return self._engine

    async def close_connections(self) -> None:
        """Release the database handle. Does nothing if it is not open."""
        if self._engine is None:
            return

        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connections closed")

    async def check_connection(self) -> bool:
        """Health check: True if the database answers, False otherwise."""
        if self._engine is None:
            return False
        return await check_db_connection(self._engine)

    def _session(self) -> AsyncSession:
        self.get_connection()
        return self._session_factory()

    # ============================================================
    # Users
    # ============================================================
    async def create_user(
        self,
        user_data: Union[UserCreate, Mapping[str, Any]]
    ) -> Union[UserCreate, Mapping[str, Any]]:
        """
        Create a user together with a token account holding the signup balance.

        The email check and both inserts run in one transaction, so a
        failure leaves neither row behind.

        Args:
            user_data: id, email, pre-hashed password, name, verified

        Returns:
            user_data exactly as passed in (not the stored row)

        Raises:
            UserAlreadyExistsError: If the email is already registered
            sqlalchemy.exc.IntegrityError: If a concurrent insert wins the race
        """
        if isinstance(user_data, UserCreate):
            payload = user_data
        else:
            payload = UserCreate.model_validate(user_data)

        async with self._session() as session:
            async with session.begin():
                user_repo = UserRepository(session)

                if await user_repo.email_exists(payload.email):
                    logger.warning(f"Rejected signup for existing email: {payload.email}")
                    raise UserAlreadyExistsError(payload.email)

                await user_repo.create_user(payload)
                await TokenRepository(session).create_account(payload.id)

        logger.info(f"Created user {payload.id}")
        return user_data

    async def find_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, or None."""
        async with self._session() as session:
            return await UserRepository(session).get_by_email(email)

    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID, or None."""
        async with self._session() as session:
            return await UserRepository(session).get_by_id(user_id)

    async def update_user_onboarding(
        self,
        user_id: Optional[str],
        exam_data: Optional[Dict[str, Any]] = None
    ) -> Optional[User]:
        """
        Save onboarding answers and mark onboarding as complete.

        Args:
            user_id: The user's ID
            exam_data: JSON-serializable onboarding answers; {} when empty

        Returns:
            The updated user row, or None if no such user exists

        Raises:
            RequiredFieldMissingError: If user_id is empty
        """
        if not user_id:
            raise RequiredFieldMissingError(
                "user_id", "User ID is required for onboarding update"
            )

        exam_data_text = json.dumps(exam_data, separators=(",", ":")) if exam_data else "{}"

        async with self._session() as session:
            user_repo = UserRepository(session)
            async with session.begin():
                updated = await user_repo.mark_onboarded(user_id, exam_data_text)

            if not updated:
                logger.warning(f"Onboarding update matched no user: {user_id}")
            return await user_repo.get_by_id(user_id)

    # ============================================================
    # Token ledger
    # ============================================================
    async def get_token_account(self, user_id: str) -> Optional[UserToken]:
        """Get the user's token balance row, or None."""
        async with self._session() as session:
            return await TokenRepository(session).get_for_user(user_id)

    async def record_token_usage(
        self,
        user_id: str,
        action_type: str,
        tokens_used: int,
        description: Optional[str] = None,
        exam_type: Optional[str] = None,
        subject: Optional[str] = None,
        topic: Optional[str] = None,
    ) -> TokenUsageLog:
        """
        Spend tokens and log what they were spent on.

        Raises:
            pydantic.ValidationError: If tokens_used is not positive
            TokenAccountNotFoundError: If the user has no token account
            InsufficientTokensError: If the balance is too low
        """
        usage = TokenUsageCreate(
            user_id=user_id,
            action_type=action_type,
            tokens_used=tokens_used,
            description=description,
            exam_type=exam_type,
            subject=subject,
            topic=topic,
        )

        async with self._session() as session:
            async with session.begin():
                token_repo = TokenRepository(session)
                account = await token_repo.get_for_user(usage.user_id)
                if account is None:
                    raise TokenAccountNotFoundError(usage.user_id)

                if not await token_repo.debit(usage.user_id, usage.tokens_used):
                    logger.warning(
                        f"User {usage.user_id} has {account.tokens_available} tokens, "
                        f"{usage.tokens_used} requested for {usage.action_type}"
                    )
                    raise InsufficientTokensError(
                        usage.user_id, usage.tokens_used, account.tokens_available
                    )

                log = await TokenUsageLogRepository(session).append(usage)

        logger.info(f"User {usage.user_id} spent {usage.tokens_used} tokens on {usage.action_type}")
        return log

    async def record_payment(
        self,
        user_id: str,
        amount: float,
        tokens_purchased: int,
        payment_method: Optional[str] = None,
        status: str = PAYMENT_STATUS_COMPLETED,
    ) -> PaymentTransaction:
        """
        Record a token purchase. Completed payments credit the balance.

        Raises:
            TokenAccountNotFoundError: If a completed payment has no account to credit
            sqlalchemy.exc.IntegrityError: If the user does not exist
        """
        payment = PaymentCreate(
            user_id=user_id,
            amount=amount,
            tokens_purchased=tokens_purchased,
            payment_method=payment_method,
            status=status,
        )

        async with self._session() as session:
            async with session.begin():
                transaction = await PaymentRepository(session).append(payment)

                if payment.status == PAYMENT_STATUS_COMPLETED:
                    credited = await TokenRepository(session).credit(
                        payment.user_id, payment.tokens_purchased
                    )
                    if not credited:
                        raise TokenAccountNotFoundError(payment.user_id)

        logger.info(
            f"Recorded {payment.status} payment of {payment.amount} "
            f"for {payment.tokens_purchased} tokens by user {payment.user_id}"
        )
        return transaction

    async def get_usage_history(
        self,
        user_id: str,
        skip: int = 0,
        limit: int = 100
    ) -> List[TokenUsageLog]:
        """Usage logs for a user, newest first."""
        async with self._session() as session:
            return await TokenUsageLogRepository(session).get_all_for_user(user_id, skip, limit)

    async def get_payment_history(
        self,
        user_id: str,
        skip: int = 0,
        limit: int = 100
    ) -> List[PaymentTransaction]:
        """Payments for a user, newest first."""
        async with self._session() as session:
            return await PaymentRepository(session).get_all_for_user(user_id, skip, limit)
