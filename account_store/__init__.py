"""
Account persistence for the exam-prep backend: users, token
balances, usage logs and payments in one SQLite database.
"""

from account_store.core.config import Settings, configure_logging, settings
from account_store.core.exceptions import (
    InsufficientTokensError,
    NotInitializedError,
    RequiredFieldMissingError,
    StoreError,
    TokenAccountNotFoundError,
    UserAlreadyExistsError,
)
from account_store.models import PaymentTransaction, TokenUsageLog, User, UserToken
from account_store.repositories import STARTING_TOKEN_BALANCE
from account_store.schemas.user import UserCreate
from account_store.store import Store

__all__ = [
    "Store",
    "Settings",
    "settings",
    "configure_logging",
    "StoreError",
    "NotInitializedError",
    "UserAlreadyExistsError",
    "RequiredFieldMissingError",
    "TokenAccountNotFoundError",
    "InsufficientTokensError",
    "User",
    "UserToken",
    "TokenUsageLog",
    "PaymentTransaction",
    "UserCreate",
    "STARTING_TOKEN_BALANCE",
]
