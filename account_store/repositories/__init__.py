from account_store.repositories.base import BaseRepository
from account_store.repositories.user_repo import UserRepository
from account_store.repositories.token_repo import TokenRepository, STARTING_TOKEN_BALANCE
from account_store.repositories.ledger_repo import TokenUsageLogRepository, PaymentRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "TokenRepository",
    "TokenUsageLogRepository",
    "PaymentRepository",
    "STARTING_TOKEN_BALANCE",
]
