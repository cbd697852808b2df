from account_store.models.base import Base
from account_store.models.user import User
from account_store.models.user_token import UserToken
from account_store.models.token_usage_log import TokenUsageLog
from account_store.models.payment_transaction import PaymentTransaction, PAYMENT_STATUS_COMPLETED

__all__ = [
    "Base",
    "User",
    "UserToken",
    "TokenUsageLog",
    "PaymentTransaction",
    "PAYMENT_STATUS_COMPLETED",
]
