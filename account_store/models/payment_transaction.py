"""
Payment Transaction Model

Append-only record of a token purchase.
"""

from sqlalchemy import REAL, Column, ForeignKey, Integer, Text
from .base import BaseModel

PAYMENT_STATUS_COMPLETED = "completed"


class PaymentTransaction(BaseModel):
    __tablename__ = "payment_transactions"

    user_id = Column(Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    amount = Column(REAL, nullable=False)
    tokens_purchased = Column(Integer, nullable=False)
    payment_method = Column(Text)
    status = Column(Text, server_default=PAYMENT_STATUS_COMPLETED)
