"""
User Token Model

Token balance of one user. The row id is the owning user's id.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text, func, text
from .base import BaseModel


class UserToken(BaseModel):
    __tablename__ = "user_tokens"

    user_id = Column(Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    tokens_available = Column(Integer, server_default=text("50"))
    tokens_used = Column(Integer, server_default=text("0"))
    total_purchased = Column(Integer, server_default=text("50"))
    updated_at = Column(DateTime, server_default=func.current_timestamp())
