from sqlalchemy import Column, ForeignKey, Integer, Text
from .base import BaseModel


class TokenUsageLog(BaseModel):
    __tablename__ = "token_usage_logs"

    user_id = Column(Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    action_type = Column(Text, nullable=False)
    tokens_used = Column(Integer, nullable=False)
    description = Column(Text)

    # What the tokens were spent on
    exam_type = Column(Text)
    subject = Column(Text)
    topic = Column(Text)
