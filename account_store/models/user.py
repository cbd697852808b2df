from sqlalchemy import Column, DateTime, Integer, Text, func, text
from .base import BaseModel


class User(BaseModel):
    __tablename__ = "users"

    email = Column(Text, unique=True, nullable=False)
    password = Column(Text, nullable=False)  # hashed by the caller
    name = Column(Text)
    verified = Column(Integer, server_default=text("0"))
    exam_data = Column(Text)  # JSON text written at onboarding
    onboarding_completed = Column(Integer, server_default=text("0"))
    updated_at = Column(DateTime, server_default=func.current_timestamp())

    # Integer flags as booleans
    @property
    def is_verified(self) -> bool:
        return bool(self.verified)

    @property
    def is_onboarded(self) -> bool:
        return bool(self.onboarding_completed)
