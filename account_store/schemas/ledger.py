from typing import Optional

from pydantic import BaseModel, Field


# ============================================================
# Request Schemas (What callers pass to the store)
# ============================================================

class TokenUsageCreate(BaseModel):
    """A debit against a user's token balance."""

    user_id: str = Field(..., min_length=1)
    action_type: str = Field(..., min_length=1, description="e.g. quiz_generation, chat")
    tokens_used: int = Field(..., gt=0)
    description: Optional[str] = None
    exam_type: Optional[str] = None
    subject: Optional[str] = None
    topic: Optional[str] = None


class PaymentCreate(BaseModel):
    """A token purchase reported by the payment layer."""

    user_id: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    tokens_purchased: int = Field(..., gt=0)
    payment_method: Optional[str] = None
    status: str = "completed"
