from typing import Optional

from pydantic import BaseModel, Field


# ============================================================
# Request Schemas (What callers pass to the store)
# ============================================================

class UserCreate(BaseModel):
    """Data for creating a user. The password must already be hashed."""

    id: str = Field(..., min_length=1, description="Opaque user key chosen by the caller")
    email: str = Field(..., min_length=1, description="Stored and matched exactly as given")
    password: str = Field(..., min_length=1, description="Pre-hashed password")
    name: Optional[str] = None
    verified: bool = False

    class Config:
        json_schema_extra = {
            "example": {
                "id": "7f6c1a52-3c8e-4b59-9f0a-2f1d6b8e4c21",
                "email": "student@example.com",
                "password": "$2b$12$KIXQJ2p0s5n3b1q9Yh6bUe",
                "name": "Ada Student",
                "verified": False,
            }
        }
