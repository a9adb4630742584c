"""AccountSettings model: at most one row per user."""

from datetime import datetime, timezone
from decimal import Decimal
from sqlmodel import SQLModel, Field


class AccountSettings(SQLModel, table=True):
    __tablename__ = "account_settings"

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", unique=True, index=True)
    starting_balance: Decimal = Field(max_digits=18, decimal_places=2)
    risk_percent: Decimal = Field(max_digits=8, decimal_places=4)
    currency: str | None = Field(default=None, max_length=5)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
