"""Cashflow model: deposits and withdrawals on the trading account."""

from datetime import datetime, timezone
from decimal import Decimal
from sqlmodel import SQLModel, Field


class Cashflow(SQLModel, table=True):
    __tablename__ = "cashflows"

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    type: str = Field(max_length=20)  # "DEPOSIT" or "WITHDRAWAL"
    amount_money: Decimal = Field(max_digits=18, decimal_places=2)
    occurred_at: datetime
    note: str | None = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
