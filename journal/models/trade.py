"""Trade model: one journal entry per trade, owned by a user.

Lifecycle is carried by `closed_at` alone (NULL = open); the pip/RR columns
are written from journal.services.trade_metrics and never edited directly.
"""

from datetime import datetime
from decimal import Decimal
from sqlmodel import SQLModel, Field


class Trade(SQLModel, table=True):
    __tablename__ = "trades"

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    symbol: str = Field(max_length=20)
    direction: str = Field(max_length=20)  # "LONG" or "SHORT"

    # Prices
    entry_price: Decimal = Field(max_digits=18, decimal_places=8)
    exit_price: Decimal | None = Field(default=None, max_digits=18, decimal_places=8)
    stop_loss_price: Decimal | None = Field(default=None, max_digits=18, decimal_places=8)
    take_profit_price: Decimal | None = Field(default=None, max_digits=18, decimal_places=8)

    # Close classification
    close_reason_override: str | None = Field(default=None, max_length=20)  # TP, SL, BREAKEVEN, MANUAL
    manual_reason: str | None = Field(default=None, max_length=50)
    manual_description: str | None = Field(default=None, max_length=500)

    # Broker money fields
    commission_money: Decimal | None = Field(default=None, max_digits=18, decimal_places=2)
    swap_money: Decimal | None = Field(default=None, max_digits=18, decimal_places=2)
    net_pnl_money: Decimal | None = Field(default=None, max_digits=18, decimal_places=2)

    # Derived metrics
    sl_pips: Decimal | None = Field(default=None, max_digits=18, decimal_places=1)
    tp_pips: Decimal | None = Field(default=None, max_digits=18, decimal_places=1)
    rr_ratio: Decimal | None = Field(default=None, max_digits=18, decimal_places=2)
    pip_size_used: Decimal | None = Field(default=None, max_digits=18, decimal_places=4)

    # Post-trade review
    followed_plan: str | None = Field(default=None, max_length=10)  # YES, NO, MAYBE
    mistakes_text: str | None = Field(default=None, max_length=2000)
    improvement_text: str | None = Field(default=None, max_length=2000)
    confidence: int | None = None
    review_updated_at: datetime | None = None

    created_at: datetime
    closed_at: datetime | None = None
