"""Pydantic schemas for Trade API.

Trade field rules live in journal.services.trade_metrics, so the request
schema only parses types; prices arrive as Decimal and are never floats.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from journal.services.trade_metrics import TradeInput
from journal.utils.constants import FOLLOWED_PLAN_VALUES, REVIEW_TEXT_MAX_LENGTH


class TradeWrite(BaseModel):
    """Body for both create and update."""

    symbol: str | None = None
    direction: str | None = None
    entry_price: Decimal | None = None
    exit_price: Decimal | None = None
    close_reason_override: str | None = None
    manual_reason: str | None = None
    manual_description: str | None = None
    stop_loss_price: Decimal | None = None
    take_profit_price: Decimal | None = None
    commission_money: Decimal | None = None
    swap_money: Decimal | None = None
    net_pnl_money: Decimal | None = None
    created_at: datetime | None = None
    closed_at: datetime | None = None

    def to_input(self) -> TradeInput:
        return TradeInput(**self.model_dump())


class TradeReviewUpdate(BaseModel):
    followed_plan: str
    mistakes_text: str | None = Field(default=None, max_length=REVIEW_TEXT_MAX_LENGTH)
    improvement_text: str | None = Field(default=None, max_length=REVIEW_TEXT_MAX_LENGTH)
    confidence: int = Field(ge=1, le=10)

    @field_validator("followed_plan")
    @classmethod
    def _validate_followed_plan(cls, value: str) -> str:
        text = value.strip().upper()
        if text not in FOLLOWED_PLAN_VALUES:
            allowed = ", ".join(FOLLOWED_PLAN_VALUES)
            raise ValueError(f"must be one of: {allowed}")
        return text

    @field_validator("mistakes_text", "improvement_text")
    @classmethod
    def _trim_optional_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        return text or None


class TradeRead(BaseModel):
    id: int
    symbol: str
    direction: str
    entry_price: Decimal
    exit_price: Decimal | None
    close_reason_override: str | None
    manual_reason: str | None
    manual_description: str | None
    followed_plan: str | None
    mistakes_text: str | None
    improvement_text: str | None
    confidence: int | None
    review_updated_at: datetime | None
    stop_loss_price: Decimal | None
    take_profit_price: Decimal | None
    commission_money: Decimal | None
    swap_money: Decimal | None
    net_pnl_money: Decimal | None
    sl_pips: Decimal | None
    tp_pips: Decimal | None
    rr_ratio: Decimal | None
    pip_size_used: Decimal | None
    created_at: datetime
    closed_at: datetime | None

    model_config = {"from_attributes": True}
