"""Pydantic schemas for AccountSettings API."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from journal.utils.constants import CURRENCY_MAX_LENGTH


class AccountSettingsWrite(BaseModel):
    starting_balance: Decimal = Field(gt=0)
    risk_percent: Decimal = Field(gt=0, le=100)
    currency: str | None = Field(default=None, max_length=CURRENCY_MAX_LENGTH)

    @field_validator("currency")
    @classmethod
    def _normalize_currency(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        return text.upper() or None


class AccountSettingsRead(BaseModel):
    id: int
    starting_balance: Decimal
    risk_percent: Decimal
    currency: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
