"""Pydantic schemas for Cashflow API."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from journal.utils.constants import CASHFLOW_TYPES, NOTE_MAX_LENGTH


class CashflowWrite(BaseModel):
    type: str
    amount_money: Decimal = Field(gt=0)
    occurred_at: datetime | None = None
    note: str | None = Field(default=None, max_length=NOTE_MAX_LENGTH)

    @field_validator("type")
    @classmethod
    def _validate_type(cls, value: str) -> str:
        text = value.strip().upper()
        if not text:
            raise ValueError("must not be empty")
        if text not in CASHFLOW_TYPES:
            allowed = ", ".join(CASHFLOW_TYPES)
            raise ValueError(f"must be one of: {allowed}")
        return text

    @field_validator("note")
    @classmethod
    def _trim_note(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        return text or None


class CashflowRead(BaseModel):
    id: int
    type: str
    amount_money: Decimal
    occurred_at: datetime
    note: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
