"""Pydantic schemas for TradeAttachment API."""

from datetime import datetime

from pydantic import BaseModel, Field, computed_field, field_validator

from journal.utils.constants import TIMEFRAME_MAX_LENGTH


class AttachmentUpdate(BaseModel):
    timeframe: str | None = None

    @field_validator("timeframe")
    @classmethod
    def _normalize_timeframe(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if len(text) > TIMEFRAME_MAX_LENGTH:
            raise ValueError(f"must be at most {TIMEFRAME_MAX_LENGTH} characters")
        return text or None


class AttachmentRead(BaseModel):
    id: int
    trade_id: int
    section: str
    original_filename: str | None
    content_type: str
    file_size: int
    relative_path: str = Field(exclude=True)
    timeframe: str | None
    created_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def image_url(self) -> str:
        return f"/uploads/{self.relative_path}"
