"""TradeAttachment model: screenshot metadata; the file itself lives under settings.upload_dir."""

from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


class TradeAttachment(SQLModel, table=True):
    __tablename__ = "trade_attachments"

    id: int | None = Field(default=None, primary_key=True)
    trade_id: int = Field(foreign_key="trades.id", index=True)
    section: str = Field(max_length=20)  # PREPARATION, ENTRY, EXIT
    original_filename: str | None = Field(default=None, max_length=255)
    content_type: str = Field(max_length=100)
    file_size: int
    relative_path: str = Field(max_length=500)  # relative to upload_dir, forward slashes
    timeframe: str | None = Field(default=None, max_length=20)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
