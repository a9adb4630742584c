"""Shared constants for trades, cashflows and attachments."""

from decimal import Decimal

DIRECTIONS = ("LONG", "SHORT")
CLOSE_REASONS = ("TP", "SL", "BREAKEVEN", "MANUAL")
MANUAL_REASON_OTHER = "OTHER"
FOLLOWED_PLAN_VALUES = ("YES", "NO", "MAYBE")
CASHFLOW_TYPES = ("DEPOSIT", "WITHDRAWAL")
ATTACHMENT_SECTIONS = ("PREPARATION", "ENTRY", "EXIT")

# Field length limits (match the column sizes in journal.models)
SYMBOL_MAX_LENGTH = 20
MANUAL_REASON_MAX_LENGTH = 50
MANUAL_DESCRIPTION_MAX_LENGTH = 500
REVIEW_TEXT_MAX_LENGTH = 2000
NOTE_MAX_LENGTH = 500
CURRENCY_MAX_LENGTH = 5
TIMEFRAME_MAX_LENGTH = 20

# Pip sizes
PIP_SIZE_DEFAULT = Decimal("0.0001")
PIP_SIZE_JPY = Decimal("0.01")
PIP_SIZE_01_SYMBOLS = frozenset({"XAUUSD"})

# Attachment uploads
ALLOWED_IMAGE_TYPES = frozenset({"image/png", "image/jpeg", "image/jpg", "image/webp"})
ALLOWED_IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "webp"})
