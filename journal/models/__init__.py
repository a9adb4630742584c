"""Database models."""

from journal.models.user import User
from journal.models.trade import Trade
from journal.models.cashflow import Cashflow
from journal.models.account_settings import AccountSettings
from journal.models.attachment import TradeAttachment

__all__ = [
    "User",
    "Trade",
    "Cashflow",
    "AccountSettings",
    "TradeAttachment",
]
