"""Shared API dependencies."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session, select

from journal.database import get_session
from journal.models.trade import Trade
from journal.models.user import User
from journal.services.auth import decode_access_token

bearer_scheme = HTTPBearer()


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    session: Session = Depends(get_session),
) -> User:
    """Validate JWT and return the current user."""
    email = decode_access_token(credentials.credentials)
    if email is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    user = session.exec(select(User).where(User.email == email)).first()
    if user is None or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )
    return user


def get_owned_trade(trade_id: int, user: User, session: Session) -> Trade:
    """Load a trade belonging to `user`; other users' trades read as missing."""
    trade = session.exec(
        select(Trade).where(Trade.id == trade_id, Trade.user_id == user.id)
    ).first()
    if not trade:
        raise HTTPException(status_code=404, detail="Trade not found")
    return trade
