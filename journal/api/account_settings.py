"""Per-user account settings (starting balance, risk percent, currency)."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from journal.database import get_session
from journal.models.account_settings import AccountSettings
from journal.models.user import User
from journal.schemas.account_settings import AccountSettingsWrite, AccountSettingsRead
from journal.api.deps import get_current_user

router = APIRouter(prefix="/api/account-settings", tags=["account-settings"])


def _find_settings(user: User, session: Session) -> AccountSettings | None:
    return session.exec(
        select(AccountSettings).where(AccountSettings.user_id == user.id)
    ).first()


@router.get("", response_model=AccountSettingsRead)
def get_settings(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    account = _find_settings(user, session)
    if not account:
        raise HTTPException(status_code=404, detail="Account settings not found")
    return account


@router.put("", response_model=AccountSettingsRead)
def upsert_settings(
    data: AccountSettingsWrite,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    now = datetime.now(timezone.utc)
    account = _find_settings(user, session)
    if account is None:
        account = AccountSettings(user_id=user.id, created_at=now, **data.model_dump())
    else:
        for key, value in data.model_dump().items():
            setattr(account, key, value)
    account.updated_at = now

    session.add(account)
    session.commit()
    session.refresh(account)
    return account
