"""CRUD API for account deposits and withdrawals."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from journal.database import get_session
from journal.models.cashflow import Cashflow
from journal.models.user import User
from journal.schemas.cashflow import CashflowWrite, CashflowRead
from journal.api.deps import get_current_user

router = APIRouter(prefix="/api/cashflows", tags=["cashflows"])


def _get_owned_cashflow(cashflow_id: int, user: User, session: Session) -> Cashflow:
    cashflow = session.exec(
        select(Cashflow).where(Cashflow.id == cashflow_id, Cashflow.user_id == user.id)
    ).first()
    if not cashflow:
        raise HTTPException(status_code=404, detail="Cashflow not found")
    return cashflow


@router.get("", response_model=list[CashflowRead])
def list_cashflows(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    stmt = (
        select(Cashflow)
        .where(Cashflow.user_id == user.id)
        .order_by(Cashflow.occurred_at.desc(), Cashflow.id.desc())
    )
    return session.exec(stmt).all()


@router.post("", response_model=CashflowRead, status_code=201)
def create_cashflow(
    data: CashflowWrite,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    cashflow = Cashflow(
        user_id=user.id,
        type=data.type,
        amount_money=data.amount_money,
        occurred_at=data.occurred_at or datetime.now(timezone.utc),
        note=data.note,
    )
    session.add(cashflow)
    session.commit()
    session.refresh(cashflow)
    return cashflow


@router.put("/{cashflow_id}", response_model=CashflowRead)
def update_cashflow(
    cashflow_id: int,
    data: CashflowWrite,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    if data.occurred_at is None:
        raise HTTPException(status_code=400, detail="Occurred time is required")
    cashflow = _get_owned_cashflow(cashflow_id, user, session)

    for key, value in data.model_dump().items():
        setattr(cashflow, key, value)

    session.add(cashflow)
    session.commit()
    session.refresh(cashflow)
    return cashflow


@router.delete("/{cashflow_id}", status_code=204)
def delete_cashflow(
    cashflow_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    cashflow = _get_owned_cashflow(cashflow_id, user, session)
    session.delete(cashflow)
    session.commit()
