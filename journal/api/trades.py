"""Trade journal API."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from journal.database import get_session
from journal.models.attachment import TradeAttachment
from journal.models.trade import Trade
from journal.models.user import User
from journal.schemas.trade import TradeWrite, TradeReviewUpdate, TradeRead
from journal.services import attachment_store
from journal.services.attachment_store import AttachmentRejected
from journal.services.trade_metrics import TradeValidationError, validate_and_compute
from journal.api.deps import get_current_user, get_owned_trade

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/trades", tags=["trades"])


def _rejected(exc: TradeValidationError) -> HTTPException:
    return HTTPException(status_code=400, detail={"kind": exc.kind, "message": exc.message})


@router.get("", response_model=list[TradeRead])
def list_trades(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    stmt = (
        select(Trade)
        .where(Trade.user_id == user.id)
        .order_by(Trade.created_at.desc(), Trade.id.desc())
    )
    return session.exec(stmt).all()


@router.post("", response_model=TradeRead, status_code=201)
def create_trade(
    data: TradeWrite,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    try:
        validated = validate_and_compute(
            data.to_input(), prior_created_at=datetime.now(timezone.utc)
        )
    except TradeValidationError as e:
        raise _rejected(e)

    trade = Trade(user_id=user.id, **validated.as_record())
    session.add(trade)
    session.commit()
    session.refresh(trade)
    return trade


@router.get("/{trade_id}", response_model=TradeRead)
def get_trade(
    trade_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return get_owned_trade(trade_id, user, session)


@router.put("/{trade_id}", response_model=TradeRead)
def update_trade(
    trade_id: int,
    data: TradeWrite,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    trade = get_owned_trade(trade_id, user, session)

    try:
        validated = validate_and_compute(data.to_input(), prior_created_at=trade.created_at)
    except TradeValidationError as e:
        raise _rejected(e)

    # Full replacement: metrics are recomputed, never patched
    for key, value in validated.as_record().items():
        setattr(trade, key, value)

    session.add(trade)
    session.commit()
    session.refresh(trade)
    return trade


@router.patch("/{trade_id}/review", response_model=TradeRead)
def update_review(
    trade_id: int,
    data: TradeReviewUpdate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    trade = get_owned_trade(trade_id, user, session)

    for key, value in data.model_dump().items():
        setattr(trade, key, value)
    trade.review_updated_at = datetime.now(timezone.utc)

    session.add(trade)
    session.commit()
    session.refresh(trade)
    return trade


@router.delete("/{trade_id}", status_code=204)
def delete_trade(
    trade_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    trade = get_owned_trade(trade_id, user, session)

    attachments = session.exec(
        select(TradeAttachment).where(TradeAttachment.trade_id == trade.id)
    ).all()
    paths = [a.relative_path for a in attachments]
    for attachment in attachments:
        session.delete(attachment)
    session.flush()

    session.delete(trade)
    session.commit()

    # Rows are gone; a file that cannot be removed is only orphaned on disk
    for relative_path in paths:
        try:
            attachment_store.remove(relative_path)
        except (OSError, AttachmentRejected) as e:
            logger.error(f"Failed to delete attachment file {relative_path} of trade {trade_id}: {e}")
    logger.info(f"Deleted trade {trade_id} with {len(paths)} attachment(s)")
