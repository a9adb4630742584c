"""Trade screenshot attachments API."""

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlmodel import Session, select

from journal.database import get_session
from journal.models.attachment import TradeAttachment
from journal.models.trade import Trade
from journal.models.user import User
from journal.schemas.attachment import AttachmentRead, AttachmentUpdate
from journal.services import attachment_store
from journal.services.attachment_store import AttachmentRejected
from journal.api.deps import get_current_user, get_owned_trade

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["attachments"])


def _get_owned_attachment(attachment_id: int, user: User, session: Session) -> TradeAttachment:
    attachment = session.exec(
        select(TradeAttachment)
        .join(Trade, Trade.id == TradeAttachment.trade_id)
        .where(TradeAttachment.id == attachment_id, Trade.user_id == user.id)
    ).first()
    if not attachment:
        raise HTTPException(status_code=404, detail="Attachment not found")
    return attachment


@router.post("/trades/{trade_id}/attachments", response_model=AttachmentRead, status_code=201)
async def upload_attachment(
    trade_id: int,
    section: str = Form(...),
    file: UploadFile = File(...),
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    trade = get_owned_trade(trade_id, user, session)
    content = await file.read()

    try:
        parsed_section = attachment_store.parse_section(section)
        relative_path = attachment_store.store(
            trade.id, parsed_section, file.filename, file.content_type, content
        )
    except AttachmentRejected as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OSError as e:
        logger.error(f"Failed to store attachment for trade {trade.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to store file")

    attachment = TradeAttachment(
        trade_id=trade.id,
        section=parsed_section,
        original_filename=file.filename or None,
        content_type=file.content_type or "application/octet-stream",
        file_size=len(content),
        relative_path=relative_path,
    )
    session.add(attachment)
    session.commit()
    session.refresh(attachment)
    return attachment


@router.get("/trades/{trade_id}/attachments", response_model=list[AttachmentRead])
def list_attachments(
    trade_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    trade = get_owned_trade(trade_id, user, session)
    stmt = (
        select(TradeAttachment)
        .where(TradeAttachment.trade_id == trade.id)
        .order_by(TradeAttachment.created_at.desc(), TradeAttachment.id.desc())
    )
    return session.exec(stmt).all()


@router.patch("/attachments/{attachment_id}", response_model=AttachmentRead)
def update_attachment(
    attachment_id: int,
    data: AttachmentUpdate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    attachment = _get_owned_attachment(attachment_id, user, session)
    attachment.timeframe = data.timeframe
    session.add(attachment)
    session.commit()
    session.refresh(attachment)
    return attachment


@router.delete("/attachments/{attachment_id}", status_code=204)
def delete_attachment(
    attachment_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    attachment = _get_owned_attachment(attachment_id, user, session)
    relative_path = attachment.relative_path
    session.delete(attachment)
    session.commit()

    try:
        attachment_store.remove(relative_path)
    except (OSError, AttachmentRejected) as e:
        logger.error(f"Failed to delete file for attachment {attachment_id}: {e}")
