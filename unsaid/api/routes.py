# File: unsaid/api/routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from unsaid import crud, schemas
from unsaid.api.deps import get_translation_service, translate_limiter
from unsaid.core.config import settings
from unsaid.db.session import get_db
from unsaid.services.orchestrator import TranslationService

logger = logging.getLogger(__name__)

router = APIRouter()


# -------------------------------
# TRANSLATE
# -------------------------------
@router.post('/translate', response_model=schemas.TranslateResponse, dependencies=[Depends(translate_limiter)])
async def translate(request_in: schemas.TranslateRequest,
                    service: TranslationService = Depends(get_translation_service),
                    db: Session = Depends(get_db)):
    text = request_in.text or ""
    if not text.strip():
        raise HTTPException(status_code=400, detail='Text is required')

    result = await service.translate(text)
    record = await run_in_threadpool(service.save, db, request_in.session_id, result)

    return schemas.TranslateResponse(
        translation=schemas.TranslationBody.from_obj(result),
        id=record.id if record else None,
        timestamp=record.timestamp if record else result.timestamp,
        source=result.source,
    )


# -------------------------------
# HISTORY
# -------------------------------
@router.get('/history', response_model=schemas.HistoryResponse)
def history(session_id: str = Query('default', alias='sessionId'), db: Session = Depends(get_db)):
    records = crud.list_translations(db, session_id, limit=settings.HISTORY_LIMIT)
    return schemas.HistoryResponse(translations=[schemas.TranslationOut.from_obj(r) for r in records])


@router.delete('/history/{translation_id}', response_model=schemas.DeleteResponse)
def delete_translation(translation_id: int, db: Session = Depends(get_db)):
    if not crud.delete_translation(db, translation_id):
        raise HTTPException(status_code=404, detail='Translation not found')
    return schemas.DeleteResponse(deleted=1)


@router.delete('/history', response_model=schemas.DeleteResponse)
def clear_history(session_id: str = Query('default', alias='sessionId'), db: Session = Depends(get_db)):
    deleted = crud.delete_session_translations(db, session_id)
    logger.info("Cleared %d translations for session %s", deleted, session_id)
    return schemas.DeleteResponse(deleted=deleted)
