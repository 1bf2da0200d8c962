
# File: unsaid/crud.py

from sqlalchemy.orm import Session
from unsaid import models
from unsaid.core.config import settings


# Translations
def create_translation(db: Session, session_id: str, result):
    db_tr = models.TranslationRecord(
        raw_text=result.raw_text,
        clear_expression=result.clear_expression,
        respectful_expression=result.respectful_expression,
        emotions=list(result.emotions),
        validation=result.validation,
        validation_category=result.validation_category,
        validation_icon=result.validation_icon,
        validation_color=result.validation_color,
        timestamp=result.timestamp,
        session_id=session_id,
    )
    db.add(db_tr)
    db.commit()
    db.refresh(db_tr)
    return db_tr


def get_translation(db: Session, translation_id: int):
    return db.query(models.TranslationRecord).filter(models.TranslationRecord.id == translation_id).first()


def list_translations(db: Session, session_id: str, limit: int = settings.HISTORY_LIMIT):
    """Newest first."""
    return (
        db.query(models.TranslationRecord)
        .filter(models.TranslationRecord.session_id == session_id)
        .order_by(models.TranslationRecord.timestamp.desc(), models.TranslationRecord.id.desc())
        .limit(limit)
        .all()
    )


def delete_translation(db: Session, translation_id: int) -> bool:
    tr = get_translation(db, translation_id)
    if not tr:
        return False
    db.delete(tr)
    db.commit()
    return True


def delete_session_translations(db: Session, session_id: str) -> int:
    deleted = (
        db.query(models.TranslationRecord)
        .filter(models.TranslationRecord.session_id == session_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
