
# File: unsaid/models.py

from sqlalchemy import Column, Integer, String, DateTime, Text, JSON
from datetime import datetime, timezone
from unsaid.db.session import Base


def utcnow():
    return datetime.now(timezone.utc)


class TranslationRecord(Base):
    __tablename__ = "translations"
    id = Column(Integer, primary_key=True, index=True)
    raw_text = Column(Text, nullable=False)
    clear_expression = Column(Text, nullable=False)
    respectful_expression = Column(Text, nullable=False)
    emotions = Column(JSON, nullable=False, default=list)
    validation = Column(Text, nullable=False)
    validation_category = Column(String(16), nullable=False, default="general")
    validation_icon = Column(String(16), nullable=False)
    validation_color = Column(String(64), nullable=False)
    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    session_id = Column(String(128), nullable=False, index=True)
