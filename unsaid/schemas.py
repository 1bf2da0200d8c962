
# File: unsaid/schemas.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @classmethod
    def from_obj(cls, obj):
        """Build from any object (ORM row, dataclass) exposing the snake_case fields."""
        return cls(**{name: getattr(obj, name) for name in cls.model_fields})


class TranslateRequest(CamelModel):
    text: Optional[str] = None
    session_id: str = Field("default", alias="sessionId", min_length=1, max_length=128)


class TranslationBody(CamelModel):
    clear_expression: str = Field(alias="clearExpression")
    respectful_expression: str = Field(alias="respectfulExpression")
    emotions: List[str]
    validation: str
    validation_category: str = Field(alias="validationCategory")
    validation_icon: str = Field(alias="validationIcon")
    validation_color: str = Field(alias="validationColor")


class TranslateResponse(CamelModel):
    success: bool = True
    translation: TranslationBody
    id: Optional[int] = None
    timestamp: datetime
    source: str


class TranslationOut(CamelModel):
    id: int
    raw_text: str = Field(alias="rawText")
    clear_expression: str = Field(alias="clearExpression")
    respectful_expression: str = Field(alias="respectfulExpression")
    emotions: List[str]
    validation: str
    validation_category: str = Field(alias="validationCategory")
    validation_icon: str = Field(alias="validationIcon")
    validation_color: str = Field(alias="validationColor")
    timestamp: datetime
    session_id: str = Field(alias="sessionId")


class HistoryResponse(CamelModel):
    success: bool = True
    translations: List[TranslationOut]


class DeleteResponse(CamelModel):
    success: bool = True
    deleted: int
