"""
Schémas Pydantic pour les jeux de questions (évaluation et inscription).
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel


class QuestionSetWrite(BaseModel):
    """Corps de création et de mise à jour (POST / PUT)."""
    name: Optional[str] = None
    questions: Any = None


class QuestionSetResponse(BaseModel):
    id: int
    name: Optional[str]
    questions: Any
    createdAt: datetime
    updatedAt: datetime

    model_config = {"from_attributes": True}


class QuestionSetEnvelope(BaseModel):
    questionSet: QuestionSetResponse


class QuestionSetList(BaseModel):
    questionSets: List[QuestionSetResponse]
