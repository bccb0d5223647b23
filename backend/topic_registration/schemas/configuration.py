"""
Schémas Pydantic pour les configurations de cycle d'inscription.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel


class ConfigurationWrite(BaseModel):
    name: Optional[str] = None
    content: Any = None
    active: Optional[bool] = None
    review_question_set1_id: Optional[int] = None
    review_question_set2_id: Optional[int] = None
    registration_question_set_id: Optional[int] = None


class ConfigurationResponse(BaseModel):
    id: int
    name: Optional[str]
    content: Any
    active: Optional[bool]
    review_question_set1_id: Optional[int]
    review_question_set2_id: Optional[int]
    registration_question_set_id: Optional[int]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ConfigurationEnvelope(BaseModel):
    configuration: ConfigurationResponse


class ConfigurationList(BaseModel):
    configurations: List[ConfigurationResponse]
