"""
Schémas Pydantic pour les inscriptions.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel


class RegistrationCreate(BaseModel):
    preferred_topics: Optional[List[Any]] = None
    questions: Any = None
    configuration_id: Optional[int] = None


class RegistrationResponse(BaseModel):
    id: int
    preferred_topics: Optional[List[Any]]
    questions: Any
    configuration_id: Optional[int]
    studentStudentNumber: Optional[str]
    createdAt: datetime
    updatedAt: datetime

    model_config = {"from_attributes": True}


class RegistrationEnvelope(BaseModel):
    registration: Optional[RegistrationResponse]


class RegistrationList(BaseModel):
    registrations: List[RegistrationResponse]
