"""
Schémas Pydantic pour les groupes.
Les champs obligatoires sont optionnels ici : leur absence est signalée par
le service avec le message attendu par le client (400, pas 422).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class GroupCreate(BaseModel):
    group_name: Optional[str] = None


class GroupResponse(BaseModel):
    id: int
    group_name: Optional[str]
    createdAt: datetime
    updatedAt: datetime

    model_config = {"from_attributes": True}


class GroupEnvelope(BaseModel):
    group: GroupResponse


class GroupList(BaseModel):
    groups: List[GroupResponse]
