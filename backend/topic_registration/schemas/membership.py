"""
Schémas Pydantic pour les appartenances aux groupes.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class MembershipCreate(BaseModel):
    group_id: Optional[int] = None
    role: Optional[str] = None
    student_number: Optional[str] = None


class MembershipResponse(BaseModel):
    group_id: int
    role: Optional[str]
    student_number: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MembershipEnvelope(BaseModel):
    membership: MembershipResponse


class MembershipList(BaseModel):
    memberships: List[MembershipResponse]
