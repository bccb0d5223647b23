"""
Schémas Pydantic pour les évaluations des encadrants.
"""

from datetime import datetime
from typing import Any, List

from pydantic import BaseModel


class InstructorReviewCreate(BaseModel):
    answer_sheet: Any = None


class InstructorReviewResponse(BaseModel):
    id: int
    answer_sheet: Any
    createdAt: datetime
    updatedAt: datetime

    model_config = {"from_attributes": True}


class InstructorReviewEnvelope(BaseModel):
    instructorReview: InstructorReviewResponse


class InstructorReviewList(BaseModel):
    instructorReviews: List[InstructorReviewResponse]
