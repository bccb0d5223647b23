"""
Router pour les évaluations des encadrants.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from topic_registration.database import get_db
from topic_registration.models.instructor_review import InstructorReview
from topic_registration.schemas.instructor_review import (
    InstructorReviewCreate,
    InstructorReviewEnvelope,
    InstructorReviewList,
)
from topic_registration.security import require_admin
from topic_registration.services.instructor_review_service import instructor_reviews

router = APIRouter(prefix="/api/instructorReviews", tags=["Évaluations"])


@router.post("", response_model=InstructorReviewEnvelope, summary="Enregistrer une évaluation")
def create_instructor_review(
    data: InstructorReviewCreate,
    _admin: dict = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return {"instructorReview": instructor_reviews.create(db, data.model_dump(exclude_unset=True))}


@router.get("", response_model=InstructorReviewList, summary="Lister les évaluations")
def list_instructor_reviews(_admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    return {"instructorReviews": instructor_reviews.list(db, order_by=InstructorReview.id)}
