"""
Router pour les inscriptions des étudiants.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from topic_registration.database import get_db
from topic_registration.models.registration import Registration
from topic_registration.schemas.registration import (
    RegistrationCreate,
    RegistrationEnvelope,
    RegistrationList,
)
from topic_registration.security import require_admin, require_login
from topic_registration.services import registration_service

router = APIRouter(prefix="/api/registrations", tags=["Inscriptions"])


@router.post("", response_model=RegistrationEnvelope, summary="S'inscrire")
def create_registration(data: RegistrationCreate, user: dict = Depends(require_login), db: Session = Depends(get_db)):
    """Enregistre les sujets préférés (ordonnés) et les réponses de l'étudiant connecté."""
    registration = registration_service.create_registration(db, user["sub"], data.model_dump(exclude_unset=True))
    return {"registration": registration}


@router.get("", response_model=RegistrationList, summary="Lister les inscriptions")
def list_registrations(_admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    return {"registrations": registration_service.registrations.list(db, order_by=Registration.id)}


@router.get("/current", response_model=RegistrationEnvelope, summary="Inscription de l'étudiant connecté")
def get_current_registration(user: dict = Depends(require_login), db: Session = Depends(get_db)):
    return {"registration": registration_service.get_current_registration(db, user["sub"])}
