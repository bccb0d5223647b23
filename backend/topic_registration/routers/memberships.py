"""
Router pour les appartenances aux groupes.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from topic_registration.database import get_db
from topic_registration.schemas.membership import MembershipCreate, MembershipEnvelope, MembershipList
from topic_registration.security import require_admin, require_login
from topic_registration.services import membership_service

router = APIRouter(prefix="/api/memberships", tags=["Appartenances"])


@router.post("", response_model=MembershipEnvelope, summary="Rattacher un étudiant à un groupe")
def create_membership(
    data: MembershipCreate,
    _user: dict = Depends(require_login),
    db: Session = Depends(get_db),
):
    """
    Crée l'appartenance du groupe group_id.
    400 si le groupe n'existe pas ou a déjà une appartenance.
    """
    return {"membership": membership_service.create_membership(db, data.model_dump(exclude_unset=True))}


@router.get("", response_model=MembershipList, summary="Lister les appartenances")
def list_memberships(_admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    return {"memberships": membership_service.list_memberships(db)}
