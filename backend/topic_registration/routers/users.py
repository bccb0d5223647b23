"""
Router pour les utilisateurs (administration).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from topic_registration.database import get_db
from topic_registration.schemas.user import UserAdminUpdate, UserEnvelope, UserList
from topic_registration.security import require_admin
from topic_registration.services import user_service

router = APIRouter(prefix="/api/users", tags=["Utilisateurs"])


@router.get("", response_model=UserList, summary="Lister les utilisateurs")
def list_users(_admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    return {"users": user_service.list_users(db)}


@router.put("/{student_number}", response_model=UserEnvelope, summary="Changer les droits admin")
def set_admin(
    student_number: str,
    data: UserAdminUpdate,
    _admin: dict = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return {"user": user_service.set_admin(db, student_number, data.admin)}
