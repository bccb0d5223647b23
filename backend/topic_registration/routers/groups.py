"""
Router pour les groupes d'étudiants.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from topic_registration.database import get_db
from topic_registration.schemas.group import GroupCreate, GroupEnvelope, GroupList
from topic_registration.security import require_admin, require_login
from topic_registration.services.group_service import groups

router = APIRouter(prefix="/api/groups", tags=["Groupes"])


@router.post("", response_model=GroupEnvelope, summary="Créer un groupe")
def create_group(data: GroupCreate, _user: dict = Depends(require_login), db: Session = Depends(get_db)):
    """Crée un groupe. Le nom est obligatoire et doit être libre."""
    return {"group": groups.create(db, data.model_dump(exclude_unset=True))}


@router.get("", response_model=GroupList, summary="Lister les groupes")
def list_groups(_admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    return {"groups": groups.list(db)}


@router.delete("/{group_id}", status_code=204, summary="Supprimer un groupe")
def delete_group(group_id: str, _admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    """Supprime un groupe ; ses appartenances suivent (ON DELETE CASCADE). Idempotent."""
    groups.delete(db, group_id)
