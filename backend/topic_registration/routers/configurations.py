"""
Router pour les configurations de cycle d'inscription.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from topic_registration.database import get_db
from topic_registration.models.configuration import Configuration
from topic_registration.schemas.configuration import (
    ConfigurationEnvelope,
    ConfigurationList,
    ConfigurationWrite,
)
from topic_registration.security import require_admin
from topic_registration.services import configuration_service

router = APIRouter(prefix="/api/configurations", tags=["Configurations"])


@router.get("", response_model=ConfigurationList, summary="Lister les configurations")
def list_configurations(_admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    return {"configurations": configuration_service.configurations.list(db, order_by=Configuration.id)}


@router.get("/active", response_model=ConfigurationList, summary="Configurations actives")
def list_active_configurations(db: Session = Depends(get_db)):
    return {"configurations": configuration_service.get_active_configurations(db)}


@router.post("", response_model=ConfigurationEnvelope, summary="Créer une configuration")
def create_configuration(
    data: ConfigurationWrite,
    _admin: dict = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return {"configuration": configuration_service.create_configuration(db, data.model_dump(exclude_unset=True))}


@router.put("/{configuration_id}", response_model=ConfigurationEnvelope, summary="Modifier une configuration")
def update_configuration(
    configuration_id: str,
    data: ConfigurationWrite,
    _admin: dict = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return {
        "configuration": configuration_service.update_configuration(
            db, configuration_id, data.model_dump(exclude_unset=True)
        )
    }
