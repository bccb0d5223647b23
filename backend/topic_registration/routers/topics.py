"""
Router pour les sujets proposés à l'inscription.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from topic_registration.database import get_db
from topic_registration.models.topic import Topic
from topic_registration.schemas.topic import TopicCreate, TopicEnvelope, TopicList, TopicUpdate
from topic_registration.security import require_admin
from topic_registration.services import topic_service

router = APIRouter(prefix="/api/topics", tags=["Sujets"])


@router.get("", response_model=TopicList, summary="Lister tous les sujets")
def list_topics(_admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    return {"topics": topic_service.topics.list(db, order_by=Topic.topic_id)}


@router.get("/active", response_model=TopicList, summary="Lister les sujets actifs")
def list_active_topics(db: Session = Depends(get_db)):
    return {"topics": topic_service.get_active_topics(db)}


@router.get("/secret/{secret_link}", response_model=TopicEnvelope, summary="Sujet par lien secret")
def get_topic_by_secret(secret_link: str, db: Session = Depends(get_db)):
    """Accès sans compte au sujet via son lien secret (400 si inconnu)."""
    return {"topic": topic_service.get_topic_by_secret(db, secret_link)}


@router.post("", response_model=TopicEnvelope, summary="Créer un sujet")
def create_topic(data: TopicCreate, _admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    return {"topic": topic_service.create_topic(db, data.model_dump(exclude_unset=True))}


@router.put("/{topic_id}", response_model=TopicEnvelope, summary="Modifier un sujet")
def update_topic(
    topic_id: str,
    data: TopicUpdate,
    _admin: dict = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Met à jour les champs fournis ; active est un simple drapeau, sans transition contrôlée."""
    return {"topic": topic_service.topics.update(db, topic_id, data.model_dump(exclude_unset=True), partial=True)}
