"""
Router pour les fenêtres de dates d'inscription.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from topic_registration.database import get_db
from topic_registration.schemas.topic import LatestTopicDate, TopicDateCreate, TopicDateEnvelope
from topic_registration.security import require_admin
from topic_registration.services import topic_service

router = APIRouter(prefix="/api/topicDates", tags=["Dates"])


@router.post("", response_model=TopicDateEnvelope, summary="Enregistrer une fenêtre de dates")
def create_topic_date(data: TopicDateCreate, _admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
    """Ajoute une fenêtre au journal. Le document dates n'est pas validé plus avant."""
    return {"topicDate": topic_service.topic_dates.create(db, data.model_dump(exclude_unset=True))}


@router.get("", response_model=LatestTopicDate, summary="Fenêtre de dates courante")
def get_latest_topic_date(db: Session = Depends(get_db)):
    """Retourne [la plus récente] ou [] si aucune fenêtre n'existe."""
    return {"topicDate": topic_service.get_latest_topic_date(db)}
