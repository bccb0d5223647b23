"""
Service métier pour les sujets et les fenêtres de dates d'inscription.
"""

import secrets
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from topic_registration.errors import NotFoundError
from topic_registration.models.topic import Topic, TopicDate
from topic_registration.services.crud import CrudResource


topics = CrudResource(
    Topic,
    fields=["content", "acronym", "active", "secret_link"],
    required={"content": "content undefined"},
    not_found_message="no topic with that id",
    primary_key="topic_id",
)

topic_dates = CrudResource(
    TopicDate,
    fields=["dates"],
    required={"dates": "dates undefined"},
)


def create_topic(db: Session, data: Dict[str, Any]) -> Topic:
    """Crée un sujet avec un lien secret aléatoire (édition sans compte)."""
    return topics.create(db, {**data, "secret_link": secrets.token_urlsafe(24)})


def get_active_topics(db: Session) -> List[Topic]:
    return topics.list(db, Topic.active.is_(True), order_by=Topic.topic_id)


def get_topic_by_secret(db: Session, secret_link: str) -> Topic:
    with topics.guard(db, "get_by_secret"):
        topic = topics.find_by(db, secret_link=secret_link)
    if topic is None:
        raise NotFoundError("no topic with that secret link")
    return topic


def get_latest_topic_date(db: Session) -> List[TopicDate]:
    """
    Retourne une liste contenant la fenêtre de dates la plus récente,
    ou une liste vide si aucune n'a encore été enregistrée.
    """
    # id en second critère : deux créations dans la même seconde restent ordonnées
    return topic_dates.list(
        db,
        order_by=[TopicDate.createdAt.desc(), TopicDate.id.desc()],
        limit=1,
    )
