"""
Modèles SQLAlchemy pour les sujets et les fenêtres de dates d'inscription.
"""

from sqlalchemy import Boolean, Column, Integer, String

from topic_registration.database import Base, JSONDocument
from topic_registration.models.mixins import CamelCaseTimestamps


class Topic(CamelCaseTimestamps, Base):
    """Sujet ouvert à l'inscription. Colonnes id / secret_id en base."""
    __tablename__ = "topics"

    topic_id = Column("id", Integer, primary_key=True, autoincrement=True)
    active = Column(Boolean, default=False)
    content = Column(JSONDocument)
    acronym = Column(String(255))
    secret_link = Column("secret_id", String(255))


class TopicDate(CamelCaseTimestamps, Base):
    """Journal des fenêtres de dates : seule la plus récente est lue."""
    __tablename__ = "topic_dates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    dates = Column(JSONDocument)
