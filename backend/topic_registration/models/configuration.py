"""
Modèle SQLAlchemy pour les configurations d'un cycle d'inscription.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String

from topic_registration.database import Base, JSONDocument
from topic_registration.models.mixins import SnakeCaseTimestamps


class Configuration(SnakeCaseTimestamps, Base):
    """Regroupe les jeux de questions actifs pour un cycle d'inscription."""
    __tablename__ = "configurations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255))
    content = Column(JSONDocument)
    active = Column(Boolean, default=False)

    review_question_set1_id = Column(
        Integer,
        ForeignKey(
            "review_question_sets.id",
            name="configurations_review_question_set1_id_fkey",
            onupdate="CASCADE",
            ondelete="SET NULL",
        ),
    )
    review_question_set2_id = Column(
        Integer,
        ForeignKey(
            "review_question_sets.id",
            name="configurations_review_question_set2_id_fkey",
            onupdate="CASCADE",
            ondelete="SET NULL",
        ),
    )
    registration_question_set_id = Column(
        Integer,
        ForeignKey(
            "registration_question_sets.id",
            name="configurations_registration_question_set_id_fkey",
            onupdate="CASCADE",
            ondelete="SET NULL",
        ),
    )
