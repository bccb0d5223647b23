"""
Modèle SQLAlchemy pour les inscriptions (sujets préférés + réponses).
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from topic_registration.database import Base, JSONDocument
from topic_registration.models.mixins import CamelCaseTimestamps


class Registration(CamelCaseTimestamps, Base):
    __tablename__ = "registrations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    preferred_topics = Column(JSONDocument)  # liste ordonnée d'identifiants de sujets
    questions = Column(JSONDocument)
    configuration_id = Column(
        Integer,
        ForeignKey(
            "configurations.id",
            name="registrations_configuration_id_fkey",
            onupdate="CASCADE",
            ondelete="SET NULL",
        ),
    )
    # Nom de colonne hérité de l'association "student" du schéma de production
    studentStudentNumber = Column(
        String(255),
        ForeignKey(
            "users.student_number",
            name="registrations_studentStudentNumber_fkey",
            onupdate="CASCADE",
            ondelete="SET NULL",
        ),
    )

    student = relationship("User")
