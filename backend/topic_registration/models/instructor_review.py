"""
Modèle SQLAlchemy pour les évaluations des encadrants.
"""

from sqlalchemy import Column, Integer

from topic_registration.database import Base, JSONDocument
from topic_registration.models.mixins import CamelCaseTimestamps


class InstructorReview(CamelCaseTimestamps, Base):
    __tablename__ = "instructor_reviews"

    id = Column(Integer, primary_key=True, autoincrement=True, nullable=False)
    answer_sheet = Column(JSONDocument)
