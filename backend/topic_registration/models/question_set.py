"""
Modèles SQLAlchemy pour les jeux de questions (évaluation et inscription).
"""

from sqlalchemy import Column, Integer, String

from topic_registration.database import Base, JSONDocument
from topic_registration.models.mixins import CamelCaseTimestamps


class ReviewQuestionSet(CamelCaseTimestamps, Base):
    __tablename__ = "review_question_sets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), unique=True)  # review_question_sets_name_key (2e migration)
    questions = Column(JSONDocument)


class RegistrationQuestionSet(CamelCaseTimestamps, Base):
    __tablename__ = "registration_question_sets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255))
    questions = Column(JSONDocument)
