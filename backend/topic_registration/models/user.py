"""
Modèle SQLAlchemy pour les utilisateurs.
Seule table à clé naturelle : le numéro d'étudiant.
"""

from sqlalchemy import Boolean, Column, String

from topic_registration.database import Base
from topic_registration.models.mixins import CamelCaseTimestamps


class User(CamelCaseTimestamps, Base):
    __tablename__ = "users"

    student_number = Column(String(255), primary_key=True)
    username = Column(String(255))
    first_names = Column(String(255))
    last_name = Column(String(255))
    email = Column(String(255))
    admin = Column(Boolean, default=False)
