"""
Modèles SQLAlchemy pour les groupes et leurs appartenances.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import synonym

from topic_registration.database import Base
from topic_registration.models.mixins import CamelCaseTimestamps, SnakeCaseTimestamps


class Group(CamelCaseTimestamps, Base):
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    group_name = Column(String(255), unique=True)  # groups_group_name_key (2e migration)


class Membership(SnakeCaseTimestamps, Base):
    """
    Appartenance d'un utilisateur (avec son rôle) à un groupe.
    Seule relation en ON DELETE CASCADE du schéma : supprimer le groupe
    supprime l'appartenance. La clé étrangère porte sur memberships.id,
    exposée sous le nom group_id : un groupe a au plus une appartenance.
    """
    __tablename__ = "memberships"

    id = Column(
        Integer,
        ForeignKey("groups.id", name="memberships_id_fkey", onupdate="CASCADE", ondelete="CASCADE"),
        primary_key=True,
        autoincrement=True,
    )
    role = Column(String(255))
    student_number = Column(String(255))

    group_id = synonym("id")
