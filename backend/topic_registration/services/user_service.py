"""
Service métier pour les utilisateurs et la connexion.

La connexion (déjà vérifiée par require_trusted_login) crée l'utilisateur
à sa première venue puis met à jour son identité aux connexions suivantes.
Le drapeau admin ne vient jamais du client : il se change uniquement via
set_admin().
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from topic_registration.errors import NotFoundError, ValidationError
from topic_registration.models.user import User
from topic_registration.services.crud import CrudResource

logger = logging.getLogger(__name__)

IDENTITY_FIELDS = ["username", "first_names", "last_name", "email"]

users = CrudResource(
    User,
    fields=["student_number"] + IDENTITY_FIELDS,
    required={
        "student_number": "student number undefined",
        "username": "username undefined",
    },
    not_found_message="no user with that student number",
    primary_key="student_number",
)


def login(db: Session, data: Dict[str, Any]) -> User:
    """Crée ou rafraîchit l'utilisateur identifié par son numéro d'étudiant."""
    users.validate(data)
    student_number = data["student_number"]

    with users.guard(db, "login", student_number=student_number):
        user = db.get(User, student_number)
        if user is None:
            user = User(**{f: data.get(f) for f in users.fields}, admin=False)
            db.add(user)
            logger.info("Nouvel utilisateur : %s", student_number)
        else:
            for field in IDENTITY_FIELDS:
                if field in data:
                    setattr(user, field, data[field])
        db.commit()
        db.refresh(user)
    return user


def list_users(db: Session) -> List[User]:
    return users.list(db, order_by=User.student_number)


def set_admin(db: Session, student_number: str, admin: Any) -> User:
    if not isinstance(admin, bool):
        raise ValidationError("admin undefined")

    with users.guard(db, "set_admin", student_number=student_number):
        user = db.get(User, student_number)
    if user is None:
        raise NotFoundError(users.not_found_message)

    with users.guard(db, "set_admin", student_number=student_number):
        user.admin = admin
        db.commit()
        db.refresh(user)
    logger.info("Droits admin de %s : %s", student_number, admin)
    return user
