"""
Service métier pour les inscriptions des étudiants.
"""

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from topic_registration.errors import ValidationError
from topic_registration.models.configuration import Configuration
from topic_registration.models.registration import Registration
from topic_registration.services.crud import CrudResource

registrations = CrudResource(
    Registration,
    fields=["preferred_topics", "questions", "configuration_id", "studentStudentNumber"],
    required={"preferred_topics": "preferred topics undefined"},
)


def create_registration(db: Session, student_number: str, data: Dict[str, Any]) -> Registration:
    """
    Enregistre les préférences d'un étudiant.
    L'étudiant vient toujours du token, jamais du corps de requête.
    """
    registrations.validate(data)

    configuration_id = data.get("configuration_id")
    if configuration_id is not None:
        with registrations.guard(db, "check_configuration", configuration_id=configuration_id):
            configuration = db.get(Configuration, configuration_id)
        if configuration is None:
            raise ValidationError("no configuration with that id")

    return registrations.create(db, {**data, "studentStudentNumber": student_number})


def get_current_registration(db: Session, student_number: str) -> Optional[Registration]:
    """Dernière inscription de l'étudiant, ou None."""
    found = registrations.list(
        db,
        Registration.studentStudentNumber == student_number,
        order_by=[Registration.createdAt.desc(), Registration.id.desc()],
        limit=1,
    )
    return found[0] if found else None
