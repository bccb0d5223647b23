"""
Service métier pour les configurations de cycle d'inscription.
Les jeux de questions référencés doivent exister au moment de l'écriture.
"""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from topic_registration.errors import ValidationError
from topic_registration.models.configuration import Configuration
from topic_registration.models.question_set import RegistrationQuestionSet, ReviewQuestionSet
from topic_registration.services.crud import CrudResource

configurations = CrudResource(
    Configuration,
    fields=[
        "name",
        "content",
        "active",
        "review_question_set1_id",
        "review_question_set2_id",
        "registration_question_set_id",
    ],
    required={"name": "name undefined"},
    not_found_message="no configuration with that id",
)

_REFERENCES = {
    "review_question_set1_id": ReviewQuestionSet,
    "review_question_set2_id": ReviewQuestionSet,
    "registration_question_set_id": RegistrationQuestionSet,
}


def _check_references(db: Session, data: Dict[str, Any]) -> None:
    for field, model in _REFERENCES.items():
        ref_id = data.get(field)
        if ref_id is None:
            continue
        with configurations.guard(db, "check_references", **{field: ref_id}):
            found = db.get(model, ref_id)
        if found is None:
            raise ValidationError(f"{field} does not reference an existing question set")


def create_configuration(db: Session, data: Dict[str, Any]) -> Configuration:
    configurations.validate(data)
    _check_references(db, data)
    return configurations.create(db, data)


def update_configuration(db: Session, raw_id: Any, data: Dict[str, Any]) -> Configuration:
    configurations.validate(data)
    _check_references(db, data)
    return configurations.update(db, raw_id, data)


def get_active_configurations(db: Session) -> List[Configuration]:
    return configurations.list(db, Configuration.active.is_(True), order_by=Configuration.id)
