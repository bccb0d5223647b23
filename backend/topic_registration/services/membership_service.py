"""
Service métier pour les appartenances aux groupes.

L'appartenance reprend l'identifiant de son groupe (memberships.id →
groups.id) : le groupe doit exister et ne pas avoir déjà d'appartenance.
"""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from topic_registration.errors import ValidationError
from topic_registration.models.group import Group, Membership
from topic_registration.services.crud import CrudResource, parse_id

memberships = CrudResource(
    Membership,
    fields=["group_id", "role", "student_number"],
    required={
        "group_id": "group id undefined",
        "student_number": "student number undefined",
    },
    unique_field="group_id",
    conflict_message="this group already has a membership",
    not_found_message="no membership for that group",
    error_message="database error",
)


def create_membership(db: Session, data: Dict[str, Any]) -> Membership:
    memberships.validate(data)
    group_id = parse_id(data["group_id"])

    with memberships.guard(db, "create", group_id=group_id):
        group = db.get(Group, group_id)
    if group is None:
        raise ValidationError("no group with that id")

    return memberships.create(db, {**data, "group_id": group_id})


def list_memberships(db: Session) -> List[Membership]:
    return memberships.list(db, order_by=Membership.id)
