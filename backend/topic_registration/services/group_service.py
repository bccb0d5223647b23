"""
Service métier pour les groupes.
"""

from topic_registration.models.group import Group
from topic_registration.services.crud import CrudResource

groups = CrudResource(
    Group,
    fields=["group_name"],
    required={"group_name": "group name undefined"},
    unique_field="group_name",
    conflict_message="a group with that name already exists",
    not_found_message="no group with that id",
    error_message="database error",
)
