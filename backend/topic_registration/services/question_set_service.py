"""
Service métier pour les jeux de questions d'évaluation et d'inscription.
Le nom d'un jeu est unique dans sa table ; il est revérifié à chaque mise à
jour en excluant l'enregistrement lui-même.
"""

from topic_registration.models.question_set import RegistrationQuestionSet, ReviewQuestionSet
from topic_registration.services.crud import CrudResource

review_question_sets = CrudResource(
    ReviewQuestionSet,
    fields=["name", "questions"],
    required={"name": "name undefined"},
    unique_field="name",
    conflict_message="name already in use",
    not_found_message="no review question set with that id",
)

registration_question_sets = CrudResource(
    RegistrationQuestionSet,
    fields=["name", "questions"],
    required={"name": "name undefined"},
    unique_field="name",
    conflict_message="name already in use",
    not_found_message="no registration question set with that id",
)
