"""
Service métier pour les évaluations des encadrants.
"""

from topic_registration.models.instructor_review import InstructorReview
from topic_registration.services.crud import CrudResource

instructor_reviews = CrudResource(
    InstructorReview,
    fields=["answer_sheet"],
    required={"answer_sheet": "answer sheet undefined"},
)
