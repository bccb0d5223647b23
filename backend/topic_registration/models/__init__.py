# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles
# (configurations → review_question_sets, registrations → users, ...).

from topic_registration.models.user import User  # noqa: F401  (doit précéder registration)
from topic_registration.models.group import Group, Membership  # noqa: F401
from topic_registration.models.topic import Topic, TopicDate  # noqa: F401
from topic_registration.models.question_set import ReviewQuestionSet, RegistrationQuestionSet  # noqa: F401
from topic_registration.models.configuration import Configuration  # noqa: F401
from topic_registration.models.registration import Registration  # noqa: F401
from topic_registration.models.instructor_review import InstructorReview  # noqa: F401
