"""
Routers pour les jeux de questions.
US : /api/reviewQuestionSets (évaluation) et /api/registrationQuestionSets
(inscription) partagent exactement le même contrat.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from topic_registration.database import get_db
from topic_registration.schemas.question_set import (
    QuestionSetEnvelope,
    QuestionSetList,
    QuestionSetResponse,
    QuestionSetWrite,
)
from topic_registration.security import require_admin
from topic_registration.services.crud import CrudResource
from topic_registration.services.question_set_service import (
    registration_question_sets,
    review_question_sets,
)


def build_router(resource: CrudResource, prefix: str, tag: str) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.post("", response_model=QuestionSetEnvelope, summary="Créer un jeu de questions")
    def create_question_set(
        data: QuestionSetWrite,
        _admin: dict = Depends(require_admin),
        db: Session = Depends(get_db),
    ):
        """Crée un jeu de questions ; le nom est obligatoire et unique."""
        return {"questionSet": resource.create(db, data.model_dump(exclude_unset=True))}

    @router.put("/{question_set_id}", response_model=QuestionSetEnvelope, summary="Modifier un jeu de questions")
    def update_question_set(
        question_set_id: str,
        data: QuestionSetWrite,
        _admin: dict = Depends(require_admin),
        db: Session = Depends(get_db),
    ):
        """
        Remplace nom et questions puis renvoie l'enregistrement relu en base.
        400 si l'id n'est pas entier, si le nom manque ou appartient à un autre
        jeu, ou si aucun jeu ne porte cet id.
        """
        return {"questionSet": resource.update(db, question_set_id, data.model_dump(exclude_unset=True))}

    @router.get("", response_model=QuestionSetList, summary="Lister les jeux de questions")
    def list_question_sets(_admin: dict = Depends(require_admin), db: Session = Depends(get_db)):
        return {"questionSets": resource.list(db)}

    @router.get("/{question_set_id}", response_model=Optional[QuestionSetResponse],
                summary="Détail d'un jeu de questions")
    def get_question_set(question_set_id: str, db: Session = Depends(get_db)):
        # Jeu inexistant : 200 avec null, contrairement à PUT et DELETE
        return resource.get(db, question_set_id)

    @router.delete("/{question_set_id}", status_code=204, summary="Supprimer un jeu de questions")
    def delete_question_set(
        question_set_id: str,
        _admin: dict = Depends(require_admin),
        db: Session = Depends(get_db),
    ):
        """Idempotent : un jeu déjà supprimé renvoie aussi 204."""
        resource.delete(db, question_set_id)

    return router


review_router = build_router(review_question_sets, "/api/reviewQuestionSets", "Jeux de questions d'évaluation")
registration_router = build_router(
    registration_question_sets, "/api/registrationQuestionSets", "Jeux de questions d'inscription"
)
