"""
Router de connexion et de vérification de token.
Le corps de /api/login n'est jamais journalisé (voir le middleware de main).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from topic_registration.database import get_db
from topic_registration.schemas.user import LoginRequest, LoginResponse, TokenClaims
from topic_registration.security import (
    create_access_token,
    require_admin,
    require_login,
    require_trusted_login,
)
from topic_registration.services import user_service

router = APIRouter(prefix="/api/login", tags=["Connexion"])
token_check_router = APIRouter(prefix="/api/tokenCheck", tags=["Connexion"])


@router.post("", response_model=LoginResponse, summary="Se connecter")
def login(
    data: LoginRequest,
    _proxy: None = Depends(require_trusted_login),
    db: Session = Depends(get_db),
):
    """
    Crée ou met à jour l'utilisateur puis renvoie un token signé.
    Sans X-Login-Secret valide : 401, aucune écriture en base.
    """
    user = user_service.login(db, data.model_dump(exclude_unset=True))
    return {"token": create_access_token(user), "user": user}


def _claims(payload: dict) -> dict:
    return {
        "user": TokenClaims(
            student_number=payload["sub"],
            username=payload.get("username"),
            admin=bool(payload.get("admin")),
        )
    }


@token_check_router.get("/login", summary="Vérifier un token")
def check_login(claims: dict = Depends(require_login)):
    return _claims(claims)


@token_check_router.get("/admin", summary="Vérifier un token admin")
def check_admin(claims: dict = Depends(require_admin)):
    return _claims(claims)
