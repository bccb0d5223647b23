"""
Jetons JWT et dépendances d'authentification.

require_login : token valide exigé (401 sinon).
require_admin : token valide avec le claim admin (403 sinon).
require_trusted_login : /api/login n'accepte que les appels du proxy
d'authentification, qui seul connaît LOGIN_SECRET (401 sinon).
Les claims suffisent : aucune requête en base n'est faite pour authentifier.
"""

import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Header
from jose import JWTError, jwt

from topic_registration.config import settings
from topic_registration.errors import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)

LOGIN_REFUSED = "login credential missing or invalid"


def create_access_token(user) -> str:
    """Signe un token pour l'utilisateur (sub = numéro d'étudiant)."""
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {
        "sub": user.student_number,
        "username": user.username,
        "admin": bool(user.admin),
        "exp": int(expires.timestamp()),
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    """Vérifie signature et expiration ; lève AuthenticationError sinon."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        logger.info("Token refusé : %s", exc)
        raise AuthenticationError()
    if not payload.get("sub"):
        raise AuthenticationError()
    return payload


def require_login(authorization: Optional[str] = Header(default=None)) -> dict:
    """Dépendance FastAPI : retourne les claims du token Bearer."""
    if not authorization:
        raise AuthenticationError()
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError()
    return decode_token(token.strip())


def require_admin(claims: dict = Depends(require_login)) -> dict:
    if not claims.get("admin"):
        raise AuthorizationError()
    return claims


def require_trusted_login(x_login_secret: Optional[str] = Header(default=None)) -> None:
    """
    Dépendance FastAPI de /api/login : l'identité du corps n'est crue que si
    l'en-tête X-Login-Secret correspond à LOGIN_SECRET. Sans LOGIN_SECRET
    configuré, toute connexion est refusée.
    """
    expected = settings.LOGIN_SECRET
    if not expected:
        logger.warning("LOGIN_SECRET non configuré : connexion refusée.")
        raise AuthenticationError(LOGIN_REFUSED)
    if not x_login_secret or not hmac.compare_digest(x_login_secret.encode(), expected.encode()):
        logger.info("Connexion refusée : secret de connexion absent ou invalide.")
        raise AuthenticationError(LOGIN_REFUSED)
