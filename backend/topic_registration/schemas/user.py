"""
Schémas Pydantic pour les utilisateurs et la connexion.
"""

from typing import List, Optional

from pydantic import BaseModel, EmailStr


class LoginRequest(BaseModel):
    """Identité transmise par le fournisseur d'authentification."""
    student_number: Optional[str] = None
    username: Optional[str] = None
    first_names: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None


class UserAdminUpdate(BaseModel):
    admin: Optional[bool] = None


class UserResponse(BaseModel):
    student_number: str
    username: Optional[str]
    first_names: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    admin: Optional[bool]

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    token: str
    user: UserResponse


class UserEnvelope(BaseModel):
    user: UserResponse


class UserList(BaseModel):
    users: List[UserResponse]


class TokenClaims(BaseModel):
    """Contenu d'un token vérifié (GET /api/tokenCheck/...)."""
    student_number: str
    username: Optional[str] = None
    admin: bool = False
