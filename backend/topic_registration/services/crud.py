"""
Ressource CRUD générique.

Toutes les ressources de l'API suivent le même enchaînement :
validation → contrôle d'unicité → écriture → relecture. CrudResource le
paramètre par modèle, champs obligatoires et champ unique, de sorte que
chaque service n'a plus qu'à déclarer sa ressource.
"""

import logging
import re
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from topic_registration.errors import ConflictError, InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something is wrong... try reloading the page"

INTEGER_ID = re.compile(r"[+-]?[0-9]+")


def is_blank(value: Any) -> bool:
    """
    Valeur considérée comme absente pour un champ obligatoire.
    None, "", False et 0 sont absents ; un objet ou une liste vide est présent.
    """
    if value is None:
        return True
    if isinstance(value, (str, bool, int, float)):
        return not value
    return False


def parse_id(raw_id: Any) -> int:
    """Convertit l'identifiant d'URL en entier, sinon ValidationError('invalid id')."""
    if raw_id is None or isinstance(raw_id, bool):
        raise ValidationError("invalid id")
    text = str(raw_id).strip()
    # int() accepterait "1_0" ou des chiffres non ASCII
    if not INTEGER_ID.fullmatch(text):
        raise ValidationError("invalid id")
    return int(text)


class CrudResource:
    """
    Opérations CRUD sur un modèle SQLAlchemy.

    - required : champ → message renvoyé si le champ est absent
    - unique_field : champ dont la valeur doit être unique (contrôle applicatif
      avant écriture, IntegrityError converti en conflit au commit)
    - fields : attributs acceptés depuis le corps de requête
    """

    def __init__(
        self,
        model,
        *,
        fields: List[str],
        required: Optional[Dict[str, str]] = None,
        unique_field: Optional[str] = None,
        conflict_message: str = "name already in use",
        not_found_message: str = "not found",
        error_message: str = DEFAULT_ERROR_MESSAGE,
        primary_key: str = "id",
    ):
        self.model = model
        self.fields = fields
        self.required = required or {}
        self.unique_field = unique_field
        self.conflict_message = conflict_message
        self.not_found_message = not_found_message
        self.error_message = error_message
        self.primary_key = primary_key

    @property
    def name(self) -> str:
        return self.model.__tablename__

    # --- Contrôles ---

    def validate(self, data: Dict[str, Any]) -> None:
        for field, message in self.required.items():
            if is_blank(data.get(field)):
                raise ValidationError(message)

    def check_unique(self, db: Session, data: Dict[str, Any], exclude_id: Optional[int] = None) -> None:
        """Lève ConflictError si un autre enregistrement porte déjà la valeur unique."""
        if self.unique_field is None:
            return
        value = data.get(self.unique_field)
        if value is None:
            return
        with self.guard(db, "check_unique", **{self.unique_field: value}):
            existing = self.find_by(db, **{self.unique_field: value})
        if existing is not None and getattr(existing, self.primary_key) != exclude_id:
            raise ConflictError(self.conflict_message)

    @contextmanager
    def guard(self, db: Session, operation: str, **context) -> Iterator[None]:
        """
        Convertit les erreurs de la base en InternalError après rollback.
        Le détail n'est que journalisé, jamais renvoyé au client.
        """
        try:
            yield
        except IntegrityError as exc:
            db.rollback()
            if self.unique_field is not None and self._is_unique_violation(exc):
                logger.warning("Conflit d'unicité sur %s.%s : %s", self.name, operation, context)
                raise ConflictError(self.conflict_message)
            logger.exception("Erreur base sur %s.%s %s", self.name, operation, context)
            raise InternalError(self.error_message)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Erreur base sur %s.%s %s", self.name, operation, context)
            raise InternalError(self.error_message)

    def _is_unique_violation(self, exc: IntegrityError) -> bool:
        message = str(getattr(exc, "orig", exc)).lower()
        return "unique" in message or "duplicate" in message

    # --- Lecture ---

    def find_by(self, db: Session, **filters) -> Optional[Any]:
        stmt = select(self.model).filter_by(**filters).limit(1)
        return db.execute(stmt).scalars().first()

    def list(self, db: Session, *criteria, order_by=None, limit: Optional[int] = None) -> List[Any]:
        stmt = select(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        if order_by is not None:
            stmt = stmt.order_by(*order_by) if isinstance(order_by, (list, tuple)) else stmt.order_by(order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        with self.guard(db, "list"):
            return list(db.execute(stmt).scalars().all())

    def get(self, db: Session, raw_id: Any) -> Optional[Any]:
        """Retourne l'enregistrement ou None (aucune erreur si absent)."""
        record_id = parse_id(raw_id)
        with self.guard(db, "get", id=record_id):
            return db.get(self.model, record_id)

    # --- Écriture ---

    def create(self, db: Session, data: Dict[str, Any]) -> Any:
        self.validate(data)
        self.check_unique(db, data)

        record = self.model(**self._pick(data))
        with self.guard(db, "create", **self._unique_context(data)):
            db.add(record)
            db.commit()
            db.refresh(record)
        logger.info("%s créé : %s", self.name, getattr(record, self.primary_key))
        return record

    def update(self, db: Session, raw_id: Any, data: Dict[str, Any], partial: bool = False) -> Any:
        """
        Met à jour un enregistrement existant puis le relit depuis la base.
        Ordre des contrôles : id, champs obligatoires, unicité, existence.
        """
        record_id = parse_id(raw_id)
        if not partial:
            self.validate(data)
        self.check_unique(db, data, exclude_id=record_id)

        with self.guard(db, "update", id=record_id):
            record = db.get(self.model, record_id)
        if record is None:
            raise NotFoundError(self.not_found_message)

        values = self._pick(data)
        with self.guard(db, "update", id=record_id):
            for field, value in values.items():
                setattr(record, field, value)
            db.commit()
            db.refresh(record)
        return record

    def delete(self, db: Session, raw_id: Any) -> bool:
        """
        Supprime l'enregistrement. Idempotent : un enregistrement déjà absent
        n'est pas une erreur. Retourne True si une suppression a eu lieu.
        """
        record_id = parse_id(raw_id)
        with self.guard(db, "delete", id=record_id):
            record = db.get(self.model, record_id)
            if record is None:
                return False
            db.delete(record)
            db.commit()
        logger.info("%s supprimé : %s", self.name, record_id)
        return True

    def _pick(self, data: Dict[str, Any]) -> Dict[str, Any]:
        # Seuls les champs envoyés sont écrits : les valeurs par défaut des colonnes s'appliquent
        return {f: data[f] for f in self.fields if f in data}

    def _unique_context(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if self.unique_field is None:
            return {}
        return {self.unique_field: data.get(self.unique_field)}
