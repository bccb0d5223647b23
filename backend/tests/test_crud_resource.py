"""
Tests unitaires de la ressource CRUD gÃ©nÃ©rique (BDD mockÃ©e).
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from topic_registration.errors import ConflictError, InternalError, NotFoundError, ValidationError
from topic_registration.models.question_set import ReviewQuestionSet
from topic_registration.services.crud import is_blank, parse_id
from topic_registration.services.group_service import groups
from topic_registration.services.question_set_service import review_question_sets


# --- Helpers ---

def make_set_mock(set_id=1, name="Midterm"):
    s = MagicMock(spec=ReviewQuestionSet)
    s.id = set_id
    s.name = name
    return s


def make_db_mock(existing=None, target=None):
    db = MagicMock()
    db.execute.return_value.scalars.return_value.first.return_value = existing
    db.execute.return_value.scalars.return_value.all.return_value = []
    db.get.return_value = target
    return db


# --- is_blank / parse_id ---

@pytest.mark.parametrize("value", [None, "", False, 0])
def test_is_blank_valeurs_absentes(value):
    assert is_blank(value)


@pytest.mark.parametrize("value", ["Alpha", {}, [], {"start": "2019-01-01"}, True, 3])
def test_is_blank_valeurs_presentes(value):
    assert not is_blank(value)


def test_parse_id_entier():
    assert parse_id("42") == 42
    assert parse_id(7) == 7


@pytest.mark.parametrize("raw", ["abc", "1.5", "", None, True, "1_0", "\u0663"])
def test_parse_id_invalide(raw):
    with pytest.raises(ValidationError) as exc:
        parse_id(raw)
    assert exc.value.message == "invalid id"


# --- create ---

def test_create_sans_nom_aucune_ecriture():
    db = make_db_mock()
    with pytest.raises(ValidationError) as exc:
        groups.create(db, {})
    assert exc.value.message == "group name undefined"
    db.add.assert_not_called()
    db.commit.assert_not_called()


def test_create_nom_vide_rejete():
    db = make_db_mock()
    with pytest.raises(ValidationError):
        groups.create(db, {"group_name": ""})


def test_create_nom_deja_pris():
    db = make_db_mock(existing=MagicMock(id=3))
    with pytest.raises(ConflictError) as exc:
        groups.create(db, {"group_name": "Alpha"})
    assert exc.value.message == "a group with that name already exists"
    assert exc.value.status_code == 400
    db.add.assert_not_called()


def test_create_succes():
    db = make_db_mock()
    group = groups.create(db, {"group_name": "Alpha"})
    assert group.group_name == "Alpha"
    db.add.assert_called_once_with(group)
    db.commit.assert_called_once()
    db.refresh.assert_called_once_with(group)


def test_create_course_concurrente_convertie_en_conflit():
    """Le contrÃ´le applicatif passe mais la contrainte unique refuse au commit."""
    db = make_db_mock()
    db.commit.side_effect = IntegrityError(
        "INSERT", {}, Exception('duplicate key value violates unique constraint "groups_group_name_key"')
    )
    with pytest.raises(ConflictError):
        groups.create(db, {"group_name": "Alpha"})
    db.rollback.assert_called_once()


def test_create_erreur_base_message_generique():
    db = make_db_mock()
    db.commit.side_effect = OperationalError("INSERT", {}, Exception("connection reset"))
    with pytest.raises(InternalError) as exc:
        groups.create(db, {"group_name": "Alpha"})
    assert exc.value.message == "database error"
    assert "connection reset" not in exc.value.message
    db.rollback.assert_called_once()


# --- update ---

def test_update_id_invalide():
    db = make_db_mock()
    with pytest.raises(ValidationError) as exc:
        review_question_sets.update(db, "abc", {"name": "X"})
    assert exc.value.message == "invalid id"
    db.get.assert_not_called()


def test_update_nom_manquant():
    db = make_db_mock(target=make_set_mock())
    with pytest.raises(ValidationError) as exc:
        review_question_sets.update(db, "1", {"questions": []})
    assert exc.value.message == "name undefined"


def test_update_nom_pris_par_un_autre_jeu():
    db = make_db_mock(existing=make_set_mock(set_id=2, name="Final"), target=make_set_mock())
    with pytest.raises(ConflictError):
        review_question_sets.update(db, "1", {"name": "Final"})
    db.commit.assert_not_called()


def test_update_meme_nom_sur_le_meme_jeu_accepte():
    target = make_set_mock(set_id=1, name="Midterm")
    db = make_db_mock(existing=target, target=target)
    result = review_question_sets.update(db, "1", {"name": "Midterm", "questions": ["Q2"]})
    assert result is target
    assert target.questions == ["Q2"]
    db.commit.assert_called_once()
    db.refresh.assert_called_once_with(target)


def test_update_jeu_introuvable():
    db = make_db_mock(target=None)
    with pytest.raises(NotFoundError) as exc:
        review_question_sets.update(db, "99", {"name": "Midterm"})
    assert exc.value.status_code == 400
    assert exc.value.message == "no review question set with that id"


# --- delete ---

def test_delete_jeu_existant():
    target = make_set_mock()
    db = make_db_mock(target=target)
    assert review_question_sets.delete(db, "1") is True
    db.delete.assert_called_once_with(target)
    db.commit.assert_called_once()


def test_delete_jeu_deja_supprime():
    db = make_db_mock(target=None)
    assert review_question_sets.delete(db, "1") is False
    db.delete.assert_not_called()
    db.commit.assert_not_called()


def test_delete_id_invalide():
    with pytest.raises(ValidationError):
        review_question_sets.delete(make_db_mock(), "un")


# --- get / list ---

def test_get_absent_retourne_none():
    db = make_db_mock(target=None)
    assert review_question_sets.get(db, "5") is None


def test_list_erreur_base():
    db = make_db_mock()
    db.execute.side_effect = OperationalError("SELECT", {}, Exception("boom"))
    with pytest.raises(InternalError):
        review_question_sets.list(db)
