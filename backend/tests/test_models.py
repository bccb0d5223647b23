"""
Tests du schéma déclaré par les modèles : noms de colonnes et cascades.
"""

import pytest

import topic_registration.models  # noqa: F401
from topic_registration.database import Base


def column_names(table):
    return {c.name for c in Base.metadata.tables[table].columns}


def foreign_key(table, column):
    (fk,) = Base.metadata.tables[table].c[column].foreign_keys
    return fk


@pytest.mark.parametrize("table", [
    "groups", "users", "topics", "topic_dates", "review_question_sets",
    "registration_question_sets", "registrations", "instructor_reviews",
])
def test_horodatage_camel_case(table):
    assert {"createdAt", "updatedAt"} <= column_names(table)


@pytest.mark.parametrize("table", ["configurations", "memberships"])
def test_horodatage_snake_case(table):
    names = column_names(table)
    assert {"created_at", "updated_at"} <= names
    assert "createdAt" not in names


def test_horodatage_non_null():
    table = Base.metadata.tables["review_question_sets"]
    assert table.c.createdAt.nullable is False
    assert table.c.updatedAt.nullable is False


def test_topics_colonnes_de_production():
    assert {"id", "secret_id", "active", "content", "acronym"} <= column_names("topics")


def test_users_cle_naturelle():
    table = Base.metadata.tables["users"]
    assert [c.name for c in table.primary_key.columns] == ["student_number"]


def test_membership_cascade_sur_suppression_du_groupe():
    fk = foreign_key("memberships", "id")
    assert fk.name == "memberships_id_fkey"
    assert fk.column.table.name == "groups"
    assert fk.ondelete == "CASCADE"
    assert fk.onupdate == "CASCADE"


@pytest.mark.parametrize("table,column,name", [
    ("configurations", "review_question_set1_id", "configurations_review_question_set1_id_fkey"),
    ("configurations", "review_question_set2_id", "configurations_review_question_set2_id_fkey"),
    ("configurations", "registration_question_set_id", "configurations_registration_question_set_id_fkey"),
    ("registrations", "configuration_id", "registrations_configuration_id_fkey"),
    ("registrations", "studentStudentNumber", "registrations_studentStudentNumber_fkey"),
])
def test_cascade_par_defaut(table, column, name):
    fk = foreign_key(table, column)
    assert fk.name == name
    assert fk.ondelete == "SET NULL"
    assert fk.onupdate == "CASCADE"


def test_noms_uniques():
    assert Base.metadata.tables["groups"].c.group_name.unique
    assert Base.metadata.tables["review_question_sets"].c.name.unique
