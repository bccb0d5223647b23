"""
Tests des révisions alembic, rendues en SQL PostgreSQL hors connexion.
"""

import importlib.util
import io
from pathlib import Path

from alembic.migration import MigrationContext
from alembic.operations import Operations

VERSIONS = Path(__file__).resolve().parents[1] / "migrations" / "versions"


def load_revision(filename):
    spec = importlib.util.spec_from_file_location(filename, VERSIONS / filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def render(fn):
    """Exécute upgrade()/downgrade() en mode --sql et retourne les instructions."""
    buf = io.StringIO()
    ctx = MigrationContext.configure(
        dialect_name="postgresql",
        opts={"as_sql": True, "output_buffer": buf},
    )
    with Operations.context(ctx):
        fn()
    return [s.strip() for s in buf.getvalue().split(";") if s.strip()]


def statement_with(statements, fragment):
    (found,) = [s for s in statements if fragment in s]
    return found


base = load_revision("20190118105525_base.py")
unique_names = load_revision("20190205093000_unique_names_instructor_reviews.py")


def test_chaine_des_revisions():
    assert base.down_revision is None
    assert unique_names.down_revision == base.revision


def test_base_cree_toutes_les_tables_avant_les_contraintes():
    statements = render(base.upgrade)
    creates = [i for i, s in enumerate(statements) if s.startswith("CREATE TABLE")]
    alters = [i for i, s in enumerate(statements) if s.startswith("ALTER TABLE")]

    assert len(creates) == 9
    assert len(alters) == 6
    assert max(creates) < min(alters)


def test_base_horodatage_par_table():
    statements = render(base.upgrade)
    groups = statement_with(statements, "CREATE TABLE groups")
    configurations = statement_with(statements, "CREATE TABLE configurations")

    assert '"createdAt"' in groups and '"updatedAt"' in groups
    assert "created_at" in configurations and "updated_at" in configurations
    assert "NOT NULL" in groups


def test_base_pas_d_unicite_sur_les_noms():
    statements = render(base.upgrade)
    assert "UNIQUE" not in statement_with(statements, "CREATE TABLE groups")


def test_base_cascades():
    statements = render(base.upgrade)

    membership = statement_with(statements, "memberships_id_fkey")
    assert "REFERENCES groups (id)" in membership
    assert "ON DELETE CASCADE" in membership
    assert "ON UPDATE CASCADE" in membership

    for name in [
        "configurations_registration_question_set_id_fkey",
        "configurations_review_question_set1_id_fkey",
        "configurations_review_question_set2_id_fkey",
        "registrations_configuration_id_fkey",
        "registrations_studentStudentNumber_fkey",
    ]:
        statement = statement_with(statements, name)
        assert "ON DELETE SET NULL" in statement
        assert "ON UPDATE CASCADE" in statement


def test_base_downgrade_contraintes_avant_tables():
    statements = render(base.downgrade)
    drops_constraint = [i for i, s in enumerate(statements) if "DROP CONSTRAINT" in s]
    drops_table = [i for i, s in enumerate(statements) if s.startswith("DROP TABLE")]

    assert len(drops_constraint) == 6
    assert len(drops_table) == 9
    assert max(drops_constraint) < min(drops_table)


def test_seconde_revision():
    statements = render(unique_names.upgrade)

    assert "UNIQUE (group_name)" in statement_with(statements, "groups_group_name_key")
    assert "UNIQUE (name)" in statement_with(statements, "review_question_sets_name_key")
    assert "answer_sheet JSONB" in statement_with(statements, "CREATE TABLE instructor_reviews")
