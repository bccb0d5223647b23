"""base schema, identique au dump de production

Revision ID: 20190118105525
Revises:
Create Date: 2019-01-18 10:55:25

Le schéma reproduit celui du serveur de production, y compris ses
incohérences : certaines tables ont createdAt/updatedAt, d'autres
created_at/updated_at, et la clé étrangère de l'association "student" des
inscriptions s'appelle studentStudentNumber. Ne pas normaliser ces noms.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "20190118105525"
down_revision = None
branch_labels = None
depends_on = None

# Cascade par défaut des associations ; memberships_id_fkey est l'exception
DEFAULT_CASCADE = {"onupdate": "CASCADE", "ondelete": "SET NULL"}

# (nom de contrainte, table, colonne, table référencée, colonne référencée, cascade)
# Noms repris tels quels du dump de la base.
FOREIGN_KEYS = [
    ("configurations_registration_question_set_id_fkey",
     "configurations", "registration_question_set_id", "registration_question_sets", "id", DEFAULT_CASCADE),
    ("configurations_review_question_set1_id_fkey",
     "configurations", "review_question_set1_id", "review_question_sets", "id", DEFAULT_CASCADE),
    ("configurations_review_question_set2_id_fkey",
     "configurations", "review_question_set2_id", "review_question_sets", "id", DEFAULT_CASCADE),
    ("memberships_id_fkey",
     "memberships", "id", "groups", "id", {"onupdate": "CASCADE", "ondelete": "CASCADE"}),
    ("registrations_configuration_id_fkey",
     "registrations", "configuration_id", "configurations", "id", DEFAULT_CASCADE),
    ("registrations_studentStudentNumber_fkey",
     "registrations", "studentStudentNumber", "users", "student_number", DEFAULT_CASCADE),
]

TABLES = [
    "configurations",
    "groups",
    "memberships",
    "registration_question_sets",
    "registrations",
    "review_question_sets",
    "topic_dates",
    "topics",
    "users",
]


def timestamp_columns(camel_case):
    names = ("createdAt", "updatedAt") if camel_case else ("created_at", "updated_at")
    return [sa.Column(name, sa.DateTime(timezone=True), nullable=False) for name in names]


def surrogate_key():
    return sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True)


def upgrade():
    # Tables d'abord : plusieurs se référencent mutuellement, les clés
    # étrangères ne sont ajoutées qu'une fois toutes les tables créées.
    op.create_table(
        "configurations",
        surrogate_key(),
        sa.Column("name", sa.String(255)),
        sa.Column("content", postgresql.JSONB()),
        sa.Column("active", sa.Boolean(), server_default=sa.false()),
        *timestamp_columns(camel_case=False),
        sa.Column("review_question_set1_id", sa.Integer()),
        sa.Column("review_question_set2_id", sa.Integer()),
        sa.Column("registration_question_set_id", sa.Integer()),
    )
    op.create_table(
        "groups",
        surrogate_key(),
        sa.Column("group_name", sa.String(255)),
        *timestamp_columns(camel_case=True),
    )
    op.create_table(
        "memberships",
        surrogate_key(),
        sa.Column("role", sa.String(255)),
        *timestamp_columns(camel_case=False),
        sa.Column("student_number", sa.String(255)),
    )
    op.create_table(
        "registration_question_sets",
        surrogate_key(),
        sa.Column("name", sa.String(255)),
        sa.Column("questions", postgresql.JSONB()),
        *timestamp_columns(camel_case=True),
    )
    op.create_table(
        "registrations",
        surrogate_key(),
        sa.Column("preferred_topics", postgresql.JSONB()),
        sa.Column("questions", postgresql.JSONB()),
        *timestamp_columns(camel_case=True),
        sa.Column("configuration_id", sa.Integer()),
        sa.Column("studentStudentNumber", sa.String(255)),
    )
    op.create_table(
        "review_question_sets",
        surrogate_key(),
        sa.Column("name", sa.String(255)),
        sa.Column("questions", postgresql.JSONB()),
        *timestamp_columns(camel_case=True),
    )
    op.create_table(
        "topic_dates",
        surrogate_key(),
        sa.Column("dates", postgresql.JSONB()),
        *timestamp_columns(camel_case=True),
    )
    op.create_table(
        "topics",
        surrogate_key(),
        sa.Column("active", sa.Boolean(), server_default=sa.false()),
        sa.Column("content", postgresql.JSONB()),
        sa.Column("acronym", sa.String(255)),
        sa.Column("secret_id", sa.String(255)),
        *timestamp_columns(camel_case=True),
    )
    op.create_table(
        "users",
        sa.Column("student_number", sa.String(255), primary_key=True),
        sa.Column("username", sa.String(255)),
        sa.Column("first_names", sa.String(255)),
        sa.Column("last_name", sa.String(255)),
        sa.Column("email", sa.String(255)),
        sa.Column("admin", sa.Boolean(), server_default=sa.false()),
        *timestamp_columns(camel_case=True),
    )

    for name, table, column, referenced_table, referenced_column, cascade in FOREIGN_KEYS:
        op.create_foreign_key(
            name,
            table,
            referenced_table,
            [column],
            [referenced_column],
            onupdate=cascade["onupdate"],
            ondelete=cascade["ondelete"],
        )


def downgrade():
    # Contraintes d'abord, pour supprimer les tables sans violer l'intégrité
    for name, table, *_ in FOREIGN_KEYS:
        op.drop_constraint(name, table, type_="foreignkey")

    for table in TABLES:
        op.drop_table(table)
