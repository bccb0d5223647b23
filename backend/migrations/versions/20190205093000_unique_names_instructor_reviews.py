"""unicité des noms de groupe et de jeu d'évaluation, table instructor_reviews

Revision ID: 20190205093000
Revises: 20190118105525
Create Date: 2019-02-05 09:30:00

Le contrôle d'unicité applicatif (lecture puis insertion) laisse passer deux
créations simultanées du même nom. Les contraintes ci-dessous ferment cette
fenêtre ; l'application convertit la violation en erreur de conflit.
Les doublons déjà présents doivent être renommés avant d'appliquer la révision.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "20190205093000"
down_revision = "20190118105525"
branch_labels = None
depends_on = None


def upgrade():
    op.create_unique_constraint("groups_group_name_key", "groups", ["group_name"])
    op.create_unique_constraint("review_question_sets_name_key", "review_question_sets", ["name"])

    op.create_table(
        "instructor_reviews",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("answer_sheet", postgresql.JSONB()),
        sa.Column("createdAt", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updatedAt", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade():
    op.drop_table("instructor_reviews")
    op.drop_constraint("review_question_sets_name_key", "review_question_sets", type_="unique")
    op.drop_constraint("groups_group_name_key", "groups", type_="unique")
