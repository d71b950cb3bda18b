"""Create users, galleries and halls

Revision ID: 3b1f6c2d9a40
Revises:
Create Date: 2026-10-19 10:12:03.518204

"""
from alembic import op
import sqlalchemy as sa


revision = '3b1f6c2d9a40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nickname", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("contact", sa.String(), nullable=True),
        sa.Column("password_hash", sa.String(), nullable=False),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_nickname", "users", ["nickname"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "galleries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("author_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("nickname", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("poster_url", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_galleries_id", "galleries", ["id"])
    op.create_index("ix_galleries_author_id", "galleries", ["author_id"])
    op.create_index("ix_galleries_nickname", "galleries", ["nickname"])
    op.create_index("ix_galleries_category", "galleries", ["category"])

    # No ON DELETE CASCADE: halls are deleted by the API before their gallery
    op.create_table(
        "halls",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("gallery_id", sa.Integer(), sa.ForeignKey("galleries.id"), nullable=False),
        sa.Column("hall_name", sa.String(), nullable=False),
        sa.Column("images_data", sa.JSON(), nullable=False),
    )
    op.create_index("ix_halls_id", "halls", ["id"])
    op.create_index("ix_halls_gallery_id", "halls", ["gallery_id"])


def downgrade():
    op.drop_table("halls")
    op.drop_table("galleries")
    op.drop_table("users")
