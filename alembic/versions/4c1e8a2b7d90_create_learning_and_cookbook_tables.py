"""create learning and cookbook tables

Revision ID: 4c1e8a2b7d90
Revises:
Create Date: 2026-01-05

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c1e8a2b7d90"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

difficulty_level = sa.Enum("BEGINNER", "INTERMEDIATE", "EXPERIENCED", name="difficulty_level")
tutorial_category = sa.Enum("PRACTICAL", "THEORETICAL", "EQUIPMENT", name="tutorial_category")


def timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
            onupdate=sa.func.now(),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        *timestamps(),
    )

    op.create_table(
        "profiles",
        sa.Column(
            "id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("username", sa.String(20), nullable=False, unique=True, index=True),
        sa.Column("selected_level", difficulty_level, nullable=False),
        *timestamps(),
    )

    # Published content
    op.create_table(
        "tutorials",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("category", tutorial_category, nullable=False),
        sa.Column("level", difficulty_level, nullable=False),
        sa.Column("difficulty_weight", sa.SmallInteger(), nullable=False),
        sa.Column("summary", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("steps", sa.JSON(), nullable=False),
        sa.Column("practice_recommendations", sa.Text(), nullable=False),
        sa.Column("key_takeaways", sa.Text(), nullable=False),
        *timestamps(),
        sa.CheckConstraint(
            "difficulty_weight BETWEEN 1 AND 5", name="ck_tutorials_difficulty_weight"
        ),
    )
    op.create_index(
        "ix_tutorials_level_weight_created",
        "tutorials",
        ["level", "difficulty_weight", "created_at"],
    )
    op.create_index("ix_tutorials_created_at", "tutorials", ["created_at"])

    op.create_table(
        "articles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("level", difficulty_level, nullable=False),
        sa.Column("difficulty_weight", sa.SmallInteger(), nullable=False),
        sa.Column("summary", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("key_takeaways", sa.Text(), nullable=False),
        *timestamps(),
        sa.CheckConstraint("difficulty_weight BETWEEN 1 AND 5", name="ck_articles_difficulty_weight"),
    )
    op.create_index(
        "ix_articles_level_weight_created",
        "articles",
        ["level", "difficulty_weight", "created_at"],
    )
    op.create_index("ix_articles_created_at", "articles", ["created_at"])

    # Completion records, one row per (user, content) pair
    op.create_table(
        "user_tutorials",
        sa.Column(
            "user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
        ),
        sa.Column(
            "tutorial_id",
            sa.Uuid(),
            sa.ForeignKey("tutorials.id", ondelete="CASCADE"),
            primary_key=True,
            index=True,
        ),
        sa.Column(
            "completed_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )

    op.create_table(
        "user_articles",
        sa.Column(
            "user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
        ),
        sa.Column(
            "article_id",
            sa.Uuid(),
            sa.ForeignKey("articles.id", ondelete="CASCADE"),
            primary_key=True,
            index=True,
        ),
        sa.Column(
            "completed_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )

    op.create_table(
        "cookbook_entries",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *timestamps(),
    )


def downgrade() -> None:
    op.drop_table("cookbook_entries")
    op.drop_table("user_articles")
    op.drop_table("user_tutorials")
    op.drop_index("ix_articles_created_at", table_name="articles")
    op.drop_index("ix_articles_level_weight_created", table_name="articles")
    op.drop_table("articles")
    op.drop_index("ix_tutorials_created_at", table_name="tutorials")
    op.drop_index("ix_tutorials_level_weight_created", table_name="tutorials")
    op.drop_table("tutorials")
    op.drop_table("profiles")
    op.drop_table("users")
    tutorial_category.drop(op.get_bind(), checkfirst=True)
    difficulty_level.drop(op.get_bind(), checkfirst=True)
