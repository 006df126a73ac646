"""Initial schema - repository, role, privilege, content selector, audit entry.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "repository",
        sa.Column("name", sa.String(255), primary_key=True),
        sa.Column("format", sa.String(50), nullable=False),
        sa.Column("url", sa.String(1024), nullable=True),
        sa.Column("online", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_repository_format", "repository", ["format"])

    op.create_table(
        "role",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
    )
    op.create_index("ix_role_name", "role", ["name"], unique=True)

    op.create_table(
        "subject_role",
        sa.Column("subject", sa.String(255), primary_key=True),
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "content_selector",
        sa.Column("name", sa.String(255), primary_key=True),
        sa.Column("type", sa.String(50), nullable=False, server_default="csel"),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("expression", sa.Text(), nullable=False),
    )

    op.create_table(
        "privilege",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("format", sa.String(50), nullable=False, server_default="*"),
        sa.Column("repository", sa.String(255), nullable=False, server_default="*"),
        sa.Column("actions", postgresql.ARRAY(sa.String(20)), nullable=False),
        sa.Column(
            "selector_name",
            sa.String(255),
            sa.ForeignKey("content_selector.name", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.CheckConstraint(
            "type IN ('repository-view', 'repository-content-selector')",
            name="ck_privilege_type",
        ),
        sa.CheckConstraint(
            "(type = 'repository-content-selector') = (selector_name IS NOT NULL)",
            name="ck_privilege_selector",
        ),
    )
    op.create_index("ix_privilege_name", "privilege", ["name"], unique=True)
    op.create_index("ix_privilege_selector_name", "privilege", ["selector_name"])

    op.create_table(
        "role_privilege",
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
        sa.Column(
            "privilege_id",
            sa.UUID(),
            sa.ForeignKey("privilege.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "audit_entry",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("domain", sa.String(100), nullable=False),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("context", sa.String(1024), nullable=False),
        sa.Column("initiator", sa.String(255), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("attributes", postgresql.JSONB(), nullable=False, server_default="{}"),
    )
    op.create_index("ix_audit_entry_timestamp", "audit_entry", ["timestamp"])

    op.execute("""
        INSERT INTO role (id, name, description) VALUES
        (gen_random_uuid(), 'anonymous', 'Unauthenticated access'),
        (gen_random_uuid(), 'admin', 'Full access to all repositories')
    """)
    op.execute("""
        INSERT INTO subject_role (subject, role_id)
        SELECT 'anonymous', id FROM role WHERE name = 'anonymous'
    """)
    op.execute("""
        INSERT INTO privilege (id, name, type, format, repository, actions)
        VALUES (gen_random_uuid(), 'repository-view-*-*-*', 'repository-view', '*', '*', ARRAY['*'])
    """)
    op.execute("""
        INSERT INTO role_privilege (role_id, privilege_id)
        SELECT r.id, p.id FROM role r, privilege p
        WHERE r.name = 'admin' AND p.name = 'repository-view-*-*-*'
    """)


def downgrade() -> None:
    op.drop_table("audit_entry")
    op.drop_table("role_privilege")
    op.drop_table("privilege")
    op.drop_table("content_selector")
    op.drop_table("subject_role")
    op.drop_table("role")
    op.drop_table("repository")
