"""Seed the certificate email template

Revision ID: 20260110_0002
Revises: 20260110_0001
Create Date: 2026-01-10

"""
import uuid

from alembic import op
from sqlalchemy.sql import table, column
from sqlalchemy import String


# revision identifiers, used by Alembic.
revision = '20260110_0002'
down_revision = '20260110_0001'
branch_labels = None
depends_on = None


# Placeholders: app_name, username, scope_name, points_earned, certificate_url
TEMPLATES = [
    {
        "name": "certificate_issued",
        "subject": "{app_name} - Your certificate for {scope_name}",
        "body": (
            "<p>Hi {username},</p>"
            "<p>You earned {points_earned} points exploring {scope_name}.</p>"
            "<p><a href=\"{certificate_url}\">Download your certificate</a></p>"
            "<p>The {app_name} Team</p>"
        ),
    },
]


def upgrade():
    email_templates = table(
        "email_templates",
        column("id", String),
        column("name", String),
        column("subject", String),
        column("body", String),
    )
    op.bulk_insert(
        email_templates,
        [{"id": str(uuid.uuid4()), **template} for template in TEMPLATES],
    )


def downgrade():
    names = ", ".join(f"'{t['name']}'" for t in TEMPLATES)
    op.execute(f"DELETE FROM email_templates WHERE name IN ({names})")
