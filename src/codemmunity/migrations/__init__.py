"""Alembic environment and revisions for the Codemmunity schema."""
