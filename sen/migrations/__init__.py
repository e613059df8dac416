"""Alembic migration environment for the SEN database."""
