"""Adapters – SQLAlchemy implementation of the generic repository."""
