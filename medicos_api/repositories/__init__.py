"""Repositories: SQLAlchemy implementations of core/repository_protocols.py."""
