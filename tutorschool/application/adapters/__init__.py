"""Adapters connecting core logic to boundary implementations."""

from tutorschool.application.adapters.session_store_adapter import SqlAlchemySessionStore

__all__ = ["SqlAlchemySessionStore"]
