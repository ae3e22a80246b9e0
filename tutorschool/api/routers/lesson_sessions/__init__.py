"""
Lesson sessions router package.

Exports the router for lesson session endpoints.
"""

from .lesson_sessions_router import router

__all__ = ["router"]
