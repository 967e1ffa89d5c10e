"""Request schemas for course endpoints."""

from __future__ import annotations

from learn2earn.db.models import CamelModel


class CompleteRequest(CamelModel):
    """Answer indexes for an MCQ course, one per question. Unused for video courses."""

    answers: list[int] | None = None
