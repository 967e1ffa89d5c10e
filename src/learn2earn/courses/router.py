"""Course catalog API endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from learn2earn.auth.dependencies import get_current_email
from learn2earn.config import get_settings
from learn2earn.courses.schemas import CompleteRequest
from learn2earn.courses.service import (
    CompletionResult,
    build_certificate,
    complete_course,
    get_course,
    list_courses,
    public_course,
    recommend_courses,
)
from learn2earn.database import Store, get_store

router = APIRouter(prefix="/api", tags=["Courses"])


@router.get("/courses")
async def courses(
    _email: str = Depends(get_current_email),
    store: Store = Depends(get_store),
) -> dict[str, Any]:
    """List the catalog."""
    return {"courses": [public_course(c) for c in list_courses(store)]}


@router.get("/courses/{course_id}")
async def course_detail(
    course_id: str,
    _email: str = Depends(get_current_email),
    store: Store = Depends(get_store),
) -> dict[str, Any]:
    return public_course(get_course(store, course_id))


@router.post("/courses/{course_id}/complete", response_model=CompletionResult)
async def complete(
    course_id: str,
    body: CompleteRequest | None = Body(default=None),
    email: str = Depends(get_current_email),
    store: Store = Depends(get_store),
) -> CompletionResult:
    """Claim a course reward (MCQ courses are graded first)."""
    result = complete_course(store, email, course_id, answers=body.answers if body else None)
    if result.passed and not result.already_completed:
        store.commit()
    return result


@router.get("/recommendations")
async def recommendations(
    email: str = Depends(get_current_email),
    store: Store = Depends(get_store),
) -> dict[str, Any]:
    """Courses not yet completed, highest reward first."""
    limit = get_settings().recommendation_limit
    return {"courses": [public_course(c) for c in recommend_courses(store, email, limit=limit)]}


@router.get("/certificates/{course_id}")
async def certificate(
    course_id: str,
    email: str = Depends(get_current_email),
    store: Store = Depends(get_store),
) -> dict[str, Any]:
    """Certificate for a completed course."""
    return build_certificate(store, email, course_id)
