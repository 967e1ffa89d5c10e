"""Course service: catalog reads, completion rewards, recommendations and certificates."""

from __future__ import annotations

import hashlib
import time
from typing import TYPE_CHECKING, Any

import structlog

from learn2earn.db.models import SYSTEM, TX_REWARD, CamelModel, Course, EarnedToken, McqCourse
from learn2earn.errors import NotFoundError, ValidationError
from learn2earn.wallet.ledger import record_transaction
from learn2earn.wallet.service import get_wallet

if TYPE_CHECKING:
    from learn2earn.database import Store

logger = structlog.get_logger()


class CompletionResult(CamelModel):
    course_id: str
    passed: bool
    already_completed: bool = False
    score: int = 0
    total: int = 0
    reward_awarded: float = 0
    balance: float = 0


# --- Catalog ---


def list_courses(store: Store) -> list[Course]:
    return list(store.courses)


def get_course(store: Store, course_id: str) -> Course:
    for course in store.courses:
        if course.id == course_id:
            return course
    raise NotFoundError("course not found")


def public_course(course: Course) -> dict[str, Any]:
    """Serialize a course for clients, without the MCQ answer key."""
    data = course.model_dump(by_alias=True)
    for mcq in data.get("mcqs", []):
        mcq.pop("correct", None)
    return data


# --- Completion ---


def _grade(course: McqCourse, answers: list[int] | None) -> int:
    if answers is None or len(answers) != len(course.mcqs):
        msg = f"expected {len(course.mcqs)} answers"
        raise ValidationError(msg)
    return sum(1 for mcq, answer in zip(course.mcqs, answers) if mcq.correct == answer)


def complete_course(
    store: Store,
    email: str,
    course_id: str,
    answers: list[int] | None = None,
) -> CompletionResult:
    """Claim the reward for a course.

    MCQ courses must be answered fully and correctly; a failed attempt changes
    nothing. A course already in the wallet is not rewarded twice.
    """
    course = get_course(store, course_id)
    wallet = get_wallet(store, email)

    if wallet.find_token(course.id) is not None:
        return CompletionResult(
            course_id=course.id,
            passed=True,
            already_completed=True,
            balance=wallet.balance,
        )

    score = total = 0
    if isinstance(course, McqCourse):
        total = len(course.mcqs)
        score = _grade(course, answers)
        if score < total:
            logger.info("course_attempt_failed", course_id=course.id, score=score, total=total)
            return CompletionResult(
                course_id=course.id,
                passed=False,
                score=score,
                total=total,
                balance=wallet.balance,
            )

    wallet.tokens.append(
        EarnedToken(
            course_id=course.id,
            title=course.title,
            token_value=course.token_value,
            earned_at=int(time.time() * 1000),
        )
    )
    wallet.resume_value += course.token_value
    wallet.balance += course.reward_amount
    record_transaction(
        store,
        from_=SYSTEM,
        to=wallet.wallet_address,
        amount=course.reward_amount,
        type_=TX_REWARD,
        memo=f"completed {course.title}",
    )
    logger.info("course_completed", course_id=course.id, reward=course.reward_amount)
    return CompletionResult(
        course_id=course.id,
        passed=True,
        score=score,
        total=total,
        reward_awarded=course.reward_amount,
        balance=wallet.balance,
    )


# --- Recommendations & certificates ---


def recommend_courses(store: Store, email: str, limit: int = 3) -> list[Course]:
    """Courses the user has not earned yet, best reward first."""
    wallet = get_wallet(store, email)
    earned = {token.course_id for token in wallet.tokens}
    remaining = [course for course in store.courses if course.id not in earned]
    remaining.sort(key=lambda c: (-c.reward_amount, c.id))
    return remaining[:limit]


def build_certificate(store: Store, email: str, course_id: str) -> dict[str, Any]:
    """Certificate document for a course the user has earned."""
    user = store.users[email]
    wallet = get_wallet(store, email)
    token = wallet.find_token(course_id)
    if token is None:
        raise NotFoundError("no certificate for this course")
    course = get_course(store, course_id)

    certificate_id = hashlib.sha256(f"{wallet.wallet_address}:{course.id}".encode()).hexdigest()[:16]
    return {
        "certificateId": certificate_id,
        "courseId": course.id,
        "courseTitle": course.title,
        "platform": course.platform,
        "durationHours": course.duration_hours,
        "holder": user.display_name,
        "email": user.email,
        "walletAddress": wallet.wallet_address,
        "tokenValue": token.token_value,
        "issuedAt": token.earned_at,
        "verified": token.verified,
    }
