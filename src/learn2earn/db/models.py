"""Persisted entities.

Field names are snake_case in Python and camelCase on disk and over the wire,
matching the layout of the JSON data file.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SYSTEM = "SYSTEM"

TX_REGISTER = "register"
TX_REWARD = "reward"
TX_TRANSFER = "transfer"
TX_VERIFY = "verify"


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


class User(CamelModel):
    email: str
    password: str
    display_name: str
    wallet_address: str


class EarnedToken(CamelModel):
    """A course completion credential held in a wallet."""

    course_id: str
    title: str
    token_value: int
    earned_at: int
    verified: bool = False
    verified_by: str | None = None


class Wallet(CamelModel):
    wallet_address: str
    balance: float = 0
    tokens: list[EarnedToken] = Field(default_factory=list)
    resume_value: int = 0

    def find_token(self, course_id: str) -> EarnedToken | None:
        for token in self.tokens:
            if token.course_id == course_id:
                return token
        return None


class Transaction(CamelModel):
    """Immutable ledger record."""

    model_config = ConfigDict(frozen=True)

    from_: str = Field(alias="from")
    to: str
    amount: float
    type: str
    memo: str = ""
    timestamp: int


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class CourseBase(CamelModel):
    id: str
    title: str
    platform: str
    platform_initial: str
    token_value: int
    reward_amount: int
    duration_hours: int


class VideoCourse(CourseBase):
    type: Literal["video"] = "video"
    video_url: str


class Mcq(CamelModel):
    question: str = Field(alias="q")
    options: list[str]
    correct: int


class McqCourse(CourseBase):
    type: Literal["mcq"] = "mcq"
    content: list[str] = Field(default_factory=list)
    mcqs: list[Mcq] = Field(default_factory=list)


Course = Annotated[VideoCourse | McqCourse, Field(discriminator="type")]
