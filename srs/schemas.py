"""
Pydantic models for data arriving from outside the core.

Backups, imports and review submissions are validated here before they reach
the scheduler or a store. Field aliases accept the camelCase keys used by the
app's backup files.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from srs.constants import DEFAULT_EASE, Grade, MAX_EASE, MIN_EASE
from srs.errors import InvalidGradeError
from srs.items import LearningItem, WordContent


def parse_grade(value: Any) -> Grade:
    """
    Turn an external grade value into a Grade.

    Accepts Grade members and their names in any case.

    Raises:
        InvalidGradeError: value is not FORGOT, HARD or EASY
    """
    if isinstance(value, Grade):
        return value
    if isinstance(value, str):
        try:
            return Grade(value.strip().upper())
        except ValueError:
            pass
    raise InvalidGradeError(value)


# ---- Review Submission ----

class ReviewRequest(BaseModel):
    """A single grading submitted by the review UI."""
    item_id: str = Field(..., min_length=1)
    grade: Grade

    @field_validator("grade", mode="before")
    @classmethod
    def _parse_grade(cls, value: Any) -> Grade:
        return parse_grade(value)


# ---- Item Records ----

class ItemRecord(BaseModel):
    """
    An externally supplied learning item (backup row, import record).
    """
    id: str = Field(..., min_length=1)
    owner_id: str = Field(default="", alias="userId")

    # Content
    word: str
    ipa: str = ""
    meaning: str = Field(default="", alias="meaningVi")
    example: str = ""
    note: str = ""
    tags: list[str] = Field(default_factory=list)
    is_idiom: bool = Field(default=False, alias="isIdiom")
    is_phrasal_verb: bool = Field(default=False, alias="isPhrasalVerb")
    is_collocation: bool = Field(default=False, alias="isCollocation")
    is_standard_phrase: bool = Field(default=False, alias="isStandardPhrase")
    needs_pronunciation_focus: bool = Field(default=False, alias="needsPronunciationFocus")
    is_passive: bool = Field(default=False, alias="isPassive")

    # Scheduling state
    next_review_at: int = Field(..., alias="nextReview")
    interval_days: int = Field(default=0, ge=0, alias="interval")
    ease_factor: float = Field(default=DEFAULT_EASE, alias="easeFactor")
    consecutive_correct: int = Field(default=0, ge=0, alias="consecutiveCorrect")
    forgot_count: int = Field(default=0, ge=0, alias="forgotCount")
    last_review_at: Optional[int] = Field(default=None, alias="lastReview")

    created_at: int = Field(..., alias="createdAt")
    updated_at: int = Field(default=0, alias="updatedAt")

    class Config:
        populate_by_name = True

    @field_validator("ease_factor")
    @classmethod
    def _clamp_ease(cls, value: float) -> float:
        return min(MAX_EASE, max(MIN_EASE, value))

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [tag.strip() for tag in value.split(",") if tag.strip()]
        return value

    def to_item(self) -> LearningItem:
        content = WordContent(
            word=self.word,
            ipa=self.ipa,
            meaning=self.meaning,
            example=self.example,
            note=self.note,
            tags=list(self.tags),
            is_idiom=self.is_idiom,
            is_phrasal_verb=self.is_phrasal_verb,
            is_collocation=self.is_collocation,
            is_standard_phrase=self.is_standard_phrase,
            needs_pronunciation_focus=self.needs_pronunciation_focus,
            is_passive=self.is_passive,
        )
        return LearningItem(
            id=self.id,
            owner_id=self.owner_id,
            content=content,
            next_review_at=self.next_review_at,
            interval_days=self.interval_days,
            ease_factor=self.ease_factor,
            consecutive_correct=self.consecutive_correct,
            forgot_count=self.forgot_count,
            created_at=self.created_at,
            updated_at=self.updated_at,
            last_review_at=self.last_review_at,
        )


def parse_item_records(rows: list[dict], owner_id: Optional[str] = None) -> list[LearningItem]:
    """
    Validate raw rows into items, optionally re-homing them to owner_id.
    """
    items = []
    for row in rows:
        record = ItemRecord.model_validate(row)
        if owner_id is not None:
            record.owner_id = owner_id
        items.append(record.to_item())
    return items
