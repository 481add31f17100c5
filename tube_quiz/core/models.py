"""
Record types shared by the quiz, feed and award logic.

Field names are snake_case in Python and camelCase once persisted, so the
stored JSON keeps the layout `{id, name, sxp, streak, lastPostDate}` for the
user and `{id, userId, userName, caption, createdAt, mediaType, media,
sxpAward}` for posts.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_store(self) -> dict:
        """JSON-ready dict using the persisted (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)


class User(_Record):
    """The single local user."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    sxp: int = Field(0, ge=0)
    streak: int = Field(0, ge=0)
    last_post_date: Optional[datetime] = None


class Post(_Record):
    """A feed entry. Never edited once created."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    user_name: str
    caption: str = ""
    created_at: datetime
    media_type: Optional[MediaType] = None
    media_ref: Optional[str] = Field(None, alias="media")
    sxp_award: int = 0


class Session(_Record):
    title: str
    focus: str
    duration_minutes: int


class QuizPlan(_Record):
    summary: str
    intensity: str
    sessions: List[Session] = Field(default_factory=list)
