"""Typed access to the persisted user and post records."""

from __future__ import annotations

from typing import List

from pydantic import ValidationError

from tube_quiz.config import settings
from tube_quiz.core.models import Post, User
from tube_quiz.infra import log_utils
from .store import KeyValueStore


def default_user() -> User:
    return User(id=settings.DEFAULT_USER_ID, name=settings.DEFAULT_USER_NAME)


class StateRepository:
    """Loads and saves the two app records over any KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    # --- User ------------------------------------------------------------
    def load_user(self) -> User:
        raw = self.store.load(settings.USER_KEY, None)
        if raw is None:
            return default_user()
        try:
            return User.model_validate(raw)
        except ValidationError as e:
            log_utils.log_message(f"Stored user is invalid, using default: {e}", "WARN", source="state")
            return default_user()

    def save_user(self, user: User) -> None:
        self.store.save(settings.USER_KEY, user.to_store())

    # --- Posts -----------------------------------------------------------
    def load_posts(self) -> List[Post]:
        raw = self.store.load(settings.POSTS_KEY, [])
        if not isinstance(raw, list):
            log_utils.log_message("Stored posts are not a list, using empty feed.", "WARN", source="state")
            return []
        posts: List[Post] = []
        for entry in raw:
            try:
                posts.append(Post.model_validate(entry))
            except ValidationError as e:
                log_utils.log_message(f"Skipping invalid stored post: {e}", "WARN", source="state")
        return posts

    def save_posts(self, posts: List[Post]) -> None:
        self.store.save(settings.POSTS_KEY, [p.to_store() for p in posts])
