"""Feed posting: builds posts, applies the SXP award and persists both records."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Callable, List, Optional

from tube_quiz.core.awards import Clock, award_for_post, system_clock
from tube_quiz.core.media import MediaHandle
from tube_quiz.core.models import Post, User
from tube_quiz.data_access.state import StateRepository
from tube_quiz.infra import log_utils

Notifier = Callable[[str], None]

EMPTY_POST_MESSAGE = "Please add an image/video or some text."


class EmptyPostError(ValueError):
    """A post with neither media nor caption."""

    def __init__(self, message: str = EMPTY_POST_MESSAGE):
        super().__init__(message)


@dataclass(frozen=True)
class PostResult:
    post: Post
    user: User
    award: int


def award_message(award: int, streak: int) -> str:
    return f"You earned {award} SXP! (Streak: {streak} days)"


def _new_post_id(now) -> str:
    return f"p_{int(now.timestamp() * 1000)}_{secrets.token_hex(3)}"


class FeedManager:
    """Creates posts for the local user against an injected state repository."""

    def __init__(
        self,
        state: StateRepository,
        clock: Clock = system_clock,
        notify: Optional[Notifier] = None,
    ):
        self.state = state
        self.clock = clock
        self.notify = notify

    def list_posts(self) -> List[Post]:
        """Posts newest first, as stored."""
        return self.state.load_posts()

    def create_post(self, caption: str = "", media: Optional[MediaHandle] = None) -> PostResult:
        if media is None and not caption:
            log_utils.log_message("Rejected empty post.", "WARN", source="feed")
            raise EmptyPostError()

        user = self.state.load_user()
        posts = self.state.load_posts()
        now = self.clock()

        result = award_for_post(user, now)
        post = Post(
            id=_new_post_id(now),
            user_id=user.id,
            user_name=user.name,
            caption=caption,
            created_at=now,
            media_type=media.media_type if media is not None else None,
            media_ref=media.ref if media is not None else None,
            sxp_award=result.award,
        )

        self.state.save_posts([post] + posts)
        self.state.save_user(result.user)
        log_utils.log_message(
            f"Post {post.id} created: +{result.award} SXP, streak {result.streak}.", "INFO", source="feed"
        )

        if self.notify is not None:
            self.notify(award_message(result.award, result.streak))
        return PostResult(post=post, user=result.user, award=result.award)
