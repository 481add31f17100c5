"""Read-only projections over the user and feed: profile and leaderboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from tube_quiz.core.models import Post, User
from tube_quiz.data_access.state import StateRepository
from tube_quiz.infra import log_utils


@dataclass(frozen=True)
class ProfileView:
    name: str
    sxp: int
    streak: int
    last_post_date: Optional[datetime]
    posts: List[Post] = field(default_factory=list)

    @property
    def post_count(self) -> int:
        return len(self.posts)


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    name: str
    sxp: int


def build_profile(user: User, posts: List[Post]) -> ProfileView:
    """Profile card for `user`, with only their own posts."""
    return ProfileView(
        name=user.name,
        sxp=user.sxp,
        streak=user.streak,
        last_post_date=user.last_post_date,
        posts=[p for p in posts if p.user_id == user.id],
    )


def reset_progress(user: User) -> User:
    """Clear SXP, streak and last post date. The only way SXP goes down."""
    return user.model_copy(update={"sxp": 0, "streak": 0, "last_post_date": None})


def reset_user(state: StateRepository) -> User:
    user = reset_progress(state.load_user())
    state.save_user(user)
    log_utils.log_message(f"Progress reset for {user.id}.", "INFO", source="profile")
    return user


def build_leaderboard(state: StateRepository) -> List[LeaderboardEntry]:
    """
    Rank the known users by SXP.

    Only the local user exists, so this is always a single row read
    straight from the store.
    """
    users = [state.load_user()]
    ranked = sorted(users, key=lambda u: u.sxp, reverse=True)
    return [LeaderboardEntry(rank=i + 1, name=u.name, sxp=u.sxp) for i, u in enumerate(ranked)]
