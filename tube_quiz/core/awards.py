"""SXP award and streak logic for feed posts. Pure functions, no store access."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Optional

from tube_quiz.config import settings
from tube_quiz.core.models import User

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current time as an aware UTC timestamp."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AwardResult:
    user: User
    award: int

    @property
    def streak(self) -> int:
        return self.user.streak


def local_date(ts: datetime) -> date:
    """Calendar date of `ts` in the local timezone; naive values are taken as local."""
    return ts.astimezone().date()


def next_streak(current: int, last_post: Optional[datetime], now: datetime) -> int:
    if last_post is None:
        return 1
    last_day = local_date(last_post)
    today = local_date(now)
    if last_day == today:
        return current
    if last_day == today - timedelta(days=1):
        return current + 1
    return 1


def award_amount(streak: int) -> int:
    bonus = min(streak - 1, settings.STREAK_BONUS_CAP) * settings.STREAK_BONUS_SXP
    return settings.BASE_SXP + max(0, bonus)


def award_for_post(user: User, now: datetime, same_day_award: Optional[bool] = None) -> AwardResult:
    """
    Apply the posting reward to `user`.

    The streak grows on a post exactly one calendar day after the last one,
    stays put on a same-day post and restarts at 1 after any longer gap.
    Whether a same-day repost still earns SXP follows
    settings.AWARD_SAME_DAY_REPOST unless `same_day_award` overrides it.
    """
    if same_day_award is None:
        same_day_award = settings.AWARD_SAME_DAY_REPOST

    streak = next_streak(user.streak, user.last_post_date, now)
    repost = user.last_post_date is not None and local_date(user.last_post_date) == local_date(now)

    award = award_amount(streak)
    if repost and not same_day_award:
        award = 0

    updated = user.model_copy(
        update={"sxp": user.sxp + award, "streak": streak, "last_post_date": now}
    )
    return AwardResult(user=updated, award=award)
