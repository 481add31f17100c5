from datetime import datetime, timedelta, timezone

import pytest

from tube_quiz.core.feed import EmptyPostError, FeedManager
from tube_quiz.core.media import MediaHandle
from tube_quiz.core.models import MediaType
from tube_quiz.data_access.memory_store import MemoryStore
from tube_quiz.data_access.state import StateRepository

DAY_1 = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def make_manager(now: datetime = DAY_1):
    store = MemoryStore()
    messages = []
    clock = FakeClock(now)
    manager = FeedManager(StateRepository(store), clock=clock, notify=messages.append)
    return manager, store, clock, messages


def test_rejects_post_without_caption_or_media():
    manager, store, _, messages = make_manager()
    with pytest.raises(EmptyPostError, match="image/video or some text"):
        manager.create_post(caption="")
    assert store.raw == {}
    assert messages == []


def test_accepts_media_without_caption(tmp_path):
    manager, _, _, messages = make_manager()
    clip = tmp_path / "squat.mp4"
    clip.write_bytes(b"\x00")

    with MediaHandle.open(clip) as media:
        result = manager.create_post(caption="", media=media)

    assert result.post.media_type == MediaType.VIDEO
    assert result.post.media_ref == clip.resolve().as_uri()
    assert result.award == 10
    assert messages == ["You earned 10 SXP! (Streak: 1 days)"]


def test_caption_only_post_has_no_media():
    manager, _, _, _ = make_manager()
    result = manager.create_post(caption="Morning run")
    assert result.post.media_type is None
    assert result.post.media_ref is None
    assert result.post.user_id == "user_local"
    assert result.post.created_at == DAY_1


def test_posts_are_prepended_and_award_persisted():
    manager, _, clock, messages = make_manager()
    first = manager.create_post(caption="day one")
    clock.now = DAY_1 + timedelta(days=1)
    second = manager.create_post(caption="day two")

    posts = manager.list_posts()
    assert [p.id for p in posts] == [second.post.id, first.post.id]
    assert first.post.id != second.post.id
    assert second.post.sxp_award == 15

    user = manager.state.load_user()
    assert user.sxp == 25
    assert user.streak == 2
    assert user.last_post_date == clock.now
    assert messages[-1] == "You earned 15 SXP! (Streak: 2 days)"


def test_same_day_posts_keep_streak():
    manager, _, clock, _ = make_manager()
    manager.create_post(caption="one")
    clock.now = DAY_1 + timedelta(minutes=30)
    manager.create_post(caption="two")

    user = manager.state.load_user()
    assert user.streak == 1
    assert user.sxp == 20


def test_image_type_for_non_video_media():
    manager, _, _, _ = make_manager()
    result = manager.create_post(media=MediaHandle("file:///tmp/pic.png", "image/png"))
    assert result.post.media_type == MediaType.IMAGE
