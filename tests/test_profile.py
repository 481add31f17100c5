from datetime import datetime, timezone

from tube_quiz.core.models import Post, User
from tube_quiz.core.profile import build_leaderboard, build_profile, reset_progress, reset_user
from tube_quiz.data_access.memory_store import MemoryStore
from tube_quiz.data_access.state import StateRepository

WHEN = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


def make_post(post_id: str, user_id: str = "user_local") -> Post:
    return Post(id=post_id, user_id=user_id, user_name="You", caption=post_id, created_at=WHEN, sxp_award=10)


def test_profile_only_lists_own_posts():
    user = User(id="user_local", name="You", sxp=40, streak=3, last_post_date=WHEN)
    view = build_profile(user, [make_post("p_1"), make_post("p_2", user_id="someone_else"), make_post("p_3")])
    assert [p.id for p in view.posts] == ["p_1", "p_3"]
    assert view.post_count == 2
    assert (view.sxp, view.streak, view.last_post_date) == (40, 3, WHEN)


def test_reset_progress_clears_counters_only():
    user = User(id="user_local", name="Sam", sxp=120, streak=6, last_post_date=WHEN)
    reset = reset_progress(user)
    assert (reset.sxp, reset.streak, reset.last_post_date) == (0, 0, None)
    assert (reset.id, reset.name) == ("user_local", "Sam")


def test_reset_user_persists():
    repo = StateRepository(MemoryStore())
    repo.save_user(User(id="user_local", name="You", sxp=55, streak=4, last_post_date=WHEN))
    reset_user(repo)
    assert repo.load_user().sxp == 0


def test_leaderboard_is_single_local_row():
    repo = StateRepository(MemoryStore())
    repo.save_user(User(id="user_local", name="You", sxp=85, streak=2))
    board = build_leaderboard(repo)
    assert len(board) == 1
    assert (board[0].rank, board[0].name, board[0].sxp) == (1, "You", 85)
