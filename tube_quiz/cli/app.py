"""
Command-line shell for Tube-Quiz.

One sub-command per view of the app: take the quiz, read or post to the
feed, check the profile, progress or leaderboard, and reset progress.
State lives in the JSON store under the configured data directory.
"""
import argparse
import sys
from typing import List, Optional

from tube_quiz.config import settings
from tube_quiz.core.feed import EmptyPostError, FeedManager
from tube_quiz.core.media import MediaHandle, MediaReleasedError
from tube_quiz.core.models import Post, QuizPlan
from tube_quiz.core.plan_builder import MUSCLE_GROUPS, TIME_BUCKETS, generate_plan
from tube_quiz.core.profile import build_leaderboard, build_profile, reset_user
from tube_quiz.data_access.json_store import JsonStore
from tube_quiz.data_access.state import StateRepository
from tube_quiz.infra import log_utils

TIPS = [
    "Post daily for streak bonuses.",
    f"{settings.BASE_SXP} SXP per post, +{settings.STREAK_BONUS_SXP} SXP per consecutive day (streak bonus).",
]


def parse_age(value: str) -> int:
    """Quiz age input; anything unparseable (or zero) falls back to the default."""
    try:
        age = int(value)
    except (TypeError, ValueError):
        return settings.DEFAULT_AGE
    return age or settings.DEFAULT_AGE


def render_plan(plan: QuizPlan) -> str:
    lines = [plan.summary]
    for s in plan.sessions:
        label = MUSCLE_GROUPS.get(s.focus, s.focus)
        lines.append(f"  - {s.title} - focus: {label} - {s.duration_minutes} min")
    return "\n".join(lines)


def render_post(p: Post) -> str:
    lines = [f"{p.user_name}  {p.created_at.astimezone():%Y-%m-%d %H:%M}  +{p.sxp_award} SXP"]
    if p.caption:
        lines.append(f"  {p.caption}")
    if p.media_ref:
        lines.append(f"  [{p.media_type.value if p.media_type else 'media'}] {p.media_ref}")
    return "\n".join(lines)


def _cmd_quiz(args, state: StateRepository) -> int:
    plan = generate_plan(parse_age(args.age), args.time, args.muscle or [])
    print(render_plan(plan))
    return 0


def _cmd_feed(args, state: StateRepository) -> int:
    posts = FeedManager(state).list_posts()
    if not posts:
        print("No posts yet. Be the first!")
        return 0
    print("\n\n".join(render_post(p) for p in posts))
    return 0


def _cmd_post(args, state: StateRepository) -> int:
    manager = FeedManager(state, notify=print)
    try:
        media = MediaHandle.open(args.media) if args.media else None
    except FileNotFoundError as e:
        print(e, file=sys.stderr)
        return 1
    try:
        manager.create_post(caption=args.caption, media=media)
    except (EmptyPostError, MediaReleasedError) as e:
        print(e, file=sys.stderr)
        return 1
    finally:
        if media is not None:
            media.release()
    return 0


def _cmd_profile(args, state: StateRepository) -> int:
    view = build_profile(state.load_user(), state.load_posts())
    last = f"{view.last_post_date.astimezone():%Y-%m-%d %H:%M}" if view.last_post_date else "-"
    print(f"Name:      {view.name}")
    print(f"SXP:       {view.sxp}")
    print(f"Streak:    {view.streak} days")
    print(f"Last post: {last}")
    print(f"\nMy posts ({view.post_count})")
    for p in view.posts:
        print(f"  {p.created_at.astimezone():%Y-%m-%d %H:%M}  {p.caption}")
    return 0


def _cmd_progress(args, state: StateRepository) -> int:
    user = state.load_user()
    print(f"{user.sxp} SXP")
    print(f"Current streak: {user.streak} days")
    print("\nTips:")
    for tip in TIPS:
        print(f"  - {tip}")
    return 0


def _cmd_leaderboard(args, state: StateRepository) -> int:
    for entry in build_leaderboard(state):
        print(f"{entry.rank}. {entry.name}  {entry.sxp} SXP")
    print("\nNote: the leaderboard is local to this installation.")
    return 0


def _cmd_reset(args, state: StateRepository) -> int:
    if not args.yes:
        answer = input("Reset SXP and streak? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Reset cancelled.")
            return 1
    reset_user(state)
    print("Progress reset.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tube-quiz", description="Train smarter - earn SXP.")
    sub = parser.add_subparsers(dest="command", required=True)

    quiz = sub.add_parser("quiz", help="Generate a weekly workout plan.")
    quiz.add_argument("--age", default=str(settings.DEFAULT_AGE), help="Your age (13-100).")
    quiz.add_argument("--time", choices=list(TIME_BUCKETS), default="2-4", help="Hours per week.")
    quiz.add_argument(
        "--muscle",
        action="append",
        choices=list(MUSCLE_GROUPS),
        help="Muscle group to focus on; repeat for several. Defaults to full body.",
    )
    quiz.set_defaults(func=_cmd_quiz)

    sub.add_parser("feed", help="Show the feed, newest first.").set_defaults(func=_cmd_feed)

    post = sub.add_parser("post", help="Post to the feed and earn SXP.")
    post.add_argument("--caption", default="", help="Post text.")
    post.add_argument("--media", default=None, help="Path to an image or video.")
    post.set_defaults(func=_cmd_post)

    sub.add_parser("profile", help="Show your profile and posts.").set_defaults(func=_cmd_profile)
    sub.add_parser("progress", help="Show SXP, streak and tips.").set_defaults(func=_cmd_progress)
    sub.add_parser("leaderboard", help="Show the local leaderboard.").set_defaults(func=_cmd_leaderboard)

    reset = sub.add_parser("reset", help="Reset SXP and streak.")
    reset.add_argument("--yes", action="store_true", help="Skip the confirmation prompt.")
    reset.set_defaults(func=_cmd_reset)
    return parser


def main(argv: Optional[List[str]] = None, state: Optional[StateRepository] = None) -> int:
    """Parses CLI arguments and dispatches to the chosen view."""
    args = build_parser().parse_args(argv)
    log_utils.log_message(f"Invoked '{args.command}'.", "INFO", source="cli")

    # The store is injected so tests can swap in a MemoryStore.
    if state is None:
        state = StateRepository(JsonStore())
    return args.func(args, state)


if __name__ == "__main__":
    sys.exit(main())
