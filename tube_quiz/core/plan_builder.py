"""Quiz-driven workout plan builder."""

from typing import Dict, List, Sequence

from tube_quiz.core.models import QuizPlan, Session

# Weekly time buckets offered by the quiz, in display order.
TIME_BUCKETS: Dict[str, str] = {
    "<2": "Less than 2 hours",
    "2-4": "2-4 hours",
    "5-7": "5-7 hours",
    ">7": "More than 7 hours",
}

MUSCLE_GROUPS: Dict[str, str] = {
    "upper": "Upper body",
    "lower": "Lower body",
    "core": "Core",
    "full": "Full body",
}

FULL_BODY = "full"

_SESSIONS_PER_BUCKET = {"<2": 2, "2-4": 3, "5-7": 4, ">7": 5}
_DEFAULT_SESSIONS = 3


def intensity_for_age(age: int) -> str:
    if age > 50:
        return "joint-friendly"
    if age < 30:
        return "high"
    return "moderate"


def toggle_muscle(selection: Sequence[str], muscle: str) -> List[str]:
    """
    Flip one muscle group in a quiz selection.

    A selected group is removed; an unselected one is appended and the
    full-body catch-all is dropped, since a specific choice replaces it.
    """
    if muscle in selection:
        return [m for m in selection if m != muscle]
    return [m for m in selection if m != FULL_BODY] + [muscle]


def generate_plan(age: int, time_per_week: str, muscles: Sequence[str]) -> QuizPlan:
    """
    Build a weekly session plan from the quiz answers.

    Sessions cycle through the selected muscle groups in order. Unknown
    time buckets get the default session count rather than an error.
    """
    intensity = intensity_for_age(age)
    count = _SESSIONS_PER_BUCKET.get(time_per_week, _DEFAULT_SESSIONS)
    duration = 30 if time_per_week == "<2" else 45
    selected = list(muscles) or [FULL_BODY]

    sessions = [
        Session(
            title=f"Session {i + 1}",
            focus=selected[i % len(selected)],
            duration_minutes=duration,
        )
        for i in range(count)
    ]
    return QuizPlan(
        summary=f"{count} sessions/week - intensity: {intensity}",
        intensity=intensity,
        sessions=sessions,
    )
