from datetime import datetime, timezone
from typing import Optional

from tube_quiz.config import settings


def format_line(msg: str, level: str = "INFO", source: Optional[str] = None) -> str:
    """One log line: `[timestamp] [LEVEL] [source] message`, source omitted when unset."""
    tag = f" [{source}]" if source else ""
    return f"[{datetime.now(timezone.utc).isoformat()}] [{level}]{tag} {msg}\n"


def log_message(msg: str, level: str = "INFO", source: Optional[str] = None) -> None:
    """
    Append a timestamped message to the Tube-Quiz log.

    `source` names the component writing the line ("store", "feed", "cli", ...)
    so store failures can be told apart from user actions when reading the log.
    """
    log_file = settings.log_path
    log_file.parent.mkdir(parents=True, exist_ok=True)

    with open(log_file, "a", encoding="utf-8") as f:
        f.write(format_line(msg, level, source))
