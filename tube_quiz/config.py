"""
Centralised config for the Tube-Quiz application.

Values are loaded from a `.env` file or from environment variables and
exposed through the singleton `settings` object.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings.

    Pydantic's BaseSettings will automatically load values from a `.env` file
    or from system environment variables, so the same code runs with
    different data directories or award rules per environment.
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", case_sensitive=False)

    # --- CORE SETTINGS ---
    # Per-user data directory; all derived paths hang off it. Set
    # PROJECT_ROOT to keep the store somewhere else.
    PROJECT_ROOT: Path = Path.home() / ".tube_quiz"
    ENVIRONMENT: str = "development"

    # --- LOCAL USER ---
    DEFAULT_USER_ID: str = "user_local"
    DEFAULT_USER_NAME: str = "You"

    # --- STORE KEYS ---
    USER_KEY: str = "user"
    POSTS_KEY: str = "posts"

    # --- SXP AWARDS ---
    BASE_SXP: int = 10
    STREAK_BONUS_SXP: int = 5  # per consecutive day after the first
    STREAK_BONUS_CAP: int = 10  # max bonus days counted
    # Literal behaviour: a second post on the same day still earns SXP.
    AWARD_SAME_DAY_REPOST: bool = True

    # --- QUIZ ---
    DEFAULT_AGE: int = 30

    # --- FILE PATHS (derived from PROJECT_ROOT) ---
    @property
    def data_path(self) -> Path:
        return self.PROJECT_ROOT / "data"

    @property
    def log_path(self) -> Path:
        return self.PROJECT_ROOT / "data/logs/tube_quiz.log"


# Create a single, importable instance of the settings
settings = Settings()
