"""Handles for media attached to a post."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Optional

from tube_quiz.core.models import MediaType


class MediaReleasedError(RuntimeError):
    """Raised when a released media handle is used."""


class MediaHandle:
    """
    A reference to a local media file, valid between `open` and `release`.

    Only the reference string ends up in the feed; the handle itself is
    dropped once the post is made or the attachment is replaced.
    """

    def __init__(self, ref: str, mime_type: Optional[str] = None):
        self._ref: Optional[str] = ref
        self.mime_type = mime_type

    @classmethod
    def open(cls, path: Path | str) -> "MediaHandle":
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"No such media file: {path}")
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(path.resolve().as_uri(), mime_type)

    @property
    def released(self) -> bool:
        return self._ref is None

    @property
    def ref(self) -> str:
        if self._ref is None:
            raise MediaReleasedError("Media handle has already been released.")
        return self._ref

    @property
    def media_type(self) -> MediaType:
        if self.mime_type and self.mime_type.startswith("video"):
            return MediaType.VIDEO
        return MediaType.IMAGE

    def release(self) -> None:
        self._ref = None

    def __enter__(self) -> "MediaHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
