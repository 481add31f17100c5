import pytest

from tube_quiz.config import settings


@pytest.fixture(autouse=True)
def isolated_project_root(tmp_path, monkeypatch):
    # Keep logs and JSON store files out of the working tree
    monkeypatch.setattr(settings, "PROJECT_ROOT", tmp_path)
    return tmp_path
