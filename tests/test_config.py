from pathlib import Path

from tube_quiz.config import Settings


def test_default_root_is_per_user_directory(monkeypatch):
    monkeypatch.delenv("PROJECT_ROOT", raising=False)
    config = Settings(_env_file=None)
    assert config.PROJECT_ROOT == Path.home() / ".tube_quiz"
    assert config.data_path == Path.home() / ".tube_quiz" / "data"
    assert config.log_path.parent == config.data_path / "logs"


def test_root_can_be_set_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("PROJECT_ROOT", str(tmp_path / "elsewhere"))
    config = Settings(_env_file=None)
    assert config.data_path == tmp_path / "elsewhere" / "data"
