# tests/conftest.py
from pathlib import Path

import pytest


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """A settings.yaml location that never touches the project's own file."""
    return tmp_path / "settings.yaml"


@pytest.fixture
def anthem_file(tmp_path: Path) -> Path:
    path = tmp_path / "anthem.txt"
    path.write_text(
        "동해물과 백두산이\n"
        "마르고 닳도록\n"
        "하느님이 보우하사\n"
        "우리나라 만세\n",
        encoding="utf-8",
    )
    return path
