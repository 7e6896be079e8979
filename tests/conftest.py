import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from markedit.app import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the global config at a throwaway file so tests never see user settings."""
    path = tmp_path / "markedit_config.json"
    monkeypatch.setattr(config, "GLOBAL_CONFIG", path)
    monkeypatch.delenv("MARKEDIT_LOCALE", raising=False)
    return path


@pytest.fixture(scope="session")
def app():
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])
